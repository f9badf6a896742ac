"""Renderer strategies over ``IndentEntry``.

Renderers never change ``level``/``active``; they only decide how the guides
look. The first-guide and code-only filters live here for the same reason.
"""

from __future__ import annotations

from .base import Guide, GuideRenderer, visible_guides
from .css import CssBackgroundRenderer, css_declarations
from .terminal import TerminalGuideRenderer, indent_columns, leading_whitespace

__all__ = [
    "CssBackgroundRenderer",
    "Guide",
    "GuideRenderer",
    "TerminalGuideRenderer",
    "css_declarations",
    "indent_columns",
    "leading_whitespace",
    "visible_guides",
]
