"""Indentation guide computation for text editors and terminal viewers.

The engine lives in ``indentmarkers.engine``; renderers and the terminal
front end build on it. ``main`` is imported lazily to keep imports light.
"""

from __future__ import annotations

from .config import IndentMarkerConfig, MarkerColors, combine_config
from .document import Line, TextDocument
from .engine import IndentEntry, build_indent_map, classify, interpolate


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "IndentEntry",
    "IndentMarkerConfig",
    "Line",
    "MarkerColors",
    "TextDocument",
    "build_indent_map",
    "classify",
    "combine_config",
    "interpolate",
    "main",
]
