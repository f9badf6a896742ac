"""Indent guide computation engine.

Pure functions over a ``TextDocument`` snapshot; nothing here renders or
keeps state between passes.
"""

from __future__ import annotations

from .classify import classify, indent_level, is_empty_line
from .indent_map import (
    LevelResolver,
    NextNonEmptyScan,
    active_block_lines,
    build_indent_map,
    build_indent_map_for_lines,
    find_next_non_empty,
    line_level,
    previous_non_empty_level,
)
from .interpolate import interpolate
from .types import IndentEntry, LineIndent

__all__ = [
    "IndentEntry",
    "LevelResolver",
    "LineIndent",
    "NextNonEmptyScan",
    "active_block_lines",
    "build_indent_map",
    "build_indent_map_for_lines",
    "classify",
    "find_next_non_empty",
    "indent_level",
    "interpolate",
    "is_empty_line",
    "line_level",
    "previous_non_empty_level",
]
