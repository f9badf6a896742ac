"""Indentation map construction for a set of visible ranges.

Non-empty lines are classified directly. Empty lines take their guide count
from the nearest non-empty neighbours, looking outside the visible ranges when
needed. The map is rebuilt from scratch on every pass.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..document import TextDocument
from .classify import classify, is_empty_line
from .interpolate import interpolate
from .types import IndentEntry

logger = logging.getLogger(__name__)


def find_next_non_empty(document: TextDocument, start: int, indent_unit: int) -> tuple[int, int]:
    """Return ``(line_number, level)`` of the first non-empty line at or after ``start``.

    Past the end of the document this is ``(line_count + 1, 0)``.
    """
    number = start
    while number <= document.line_count:
        text = document.line(number).text
        if not is_empty_line(text):
            return number, classify(text, indent_unit).level
        number += 1
    return document.line_count + 1, 0


def previous_non_empty_level(document: TextDocument, number: int, indent_unit: int) -> int:
    """Return the level of the closest non-empty line before ``number``, or 0."""
    candidate = number - 1
    while candidate >= 1:
        text = document.line(candidate).text
        if not is_empty_line(text):
            return classify(text, indent_unit).level
        candidate -= 1
    return 0


class NextNonEmptyScan:
    """Forward lookahead shared by every line of an empty-line run.

    The scan result is kept together with the line it found; it is reused
    until a caller asks about a line at or past that one. ``scans`` counts the
    forward scans actually performed and is only there for tracing.
    """

    def __init__(self, document: TextDocument, indent_unit: int) -> None:
        self.document = document
        self.indent_unit = indent_unit
        self.found_line = 0
        self.level = 0
        self.scans = 0

    def level_after(self, number: int) -> int:
        """Return the level of the first non-empty line after line ``number``."""
        if self.found_line <= number:
            self.found_line, self.level = find_next_non_empty(self.document, number + 1, self.indent_unit)
            self.scans += 1
        return self.level


class LevelResolver:
    """Resolve the level of arbitrary document lines, memoized per pass.

    All lines of an empty run share one interpolated level, so a run is
    measured once and cached as a whole.
    """

    def __init__(self, document: TextDocument, indent_unit: int, known: dict[int, int] | None = None) -> None:
        self.document = document
        self.indent_unit = indent_unit
        self._levels: dict[int, int] = dict(known or {})

    def level_of(self, number: int) -> int:
        """Return the guide count line ``number`` displays."""
        cached = self._levels.get(number)
        if cached is not None:
            return cached

        text = self.document.line(number).text
        if not is_empty_line(text):
            level = classify(text, self.indent_unit).level
            self._levels[number] = level
            return level

        first = number
        while first > 1 and is_empty_line(self.document.line(first - 1).text):
            first -= 1
        last = number
        while last < self.document.line_count and is_empty_line(self.document.line(last + 1).text):
            last += 1

        prev_level = classify(self.document.line(first - 1).text, self.indent_unit).level if first > 1 else 0
        next_level = (
            classify(self.document.line(last + 1).text, self.indent_unit).level
            if last < self.document.line_count
            else 0
        )
        level = interpolate(prev_level, next_level)
        for run_line in range(first, last + 1):
            self._levels[run_line] = level
        return level


def line_level(document: TextDocument, number: int, indent_unit: int) -> int:
    """Return the resolved level of a single line."""
    return LevelResolver(document, indent_unit).level_of(number)


def active_block_lines(
    resolver: LevelResolver,
    cursor_line: int,
    first: int = 1,
    last: int | None = None,
) -> tuple[int, int, int] | None:
    """Find the block enclosing ``cursor_line``.

    Returns ``(active, top, bottom)``: the cursor's level and the contiguous
    run of lines at or above it, clamped to ``first..last``. Returns ``None``
    when the cursor sits on a line without guides.
    """
    if last is None:
        last = resolver.document.line_count
    active = resolver.level_of(cursor_line)
    if active == 0:
        return None

    top = cursor_line
    while top > first and resolver.level_of(top - 1) >= active:
        top -= 1
    bottom = cursor_line
    while bottom < last and resolver.level_of(bottom + 1) >= active:
        bottom += 1
    return active, top, bottom


def _add_range(
    document: TextDocument,
    from_: int,
    to: int,
    indent_unit: int,
    entries: dict[int, IndentEntry],
) -> None:
    """Add an entry for every line intersecting ``[from_, to]``."""
    lookahead = NextNonEmptyScan(document, indent_unit)
    prev_level: int | None = None

    for line in document.lines_in_range(from_, to):
        if is_empty_line(line.text):
            if prev_level is None:
                prev_level = previous_non_empty_level(document, line.number, indent_unit)
            entry = IndentEntry(level=interpolate(prev_level, lookahead.level_after(line.number)))
        else:
            indent = classify(line.text, indent_unit)
            prev_level = indent.level
            entry = IndentEntry(level=indent.level, markers=indent.guide_offsets)
        entries.setdefault(line.number, entry)

    logger.debug("range %d..%d: %d lookahead scan(s)", from_, to, lookahead.scans)


def _mark_active_block(
    document: TextDocument,
    entries: dict[int, IndentEntry],
    indent_unit: int,
    cursor_line: int,
) -> None:
    """Attach ``active`` to every entry inside the cursor's block."""
    resolver = LevelResolver(document, indent_unit, {number: entry.level for number, entry in entries.items()})
    block = active_block_lines(
        resolver,
        cursor_line,
        first=min(min(entries), cursor_line),
        last=max(max(entries), cursor_line),
    )
    if block is None:
        return

    active, top, bottom = block
    logger.debug("cursor line %d: active guide %d spans lines %d..%d", cursor_line, active, top, bottom)
    for number in range(max(top, min(entries)), min(bottom, max(entries)) + 1):
        entry = entries.get(number)
        if entry is not None:
            entries[number] = entry.with_active(active)


def build_indent_map(
    document: TextDocument,
    ranges: Iterable[tuple[int, int]],
    indent_unit: int,
    cursor_line: int | None = None,
    highlight_active_block: bool = True,
) -> dict[int, IndentEntry]:
    """Build the line-number to ``IndentEntry`` map for ``ranges``.

    ``ranges`` are ``(from, to)`` character offsets; every line they touch gets
    exactly one entry. ``indent_unit`` must be positive and ``cursor_line``
    inside the document; neither is checked here.
    """
    entries: dict[int, IndentEntry] = {}
    for from_, to in ranges:
        _add_range(document, from_, to, indent_unit, entries)

    if highlight_active_block and cursor_line is not None and entries:
        _mark_active_block(document, entries, indent_unit, cursor_line)

    logger.debug("built %d indent entries (indent unit %d)", len(entries), indent_unit)
    return dict(sorted(entries.items()))


def build_indent_map_for_lines(
    document: TextDocument,
    first: int,
    last: int,
    indent_unit: int,
    cursor_line: int | None = None,
    highlight_active_block: bool = True,
) -> dict[int, IndentEntry]:
    """Convenience wrapper covering whole lines ``first..last``."""
    return build_indent_map(
        document,
        [document.line_span(first, last)],
        indent_unit,
        cursor_line=cursor_line,
        highlight_active_block=highlight_active_block,
    )
