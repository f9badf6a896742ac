"""Demand-driven recompute hook for indent markers.

The host calls ``IndentMarkerView.update`` from its own change notification.
The view only remembers what the last map was built from, so it can tell
whether a new pass is needed. It holds on to the last document itself: a new
document object always means a new pass, even when it reuses the version.

``rebuilds`` counts completed passes for hosts that want to trace recompute
frequency; nothing in the view depends on it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config import IndentMarkerConfig
from ..document import TextDocument
from ..engine import IndentEntry, build_indent_map

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PassInputs:
    """Everything one map build depends on."""

    document_version: int
    ranges: tuple[tuple[int, int], ...]
    indent_unit: int
    cursor_line: int | None


class IndentMarkerView:
    """Hold the current indent map and rebuild it when its inputs change."""

    def __init__(self, config: IndentMarkerConfig | None = None) -> None:
        self.config = config or IndentMarkerConfig()
        self.entries: dict[int, IndentEntry] = {}
        self.rebuilds = 0
        self._document: TextDocument | None = None
        self._inputs: PassInputs | None = None

    def set_config(self, config: IndentMarkerConfig) -> None:
        """Swap settings; the next ``update`` always rebuilds."""
        self.config = config
        self._inputs = None
        self._document = None

    def _inputs_for(
        self,
        document: TextDocument,
        ranges: list[tuple[int, int]] | tuple[tuple[int, int], ...],
        indent_unit: int,
        cursor_line: int | None,
    ) -> PassInputs:
        return PassInputs(
            document_version=document.version,
            ranges=tuple((from_, to) for from_, to in ranges),
            indent_unit=indent_unit,
            # Cursor moves only matter when the active block is highlighted.
            cursor_line=cursor_line if self.config.highlight_active_block else None,
        )

    def update(
        self,
        document: TextDocument,
        ranges: list[tuple[int, int]] | tuple[tuple[int, int], ...],
        indent_unit: int | None = None,
        cursor_line: int | None = None,
    ) -> bool:
        """Rebuild the map if any input changed; return whether it did."""
        unit = indent_unit if indent_unit is not None else self.config.indent_unit
        inputs = self._inputs_for(document, ranges, unit, cursor_line)
        if document is self._document and inputs == self._inputs:
            return False

        if self._inputs is not None:
            logger.debug("rebuilding indent map: %s -> %s", self._inputs, inputs)
        self.entries = build_indent_map(
            document,
            inputs.ranges,
            unit,
            cursor_line=inputs.cursor_line,
            highlight_active_block=self.config.highlight_active_block,
        )
        self._inputs = inputs
        self._document = document
        self.rebuilds += 1
        return True

    def entry(self, line_number: int) -> IndentEntry | None:
        """Return the entry for a line, or ``None`` when it has no guides."""
        entry = self.entries.get(line_number)
        if entry is None or entry.level == 0:
            return None
        return entry
