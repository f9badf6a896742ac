"""Shared engine datatypes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LineIndent:
    """Classification of one non-empty line.

    ``boundaries`` holds the character offset just past each completed indent
    level, so ``level == len(boundaries)`` always holds.
    """

    level: int
    boundaries: tuple[int, ...] = ()

    @property
    def guide_offsets(self) -> tuple[int, ...]:
        """Return the character offset where each guide column starts."""
        if not self.boundaries:
            return ()
        return (0, *self.boundaries[:-1])


@dataclass(frozen=True)
class IndentEntry:
    """Per-line result consumed by renderers.

    ``active`` is the 1-based guide column of the block holding the cursor.
    ``markers`` is empty for empty lines, whose guides sit on unit columns.
    """

    level: int
    active: int | None = None
    markers: tuple[int, ...] = ()

    def with_active(self, active: int) -> IndentEntry:
        """Return a copy marked with ``active``."""
        return IndentEntry(level=self.level, active=active, markers=self.markers)
