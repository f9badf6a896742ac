"""Read-only line model over a text snapshot.

Lines are 1-based. A line's ``to`` offset excludes its line break, so
``to - from_ == len(text)``. A CRLF break counts as one line break and the
next line starts two offsets later. Lookups outside the document raise
``IndexError``.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Line:
    """One document line with absolute character offsets."""

    number: int
    from_: int
    to: int
    text: str


class TextDocument:
    """Immutable document snapshot with offset and line-number lookup."""

    def __init__(self, text: str, version: int = 0) -> None:
        self.version = version
        self._texts: list[str] = []
        self._starts: list[int] = []
        offset = 0
        for raw in text.split("\n"):
            self._starts.append(offset)
            self._texts.append(raw[:-1] if raw.endswith("\r") else raw)
            offset += len(raw) + 1
        self.length = offset - 1

    @classmethod
    def from_lines(cls, lines: list[str], version: int = 0) -> TextDocument:
        """Build a document whose lines are exactly ``lines``."""
        return cls("\n".join(lines), version=version)

    @property
    def line_count(self) -> int:
        """Number of lines; an empty document still has one empty line."""
        return len(self._texts)

    def line(self, number: int) -> Line:
        """Return line ``number`` (1-based)."""
        if number < 1 or number > len(self._texts):
            raise IndexError(f"line {number} out of range 1..{len(self._texts)}")
        start = self._starts[number - 1]
        text = self._texts[number - 1]
        return Line(number=number, from_=start, to=start + len(text), text=text)

    def line_at(self, offset: int) -> Line:
        """Return the line containing character ``offset``."""
        if offset < 0 or offset > self.length:
            raise IndexError(f"offset {offset} out of range 0..{self.length}")
        return self.line(bisect_right(self._starts, offset))

    def lines_in_range(self, from_: int, to: int) -> Iterator[Line]:
        """Yield every line whose span intersects ``[from_, to]``."""
        number = self.line_at(from_).number
        last = self.line_at(to).number
        while number <= last:
            yield self.line(number)
            number += 1

    def line_span(self, first: int, last: int) -> tuple[int, int]:
        """Return the ``(from, to)`` offsets covering lines ``first..last``."""
        return self.line(first).from_, self.line(last).to

    def __iter__(self) -> Iterator[Line]:
        for number in range(1, self.line_count + 1):
            yield self.line(number)
