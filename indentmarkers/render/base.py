"""Renderer strategy interface shared by all guide renderers."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import IndentMarkerConfig
from ..engine.types import IndentEntry


@dataclass(frozen=True)
class Guide:
    """One guide column a renderer should draw."""

    index: int
    offset: int
    active: bool
    thickness: int


def visible_guides(entry: IndentEntry, unit_width: int, config: IndentMarkerConfig) -> list[Guide]:
    """Return the guides to draw for ``entry`` after config filters.

    Offsets are character offsets for lines with markers and unit columns for
    empty lines. ``codeOnly`` markers skip empty lines entirely.
    """
    if entry.level <= 0:
        return []
    if not entry.markers and config.marker_type == "codeOnly":
        return []

    highlight = config.highlight_active_block
    guides: list[Guide] = []
    for index in range(config.first_visible_guide(), entry.level + 1):
        if entry.markers:
            offset = entry.markers[index - 1]
        else:
            offset = (index - 1) * unit_width
        active = highlight and entry.active == index
        guides.append(
            Guide(
                index=index,
                offset=offset,
                active=active,
                thickness=config.effective_active_thickness if active else config.thickness,
            )
        )
    return guides


class GuideRenderer:
    """Turn one ``IndentEntry`` into renderer-specific output."""

    def render(self, entry: IndentEntry, unit_width: int, config: IndentMarkerConfig, line_text: str = ""):
        raise NotImplementedError
