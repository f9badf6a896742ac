"""CSS background renderer.

Each guide becomes one ``linear-gradient`` layer, sized to the guide thickness
and positioned at its character column, so a line element can paint all of
its guides without extra DOM nodes.
"""

from __future__ import annotations

from ..config import IndentMarkerConfig
from ..engine.types import IndentEntry
from .base import GuideRenderer, visible_guides


class CssBackgroundRenderer(GuideRenderer):
    """Produce CSS declarations painting guides as background layers."""

    def __init__(self, dark: bool = False) -> None:
        self.dark = dark

    def _color(self, config: IndentMarkerConfig, active: bool) -> str:
        colors = config.colors
        if self.dark:
            return colors.active_dark if active else colors.dark
        return colors.active_light if active else colors.light

    def render(
        self,
        entry: IndentEntry,
        unit_width: int,
        config: IndentMarkerConfig,
        line_text: str = "",
    ) -> dict[str, str]:
        """Return CSS properties for one line; empty when nothing is drawn."""
        guides = visible_guides(entry, unit_width, config)
        if not guides:
            return {}

        images: list[str] = []
        sizes: list[str] = []
        positions: list[str] = []
        for guide in guides:
            color = self._color(config, guide.active)
            images.append(f"linear-gradient({color}, {color})")
            sizes.append(f"{guide.thickness}px 100%")
            positions.append(f"{guide.offset}ch 0")

        return {
            "background-image": ", ".join(images),
            "background-size": ", ".join(sizes),
            "background-position": ", ".join(positions),
            "background-repeat": "no-repeat",
        }


def css_declarations(properties: dict[str, str]) -> str:
    """Serialize properties into an inline ``style`` attribute value."""
    return " ".join(f"{name}: {value};" for name, value in properties.items())
