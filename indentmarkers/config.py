"""Indent marker configuration.

Values are combined the way editor extensions combine facet inputs: for every
field the first source that provides it wins, and defaults fill the rest.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Mapping

MARKER_TYPES = ("fullScope", "codeOnly")
DEFAULT_INDENT_UNIT = 4


@dataclass(frozen=True)
class MarkerColors:
    """CSS colors for inactive and active guides per theme brightness."""

    light: str = "#F0F1F2"
    dark: str = "#2B3245"
    active_light: str = "#E4E5E6"
    active_dark: str = "#3C445C"


@dataclass(frozen=True)
class IndentMarkerConfig:
    """Settings consumed by renderers and the recompute hook."""

    highlight_active_block: bool = True
    hide_first_indent: bool = False
    marker_type: str = "fullScope"
    thickness: int = 1
    active_thickness: int | None = None
    colors: MarkerColors = field(default_factory=MarkerColors)
    indent_unit: int = DEFAULT_INDENT_UNIT

    def __post_init__(self) -> None:
        if self.marker_type not in MARKER_TYPES:
            raise ValueError(f"unknown marker type: {self.marker_type!r}")
        if self.indent_unit <= 0:
            raise ValueError("indent unit must be >= 1")
        if self.thickness <= 0:
            raise ValueError("thickness must be >= 1")
        if self.active_thickness is not None and self.active_thickness <= 0:
            raise ValueError("active thickness must be >= 1")

    @property
    def show_first_indent(self) -> bool:
        return not self.hide_first_indent

    @property
    def effective_active_thickness(self) -> int:
        """Active guide thickness, falling back to the regular one."""
        return self.active_thickness if self.active_thickness is not None else self.thickness

    def first_visible_guide(self) -> int:
        """Return the 1-based index of the outermost guide that is drawn."""
        return 2 if self.hide_first_indent else 1


_FIELD_NAMES = tuple(f.name for f in fields(IndentMarkerConfig))


def combine_config(*sources: Mapping[str, object] | None) -> IndentMarkerConfig:
    """Merge partial settings into one config; earlier sources win.

    ``None`` values count as not provided. A ``colors`` mapping is merged per
    color key the same way.
    """
    merged: dict[str, object] = {}
    color_values: dict[str, str] = {}
    for source in sources:
        if not source:
            continue
        for name in _FIELD_NAMES:
            value = source.get(name)
            if value is None:
                continue
            if name == "colors":
                color_values.update(
                    {key: val for key, val in _colors_mapping(value).items() if key not in color_values}
                )
                continue
            merged.setdefault(name, value)

    config = IndentMarkerConfig(**merged)
    if color_values:
        config = replace(config, colors=replace(config.colors, **color_values))
    return config


def _colors_mapping(value: object) -> dict[str, str]:
    """Normalize a ``MarkerColors`` or mapping into known string color keys."""
    if isinstance(value, MarkerColors):
        return {f.name: getattr(value, f.name) for f in fields(MarkerColors)}
    if not isinstance(value, Mapping):
        return {}
    known = {f.name for f in fields(MarkerColors)}
    return {key: val for key, val in value.items() if key in known and isinstance(val, str)}


__all__ = [
    "DEFAULT_INDENT_UNIT",
    "IndentMarkerConfig",
    "MARKER_TYPES",
    "MarkerColors",
    "combine_config",
]
