"""Terminal guide palettes and selection helpers.

Themes only color the guide glyphs. Syntax highlighting style for source code
remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GuideTheme:
    """Semantic ANSI palette used by the terminal guide renderer."""

    name: str
    reset: str
    guide: str
    active_guide: str
    guide_char: str = "│"
    active_guide_char: str = "│"
    bold_active_char: str = "┃"


DEFAULT_THEME = GuideTheme(
    name="default",
    reset="\033[0m",
    guide="\033[38;5;239m",
    active_guide="\033[38;5;250m",
)

OCEAN_THEME = GuideTheme(
    name="ocean",
    reset="\033[0m",
    guide="\033[2;38;5;31m",
    active_guide="\033[38;5;45m",
)

PLAIN_THEME = GuideTheme(
    name="plain",
    reset="",
    guide="",
    active_guide="",
    guide_char="|",
    active_guide_char="|",
    bold_active_char="!",
)

_THEMES: dict[str, GuideTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> GuideTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "GuideTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
