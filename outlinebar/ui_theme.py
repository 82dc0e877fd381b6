"""UI theme definitions and selection helpers.

Themes are ANSI palettes for terminal output of outline rows. Glyph shapes
are chosen separately through tree style presets.
"""

from __future__ import annotations

from dataclasses import dataclass

from .lang.types import ItemKind


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the outline printer."""

    name: str
    reset: str
    reverse: str
    bucket: str
    kind_class: str
    kind_function: str
    kind_variable: str

    def color_for_kind(self, kind: ItemKind) -> str:
        if kind == ItemKind.CLASS:
            return self.kind_class
        if kind == ItemKind.FUNCTION:
            return self.kind_function
        if kind == ItemKind.CONSTANT:
            return self.kind_variable
        return self.bucket


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    bucket="\033[1;34m",
    kind_class="\033[38;5;229m",
    kind_function="\033[38;5;110m",
    kind_variable="\033[38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    bucket="\033[1;38;5;45m",
    kind_class="\033[38;5;153m",
    kind_function="\033[38;5;117m",
    kind_variable="\033[38;5;73m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    bucket="",
    kind_class="",
    kind_function="",
    kind_variable="",
)

_THEMES: dict[str, UITheme] = {
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


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
