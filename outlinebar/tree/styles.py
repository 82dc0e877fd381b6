"""Named glyph presets for tree rendering.

A preset maps each rendering role (root row, first/last/middle child, in
leaf/open/closed variants, plus the ``link`` and ``empty`` padding fillers) to
a literal string. Presets are immutable; ``get_style`` returns a padded copy.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace


class UnknownStyleError(LookupError):
    """Raised when a style preset name is not registered."""

    def __init__(self, name: str, available: tuple[str, ...]) -> None:
        super().__init__(f"unknown tree style {name!r} (available: {', '.join(available)})")
        self.name = name
        self.available = available


@dataclass(frozen=True)
class TreeStyle:
    """Glyph strings for every rendering role of one preset."""

    name: str
    root: str
    root_open: str
    root_closed: str
    last: str
    last_open: str
    last_closed: str
    first: str
    first_open: str
    first_closed: str
    nth: str
    nth_open: str
    nth_closed: str
    link: str
    empty: str
    fill: str = " "

    def padded(self, spacing: int) -> TreeStyle:
        """Return a copy with each glyph right-padded by ``spacing`` fill characters."""
        if spacing < 0:
            raise ValueError("spacing must be >= 0")
        if spacing == 0:
            return self
        pad = self.fill * spacing
        changes = {key: getattr(self, key) + pad for key in GLYPH_KEYS}
        return replace(self, **changes)

    def as_dict(self) -> dict[str, str]:
        data = asdict(self)
        return {key: data[key] for key in GLYPH_KEYS}


GLYPH_KEYS: tuple[str, ...] = tuple(f.name for f in fields(TreeStyle) if f.name not in {"name", "fill"})


BARE_STYLE = TreeStyle(
    name="bare",
    root="  ",
    root_open="- ",
    root_closed="+ ",
    last="  ",
    last_open="- ",
    last_closed="+ ",
    first="  ",
    first_open="- ",
    first_closed="+ ",
    nth="  ",
    nth_open="- ",
    nth_closed="+ ",
    link="  ",
    empty="  ",
)

ASCII_STYLE = TreeStyle(
    name="ascii",
    root="*  ",
    root_open="v  ",
    root_closed=">  ",
    last="`- ",
    last_open="`v ",
    last_closed="`> ",
    first="|- ",
    first_open="|v ",
    first_closed="|> ",
    nth="|- ",
    nth_open="|v ",
    nth_closed="|> ",
    link="|  ",
    empty="   ",
)

BOX_STYLE = TreeStyle(
    name="box",
    root="·  ",
    root_open="▾  ",
    root_closed="▸  ",
    last="└─ ",
    last_open="└▾ ",
    last_closed="└▸ ",
    first="├─ ",
    first_open="├▾ ",
    first_closed="├▸ ",
    nth="├─ ",
    nth_open="├▾ ",
    nth_closed="├▸ ",
    link="│  ",
    empty="   ",
)

ROUNDED_STYLE = TreeStyle(
    name="rounded",
    root="·  ",
    root_open="▾  ",
    root_closed="▸  ",
    last="╰─ ",
    last_open="╰▾ ",
    last_closed="╰▸ ",
    first="╭─ ",
    first_open="╭▾ ",
    first_closed="╭▸ ",
    nth="├─ ",
    nth_open="├▾ ",
    nth_closed="├▸ ",
    link="│  ",
    empty="   ",
)

DEFAULT_STYLE_NAME = BARE_STYLE.name

_STYLES: dict[str, TreeStyle] = {
    BARE_STYLE.name: BARE_STYLE,
    ASCII_STYLE.name: ASCII_STYLE,
    BOX_STYLE.name: BOX_STYLE,
    ROUNDED_STYLE.name: ROUNDED_STYLE,
}


def available_style_names() -> tuple[str, ...]:
    """Return registered preset names."""
    return tuple(sorted(_STYLES.keys()))


def get_style(name: str, spacing: int = 0) -> TreeStyle:
    """Return preset ``name`` padded by ``spacing``.

    Unknown names raise ``UnknownStyleError`` rather than silently falling
    back to a default preset.
    """
    style = _STYLES.get(name)
    if style is None:
        raise UnknownStyleError(name, available_style_names())
    return style.padded(spacing)


__all__ = [
    "TreeStyle",
    "UnknownStyleError",
    "GLYPH_KEYS",
    "BARE_STYLE",
    "ASCII_STYLE",
    "BOX_STYLE",
    "ROUNDED_STYLE",
    "DEFAULT_STYLE_NAME",
    "available_style_names",
    "get_style",
]
