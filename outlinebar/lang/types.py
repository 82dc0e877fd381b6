"""Shared declaration datatypes for item matchers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class ItemKind(IntEnum):
    """Declaration kind; numeric order is the sibling sort order."""

    NONE = 0
    CLASS = 1
    FUNCTION = 2
    CONSTANT = 3

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS: dict[ItemKind, str] = {
    ItemKind.NONE: "None",
    ItemKind.CLASS: "Class",
    ItemKind.FUNCTION: "Function",
    ItemKind.CONSTANT: "Variable",
}


@dataclass(frozen=True)
class ItemMatch:
    """Declaration candidate recognized on a single source line."""

    name: str
    kind: ItemKind
    indent: int


ItemMatcher = Callable[[str], Optional[ItemMatch]]
