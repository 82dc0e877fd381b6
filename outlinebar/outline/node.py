"""Outline node: a tree node carrying declaration kind, line, and indent."""

from __future__ import annotations

from typing import Any

from ..lang.types import ItemKind, ItemMatch
from ..tree.node import TreeNode

KIND_MARKERS: dict[ItemKind, str] = {
    ItemKind.NONE: "",
    ItemKind.CLASS: "C ",
    ItemKind.FUNCTION: "f ",
    ItemKind.CONSTANT: "v ",
}


class OutlineNode(TreeNode):
    """Declaration node; ``line`` is 1-based, or -1 for synthetic nodes."""

    def __init__(
        self,
        name: str,
        kind: ItemKind = ItemKind.NONE,
        indent: int = 0,
        line: int = -1,
        closed: bool = False,
    ) -> None:
        super().__init__(name, closed)
        self.kind = ItemKind(kind)
        self.indent = indent
        self.line = line

    @classmethod
    def from_match(cls, item: ItemMatch, line: int) -> OutlineNode:
        return cls(item.name, item.kind, item.indent, line)

    def __repr__(self) -> str:
        return f"OutlineNode({int(self.kind)}, {self.name}, {self.line}, {self.indent})"


def outline_sort_key(node: TreeNode) -> Any:
    """Order by kind (None < Class < Function < Constant), then by name."""
    return (getattr(node, "kind", ItemKind.NONE), node.name)


def kind_marker_label(node: TreeNode) -> str:
    """Label prefixed with a one-letter kind marker (``C``, ``f``, ``v``)."""
    kind = getattr(node, "kind", ItemKind.NONE)
    return KIND_MARKERS[kind] + node.get_label()
