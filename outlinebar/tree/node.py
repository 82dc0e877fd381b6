"""Generic tree node with ownership, ordering, and collapse state.

Parents own their children through an ordered list; children keep a plain
back-reference to their parent that is only read for upward traversal.
Ordering and labels are supplied by callers (sort keys and label functions)
instead of subclass overrides.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any


def name_sort_key(node: TreeNode) -> Any:
    """Default ordering: plain name comparison."""
    return node.name


class TreeNode:
    """One node of an outline-style tree.

    ``closed`` hides descendants from rendered output without removing them
    from the structure. Cycles are not detected: callers must never append a
    node beneath one of its own descendants.
    """

    def __init__(self, name: str, closed: bool = False) -> None:
        self.name = name
        self.closed = closed
        self.children: list[TreeNode] = []
        self.parent: TreeNode | None = None

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def get_children(self) -> list[TreeNode]:
        return self.children

    def has_children(self) -> bool:
        return bool(self.children)

    def is_closed(self) -> bool:
        return self.closed

    def open(self) -> None:
        self.closed = False

    def close(self) -> None:
        self.closed = True

    def toggle(self) -> bool:
        """Flip collapse state and return the new ``closed`` value."""
        self.closed = not self.closed
        return self.closed

    def append(self, child: TreeNode) -> None:
        """Attach ``child`` as the last child of this node.

        A child that already belongs to another node is detached first so the
        parent/children relation stays consistent when nodes are moved.
        """
        if child.parent is not None:
            child.detach()
        child.parent = self
        self.children.append(child)

    def detach(self) -> None:
        """Remove this node from its parent's children."""
        parent = self.parent
        if parent is not None:
            parent.children.remove(self)
        self.parent = None

    def sort_children_rec(self, key: Callable[[TreeNode], Any] = name_sort_key) -> None:
        """Stable-sort children by ``key`` at every level below this node."""
        self.children.sort(key=key)
        for child in self.children:
            child.sort_children_rec(key)

    def select_lead(self, closed: str, opened: str, leaf: str) -> str:
        """Pick the connector glyph matching leaf/open/closed state."""
        if not self.children:
            return leaf
        if self.closed:
            return closed
        return opened

    def get_label(self) -> str:
        return self.name

    def walk(self) -> Iterator[TreeNode]:
        """Yield this node and all descendants in pre-order, ignoring collapse state."""
        yield self
        for child in self.children:
            yield from child.walk()

    def close_below(self, depth: int) -> None:
        """Close every node with children whose depth relative to this node is >= ``depth``."""
        stack: list[tuple[TreeNode, int]] = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if level >= depth and node.children:
                node.closed = True
            for child in node.children:
                stack.append((child, level + 1))

    def __repr__(self) -> str:
        return f"TreeNode({self.name!r})"
