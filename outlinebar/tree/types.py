"""Row datatype produced by tree renderers."""

from __future__ import annotations

from dataclasses import dataclass

from .node import TreeNode


@dataclass(frozen=True)
class OutlineRow:
    """One display row; ``node`` is ``None`` for non-interactive separator rows."""

    text: str
    node: TreeNode | None = None

    @property
    def is_separator(self) -> bool:
        return self.node is None


SEPARATOR_ROW = OutlineRow("", None)
