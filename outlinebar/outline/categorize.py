"""Regroup an outline's top level into Classes/Functions/Variables buckets."""

from __future__ import annotations

from typing import NamedTuple

from ..lang.types import ItemKind
from ..tree.node import TreeNode
from ..tree.rendering import LabelFn, render_with_style
from ..tree.styles import DEFAULT_STYLE_NAME, get_style
from ..tree.types import SEPARATOR_ROW, OutlineRow
from .node import OutlineNode


class Buckets(NamedTuple):
    classes: OutlineNode
    functions: OutlineNode
    variables: OutlineNode


def bucketize(tree: TreeNode) -> Buckets:
    """Move each direct child of ``tree`` into a bucket matching its kind.

    Moved nodes keep their whole subtree. Children without a declaration kind
    stay under ``tree``.
    """
    buckets = Buckets(OutlineNode("Classes"), OutlineNode("Functions"), OutlineNode("Variables"))
    by_kind = {
        ItemKind.CLASS: buckets.classes,
        ItemKind.FUNCTION: buckets.functions,
        ItemKind.CONSTANT: buckets.variables,
    }
    for child in list(tree.get_children()):
        bucket = by_kind.get(getattr(child, "kind", ItemKind.NONE))
        if bucket is not None:
            bucket.append(child)
    return buckets


def render_buckets(
    buckets: Buckets,
    style_name: str = DEFAULT_STYLE_NAME,
    spacing: int = 0,
    label: LabelFn | None = None,
) -> list[OutlineRow]:
    """Render the three buckets with blank separator rows between them."""
    style = get_style(style_name, spacing)
    rows: list[OutlineRow] = []
    for idx, bucket in enumerate(buckets):
        if idx:
            rows.append(SEPARATOR_ROW)
        rows.extend(render_with_style(bucket, style, label=label))
    return rows


def render_navbar(
    tree: TreeNode,
    style_name: str = DEFAULT_STYLE_NAME,
    spacing: int = 0,
    label: LabelFn | None = None,
) -> list[OutlineRow]:
    """Render the navbar display list for ``tree`` without consuming it.

    Top-level nodes are bucketed for the render and then handed back to
    ``tree`` in their original order, so collapse state toggled through the
    returned rows shows up when the same tree is rendered again.
    """
    top_level = list(tree.get_children())
    rows = render_buckets(bucketize(tree), style_name, spacing, label=label)
    for child in top_level:
        tree.append(child)
    return rows
