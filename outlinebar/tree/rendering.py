"""Flatten a tree into display rows using a glyph style."""

from __future__ import annotations

from collections.abc import Callable

from .node import TreeNode
from .styles import DEFAULT_STYLE_NAME, TreeStyle, get_style
from .types import OutlineRow

LabelFn = Callable[[TreeNode], str]


def _default_label(node: TreeNode) -> str:
    return node.get_label()


def _lead_for(node: TreeNode, style: TreeStyle, is_last: bool, is_first_of_root: bool) -> str:
    if is_last:
        return node.select_lead(style.last_closed, style.last_open, style.last)
    if is_first_of_root:
        return node.select_lead(style.first_closed, style.first_open, style.first)
    return node.select_lead(style.nth_closed, style.nth_open, style.nth)


def render_with_style(
    root: TreeNode,
    style: TreeStyle,
    hide_root: bool = False,
    label: LabelFn | None = None,
) -> list[OutlineRow]:
    """Render ``root`` pre-order into rows, skipping descendants of closed nodes.

    Row text is ``padding + lead + label``. Padding grows by ``style.empty``
    below a last sibling and by ``style.link`` below any other sibling, so
    vertical connectors continue only where later siblings follow.
    """
    label_fn = label or _default_label
    rows: list[OutlineRow] = []

    def walk(node: TreeNode, padding: str, is_last: bool, is_first_of_root: bool) -> None:
        lead = _lead_for(node, style, is_last, is_first_of_root)
        rows.append(OutlineRow(padding + lead + label_fn(node), node))
        if node.is_closed():
            return
        child_padding = padding + (style.empty if is_last else style.link)
        children = node.get_children()
        for idx, child in enumerate(children):
            walk(child, child_padding, idx == len(children) - 1, False)

    if hide_root:
        padding = ""
    else:
        lead = root.select_lead(style.root_closed, style.root_open, style.root)
        rows.append(OutlineRow(lead + label_fn(root), root))
        padding = style.empty

    if root.is_closed():
        return rows

    children = root.get_children()
    for idx, child in enumerate(children):
        walk(child, padding, idx == len(children) - 1, idx == 0 and not hide_root)
    return rows


def render_tree(
    root: TreeNode,
    style_name: str = DEFAULT_STYLE_NAME,
    spacing: int = 0,
    hide_root: bool = False,
    label: LabelFn | None = None,
) -> list[OutlineRow]:
    """Resolve ``style_name`` and render ``root``; unknown styles raise ``UnknownStyleError``."""
    return render_with_style(root, get_style(style_name, spacing), hide_root=hide_root, label=label)
