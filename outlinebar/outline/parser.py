"""Indentation-driven outline construction.

Nesting is rebuilt from indentation deltas alone: each matched line is
attached relative to the most recent node seen at the previous indent level.
Mixed tab/space indentation is counted character by character and is not
detected, so it can yield well-formed but wrong nesting.
"""

from __future__ import annotations

import logging

from ..lang.python import match_python_item
from ..lang.types import ItemMatcher
from .node import OutlineNode, outline_sort_key

logger = logging.getLogger(__name__)

ROOT_NAME = "/"


def build_outline(source: str, match_item: ItemMatcher = match_python_item) -> OutlineNode:
    """Build a sorted outline tree for ``source`` and return its ``/`` root."""
    root = OutlineNode(ROOT_NAME)
    parents_by_indent: dict[int, OutlineNode] = {}
    current_indent = 0
    parent = root

    for line_number, line in enumerate(source.split("\n"), start=1):
        item = match_item(line)
        if item is None:
            continue
        node = OutlineNode.from_match(item, line_number)

        if node.indent > current_indent:
            parent = parents_by_indent.get(current_indent) or _root_fallback(root, node)
            current_indent = node.indent
        elif node.indent < current_indent:
            if node.indent == 0:
                parent = root
            else:
                sibling = parents_by_indent.get(node.indent)
                sibling_parent = sibling.parent if sibling is not None else None
                parent = sibling_parent if isinstance(sibling_parent, OutlineNode) else _root_fallback(root, node)
            current_indent = node.indent
        elif node.indent == 0:
            parent = root

        parent.append(node)
        parents_by_indent[node.indent] = node
        logger.debug("%s %r added to %r", node.kind.label, node, parent)

    root.sort_children_rec(outline_sort_key)
    return root


def _root_fallback(root: OutlineNode, node: OutlineNode) -> OutlineNode:
    logger.debug("no enclosing node for indent %d at line %d; attaching %r to root", node.indent, node.line, node)
    return root
