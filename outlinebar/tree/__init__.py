"""Generic tree nodes, glyph styles, and row rendering.

Defines ``TreeNode`` plus the style registry and pre-order renderer used by
outline views.
"""

from __future__ import annotations

from .node import TreeNode, name_sort_key
from .rendering import render_tree, render_with_style
from .styles import (
    DEFAULT_STYLE_NAME,
    TreeStyle,
    UnknownStyleError,
    available_style_names,
    get_style,
)
from .types import SEPARATOR_ROW, OutlineRow

__all__ = [
    "TreeNode",
    "name_sort_key",
    "TreeStyle",
    "UnknownStyleError",
    "DEFAULT_STYLE_NAME",
    "available_style_names",
    "get_style",
    "OutlineRow",
    "SEPARATOR_ROW",
    "render_tree",
    "render_with_style",
]
