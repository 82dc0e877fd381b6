"""Outline construction, bucketing, and navigation helpers.

``build_outline`` turns source text into an ``OutlineNode`` tree;
``render_navbar`` regroups and renders it for the sidebar.
"""

from __future__ import annotations

from .categorize import Buckets, bucketize, render_buckets, render_navbar
from .navigation import next_declaration_row_index, row_index_for_line, row_line, toggle_row
from .node import OutlineNode, kind_marker_label, outline_sort_key
from .parser import ROOT_NAME, build_outline

__all__ = [
    "OutlineNode",
    "outline_sort_key",
    "kind_marker_label",
    "ROOT_NAME",
    "build_outline",
    "Buckets",
    "bucketize",
    "render_buckets",
    "render_navbar",
    "row_line",
    "row_index_for_line",
    "next_declaration_row_index",
    "toggle_row",
]
