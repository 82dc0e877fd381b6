"""Row lookups for sidebar navigation."""

from __future__ import annotations

from ..tree.types import OutlineRow


def row_line(row: OutlineRow) -> int:
    """Return the source line carried by ``row``, or -1 for synthetic rows."""
    if row.node is None:
        return -1
    return getattr(row.node, "line", -1)


def row_index_for_line(rows: list[OutlineRow], line: int) -> int | None:
    """Return the row whose declaration starts closest above or at ``line``.

    Ties keep the first row, so a declaration shown once is always found.
    """
    best_idx: int | None = None
    best_line = -1
    for idx, row in enumerate(rows):
        start = row_line(row)
        if start < 1 or start > line:
            continue
        if start > best_line:
            best_idx = idx
            best_line = start
    return best_idx


def next_declaration_row_index(rows: list[OutlineRow], selected_idx: int, direction: int) -> int | None:
    """Return the next row in ``direction`` that maps to a source line."""
    if not rows or direction == 0:
        return None
    step = 1 if direction > 0 else -1
    idx = selected_idx + step
    while 0 <= idx < len(rows):
        if row_line(rows[idx]) >= 1:
            return idx
        idx += step
    return None


def toggle_row(rows: list[OutlineRow], idx: int) -> bool:
    """Toggle collapse state of the node at ``idx``.

    Returns ``True`` when the node changed. Separators and leaf nodes are left
    alone; the caller re-renders to see the new rows.
    """
    if idx < 0 or idx >= len(rows):
        return False
    node = rows[idx].node
    if node is None or not node.has_children():
        return False
    node.toggle()
    return True
