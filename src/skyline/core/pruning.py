"""Prefix feasibility checks used to cut branches on partially filled lines.

Only the near end of a line (left for rows, top for columns) is bounded here.
The far end depends on the unfilled suffix and is checked once the line is
complete. A failed check proves the partial line infeasible; a pass proves
nothing.
"""
from typing import Sequence


def visible_prefix(heights: Sequence[int], filled: int) -> int:
    tallest = 0
    visible = 0
    for i in range(filled):
        if heights[i] > tallest:
            tallest = heights[i]
            visible += 1
    return visible


def prefix_feasible(visible: int, remaining: int, req: int) -> bool:
    # Visibility never decreases as cells are revealed, and each remaining
    # cell adds at most one.
    if visible > req:
        return False
    if visible + remaining < req:
        return False
    return True


def row_prefix_feasible(row: Sequence[int], size: int, filled: int, req: int) -> bool:
    return prefix_feasible(visible_prefix(row, filled), size - filled, req)


def col_prefix_feasible(cells: Sequence[Sequence[int]], size: int, filled_rows: int, req: int, col: int) -> bool:
    tallest = 0
    visible = 0
    for r in range(filled_rows):
        height = cells[r][col]
        if height > tallest:
            tallest = height
            visible += 1
    return prefix_feasible(visible, size - filled_rows, req)
