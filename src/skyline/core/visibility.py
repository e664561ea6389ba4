"""Visibility counting along a line of skyscraper heights.

A height is visible from one end of a line when it is strictly taller than
every height between it and that end. All helpers here are pure and O(N).
"""
from enum import Enum
from typing import List, Sequence, Tuple


class Side(str, Enum):
    """End of a line the scan starts from."""

    START = "START"
    END = "END"


def count_visible(line: Sequence[int], side: Side = Side.START) -> int:
    heights = line if side == Side.START else reversed(line)
    tallest = 0
    visible = 0
    for height in heights:
        if height > tallest:
            tallest = height
            visible += 1
    return visible


def count_visible_left(line: Sequence[int]) -> int:
    return count_visible(line, Side.START)


def count_visible_right(line: Sequence[int]) -> int:
    return count_visible(line, Side.END)


def column(cells: Sequence[Sequence[int]], col: int) -> List[int]:
    return [int(row[col]) for row in cells]


def row_done_ok(row: Sequence[int], left_req: int, right_req: int) -> bool:
    """Exact check for a completed row, both ends."""
    return count_visible_left(row) == left_req and count_visible_right(row) == right_req


def col_final_ok(cells: Sequence[Sequence[int]], col: int, top_req: int, bottom_req: int) -> bool:
    """Exact check for a completed column, both ends."""
    line = column(cells, col)
    return count_visible_left(line) == top_req and count_visible_right(line) == bottom_req


def derive_clues(grid) -> Tuple[List[int], List[int], List[int], List[int]]:
    """Return ``(top, bottom, left, right)`` clue lists of a complete grid."""
    rows = [[int(v) for v in row] for row in grid]
    size = len(rows)
    cols = [column(rows, c) for c in range(size)]
    top = [count_visible_left(line) for line in cols]
    bottom = [count_visible_right(line) for line in cols]
    left = [count_visible_left(line) for line in rows]
    right = [count_visible_right(line) for line in rows]
    return top, bottom, left, right
