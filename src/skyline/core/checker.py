"""Violation counting for complete grids.

The error count is the number of lines that break a rule: each row or column
that is not a permutation of 1..N, plus each clue whose recomputed count
differs from the one given.
"""
import numpy as np

from skyline.core.visibility import count_visible_left, count_visible_right
from skyline.schemas.puzzle import PuzzleSpec


def latin_violations(grid) -> int:
    board = np.asarray(grid, dtype=np.int64)
    size = board.shape[0]
    expected = np.arange(1, size + 1)
    bad_rows = sum(1 for row in np.sort(board, axis=1) if not np.array_equal(row, expected))
    bad_cols = sum(1 for col in np.sort(board, axis=0).T if not np.array_equal(col, expected))
    return bad_rows + bad_cols


def clue_violations(grid, spec: PuzzleSpec) -> int:
    board = np.asarray(grid, dtype=np.int64)
    errors = 0
    for i in range(spec.size):
        row = board[i, :].tolist()
        col = board[:, i].tolist()
        errors += count_visible_left(row) != spec.left[i]
        errors += count_visible_right(row) != spec.right[i]
        errors += count_visible_left(col) != spec.top[i]
        errors += count_visible_right(col) != spec.bottom[i]
    return errors


def count_errors(grid, spec: PuzzleSpec) -> int:
    board = np.asarray(grid)
    if board.shape != (spec.size, spec.size):
        raise ValueError(f"Grid shape {board.shape} does not match puzzle size {spec.size}")
    return latin_violations(board) + clue_violations(board, spec)


def is_solution(grid, spec: PuzzleSpec) -> bool:
    return count_errors(grid, spec) == 0
