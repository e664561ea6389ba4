"""Static contradiction detection over a full clue set.

These rules are necessary conditions only. A clue set that passes may still
have no solution; one that fails certainly has none.
"""
from typing import Optional

from skyline.schemas.puzzle import PuzzleSpec

MIN_PAIR_SUM = 2


def _pair_contradiction(label: str, index: int, near: int, far: int, size: int) -> Optional[str]:
    # For any permutation of 1..N the two opposite counts sum to 2..N+1.
    total = near + far
    if total < MIN_PAIR_SUM or total > size + 1:
        return f"{label} {index}: clue sum {total} outside [{MIN_PAIR_SUM}, {size + 1}]"
    # A count of N means the line is strictly increasing from that end.
    if near == size and far != 1:
        return f"{label} {index}: clue {near} forces the opposite clue to 1, got {far}"
    if far == size and near != 1:
        return f"{label} {index}: clue {far} forces the opposite clue to 1, got {near}"
    return None


def find_contradiction(spec: PuzzleSpec) -> Optional[str]:
    """Return a description of the first contradiction found, or None."""
    size = spec.size
    all_rows_inc = True
    all_cols_inc = True

    for i in range(size):
        reason = _pair_contradiction("row", i, spec.left[i], spec.right[i], size)
        if reason is None:
            reason = _pair_contradiction("column", i, spec.top[i], spec.bottom[i], size)
        if reason is not None:
            return reason

        if not (spec.left[i] == size and spec.right[i] == 1):
            all_rows_inc = False
        if not (spec.top[i] == size and spec.bottom[i] == 1):
            all_cols_inc = False

    # Every row equal to 1..N makes each column constant, and vice versa.
    if all_rows_inc:
        return "every row is forced to 1..N, so every column repeats a value"
    if all_cols_inc:
        return "every column is forced to 1..N, so every row repeats a value"
    return None


def precheck(spec: PuzzleSpec) -> bool:
    return find_contradiction(spec) is None
