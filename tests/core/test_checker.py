import numpy as np
import pytest
from skyline.core.checker import clue_violations, count_errors, is_solution, latin_violations
from skyline.schemas.puzzle import PuzzleSpec

GRID = np.array([
    [1, 2, 3, 4],
    [2, 3, 4, 1],
    [3, 4, 1, 2],
    [4, 1, 2, 3],
])
SPEC = PuzzleSpec(4, (4, 3, 2, 1), (1, 2, 2, 2), (4, 3, 2, 1), (1, 2, 2, 2))


def test_valid_solution() -> None:
    assert latin_violations(GRID) == 0
    assert clue_violations(GRID, SPEC) == 0
    assert count_errors(GRID, SPEC) == 0
    assert is_solution(GRID.tolist(), SPEC)


def test_latin_violations_counts_lines() -> None:
    broken = GRID.copy()
    broken[0, 0] = 2  # row 0 and column 0 now repeat a 2
    assert latin_violations(broken) == 2


def test_clue_violations_counts_each_side() -> None:
    spec = PuzzleSpec(4, (4, 3, 2, 1), (1, 2, 2, 2), (4, 3, 2, 2), (1, 2, 2, 1))
    assert clue_violations(GRID, spec) == 2
    assert not is_solution(GRID, spec)


def test_shape_mismatch() -> None:
    with pytest.raises(ValueError, match="does not match"):
        count_errors(np.ones((3, 3)), SPEC)
