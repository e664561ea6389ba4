import pytest
from skyline.core.precheck import find_contradiction, precheck
from skyline.schemas.puzzle import PuzzleSpec


def spec_of(top, bottom, left, right) -> PuzzleSpec:
    return PuzzleSpec(len(top), tuple(top), tuple(bottom), tuple(left), tuple(right))


class TestPrecheck:
    def test_accepts_solvable_puzzle(self) -> None:
        spec = spec_of([4, 3, 2, 1], [1, 2, 2, 2], [4, 3, 2, 1], [1, 2, 2, 2])
        assert precheck(spec)
        assert find_contradiction(spec) is None

    def test_rejects_all_rows_increasing(self) -> None:
        spec = spec_of([4, 3, 2, 1], [1, 2, 2, 2], [4, 4, 4, 4], [1, 1, 1, 1])
        assert not precheck(spec)
        assert "every row" in find_contradiction(spec)

    def test_rejects_all_columns_increasing(self) -> None:
        spec = spec_of([3, 3, 3], [1, 1, 1], [1, 2, 2], [2, 1, 2])
        assert not precheck(spec)
        assert "every column" in find_contradiction(spec)

    def test_rejects_row_sum_out_of_bounds(self) -> None:
        spec = spec_of([2, 2, 2, 2], [2, 2, 2, 2], [4, 3, 2, 2], [1, 2, 3, 4])
        reason = find_contradiction(spec)
        assert reason is not None
        assert reason.startswith("row 3")
        assert "sum 6" in reason

    def test_rejects_column_sum_out_of_bounds(self) -> None:
        spec = spec_of([2, 2, 3], [2, 1, 2], [2, 2, 1], [2, 1, 3])
        reason = find_contradiction(spec)
        assert reason is not None
        assert reason.startswith("column 2")

    def test_rejects_extremal_mismatch(self) -> None:
        spec = spec_of([2, 2, 2, 2, 2], [2, 2, 2, 2, 2], [5, 2, 2, 2, 2], [1, 2, 2, 2, 2])
        assert precheck(spec)
        spec = spec_of([2, 2, 2, 2, 2], [2, 2, 2, 2, 2], [5, 2, 2, 2, 2], [2, 2, 2, 2, 2])
        assert not precheck(spec)
        spec = spec_of([2, 2, 2, 2, 2], [2, 2, 2, 2, 2], [2, 2, 2, 2, 2], [5, 2, 2, 2, 2])
        assert not precheck(spec)

    def test_rejects_bottom_extremal_mismatch(self) -> None:
        spec = spec_of([2, 2, 2], [3, 2, 2], [2, 2, 2], [2, 2, 2])
        assert "column 0" in find_contradiction(spec)

    def test_passes_unsolvable_puzzle(self) -> None:
        # Necessary condition only: this one has no solution but passes.
        spec = spec_of([4, 3, 2, 1], [1, 2, 3, 4], [4, 3, 2, 1], [1, 2, 3, 4])
        assert precheck(spec)

    @pytest.mark.parametrize("size", [2, 3, 4])
    def test_never_rejects_real_latin_square(self, size: int, latin_squares) -> None:
        for grid in latin_squares(size):
            spec = PuzzleSpec.from_grid(grid)
            assert precheck(spec), (grid, find_contradiction(spec))
