import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from skyline.core.board import BoardState
from skyline.core.checker import is_solution
from skyline.core.precheck import find_contradiction
from skyline.core.pruning import col_prefix_feasible, row_prefix_feasible
from skyline.core.visibility import col_final_ok, row_done_ok
from skyline.schemas.puzzle import PuzzleSpec, validate_spec
from skyline.utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_PRUNE = True
DEFAULT_PRECHECK = True
DEFAULT_SEED = True
FORCING_CLUE = 1
MS_PER_SECOND = 1000


class SolveStatus(str, Enum):
    SOLVED = "SOLVED"
    PROVEN_INFEASIBLE = "PROVEN_INFEASIBLE"
    SEARCH_EXHAUSTED = "SEARCH_EXHAUSTED"


@dataclass
class SolveResult:
    """Outcome of one solve.

    ``nodes`` counts values placed during the search. ``backtracks`` counts
    placements taken back again, whether rejected by pruning or by a failed
    subtree, so ``nodes - backtracks`` is the number of cells the search
    filled in the returned grid.
    """

    status: SolveStatus
    grid: Optional[np.ndarray] = None
    nodes: int = 0
    backtracks: int = 0
    elapsed_ms: float = 0.0

    @property
    def solved(self) -> bool:
        return self.status == SolveStatus.SOLVED


class BacktrackingSolver:
    """Depth-first search over the cells in row-major order.

    Values are tried in ascending order, so the first solution found is the
    lexicographically smallest one. Prefix pruning, seeding and the precheck
    only discard branches without solutions; switching any of them off
    changes the amount of work, never the returned grid.
    """

    def __init__(
        self,
        prune: bool = DEFAULT_PRUNE,
        precheck: bool = DEFAULT_PRECHECK,
        seed: bool = DEFAULT_SEED,
    ):
        self.prune = prune
        self.precheck = precheck
        self.use_seed = seed
        self.nodes = 0
        self.backtracks = 0

    def forced_cells(self, spec: PuzzleSpec) -> List[Tuple[int, int]]:
        """Cells that must hold the tallest value because a clue sees only one."""
        last = spec.size - 1
        cells = []
        for i in range(spec.size):
            if spec.top[i] == FORCING_CLUE:
                cells.append((0, i))
            if spec.bottom[i] == FORCING_CLUE:
                cells.append((last, i))
            if spec.left[i] == FORCING_CLUE:
                cells.append((i, 0))
            if spec.right[i] == FORCING_CLUE:
                cells.append((i, last))
        return cells

    def seed(self, board: BoardState, spec: PuzzleSpec) -> Optional[List[Tuple[int, int]]]:
        """Place every forced cell.

        Returns the cells placed, or None on a value collision, in which case
        the board is left as it was.
        """
        tallest = spec.size
        placed: List[Tuple[int, int]] = []
        for row, col in self.forced_cells(spec):
            if board.cells[row][col] == tallest:
                continue
            if not board.can_place(row, col, tallest):
                LOGGER.debug("Forced %s at (%s,%s) collides with another forced cell", tallest, row, col)
                self.unseed(board, placed, tallest)
                return None
            board.place(row, col, tallest)
            placed.append((row, col))
        return placed

    def unseed(self, board: BoardState, placed: List[Tuple[int, int]], value: int) -> None:
        for row, col in reversed(placed):
            board.undo(row, col, value)

    def lines_feasible(self, board: BoardState, spec: PuzzleSpec, row: int, col: int) -> bool:
        """Checks run after cell ``(row, col)`` is filled in row-major order."""
        size = board.size
        cells = board.cells
        if not row_prefix_feasible(cells[row], size, col + 1, spec.left[row]):
            return False
        if not col_prefix_feasible(cells, size, row + 1, spec.top[col], col):
            return False
        if col + 1 == size and not row_done_ok(cells[row], spec.left[row], spec.right[row]):
            return False
        if row + 1 == size and not col_final_ok(cells, col, spec.top[col], spec.bottom[col]):
            return False
        return True

    def search(self, board: BoardState, spec: PuzzleSpec, index: int = 0) -> bool:
        """Fill the cells from ``index`` onwards.

        On failure the board is exactly as it was on entry.
        """
        size = board.size
        if index == size * size:
            return self.prune or is_solution(board.cells, spec)

        row, col = divmod(index, size)
        if board.cells[row][col]:
            if self.prune and not self.lines_feasible(board, spec, row, col):
                return False
            return self.search(board, spec, index + 1)

        for value in range(1, size + 1):
            if not board.can_place(row, col, value):
                continue
            self.nodes += 1
            with board.tentative(row, col, value) as placement:
                if self.prune and not self.lines_feasible(board, spec, row, col):
                    self.backtracks += 1
                    continue
                if self.search(board, spec, index + 1):
                    placement.keep()
                    return True
                self.backtracks += 1
        return False

    def solve(self, spec: PuzzleSpec) -> SolveResult:
        validate_spec(spec)
        self.nodes = 0
        self.backtracks = 0
        start_time = time.perf_counter()

        if self.precheck:
            reason = find_contradiction(spec)
            if reason is not None:
                LOGGER.debug("Precheck rejected puzzle: %s", reason)
                return self._result(SolveStatus.PROVEN_INFEASIBLE, None, start_time)

        board = BoardState(spec.size)
        seeded: List[Tuple[int, int]] = []
        if self.use_seed:
            seeded = self.seed(board, spec)
            if seeded is None:
                return self._result(SolveStatus.SEARCH_EXHAUSTED, None, start_time)
            LOGGER.debug("Seeded %s forced cells", len(seeded))

        if self.search(board, spec):
            result = self._result(SolveStatus.SOLVED, board.to_array(), start_time)
            LOGGER.debug("Solved %sx%s in %s nodes", spec.size, spec.size, result.nodes)
            return result

        self.unseed(board, seeded, spec.size)
        LOGGER.debug("Search exhausted after %s nodes", self.nodes)
        return self._result(SolveStatus.SEARCH_EXHAUSTED, None, start_time)

    def _result(self, status: SolveStatus, grid: Optional[np.ndarray], start_time: float) -> SolveResult:
        elapsed_ms = (time.perf_counter() - start_time) * MS_PER_SECOND
        return SolveResult(status, grid, self.nodes, self.backtracks, elapsed_ms)


def solve(spec: PuzzleSpec, prune: bool = DEFAULT_PRUNE, precheck: bool = DEFAULT_PRECHECK) -> Optional[np.ndarray]:
    """Return the first solution grid, or None when the puzzle has none."""
    return BacktrackingSolver(prune=prune, precheck=precheck).solve(spec).grid
