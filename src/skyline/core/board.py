from contextlib import contextmanager
from typing import Iterator, List, Tuple

import numpy as np

EMPTY = 0


class Placement:
    """Handle yielded by :meth:`BoardState.tentative`."""

    __slots__ = ("row", "col", "value", "kept")

    def __init__(self, row: int, col: int, value: int):
        self.row = row
        self.col = col
        self.value = value
        self.kept = False

    def keep(self) -> None:
        self.kept = True


class BoardState:
    """N×N grid plus per-row and per-column bitmasks of used values.

    Bit ``v - 1`` of ``row_used[r]`` is set iff value ``v`` sits in row ``r``;
    same for ``col_used``. A cell is non-empty iff its bit is set in both
    masks.
    """

    def __init__(self, size: int):
        self.size = size
        self.cells: List[List[int]] = [[EMPTY] * size for _ in range(size)]
        self.row_used: List[int] = [0] * size
        self.col_used: List[int] = [0] * size

    def can_place(self, row: int, col: int, value: int) -> bool:
        bit = 1 << (value - 1)
        return not (self.row_used[row] & bit or self.col_used[col] & bit)

    def place(self, row: int, col: int, value: int) -> None:
        bit = 1 << (value - 1)
        self.cells[row][col] = value
        self.row_used[row] |= bit
        self.col_used[col] |= bit

    def undo(self, row: int, col: int, value: int) -> None:
        bit = 1 << (value - 1)
        self.cells[row][col] = EMPTY
        self.row_used[row] &= ~bit
        self.col_used[col] &= ~bit

    @contextmanager
    def tentative(self, row: int, col: int, value: int) -> Iterator[Placement]:
        """Place ``value`` for the duration of the block.

        The placement is undone on every exit path, exceptions included,
        unless :meth:`Placement.keep` was called inside the block.
        """
        self.place(row, col, value)
        placement = Placement(row, col, value)
        try:
            yield placement
        finally:
            if not placement.kept:
                self.undo(placement.row, placement.col, placement.value)

    def is_empty(self) -> bool:
        return not any(self.row_used) and not any(self.col_used) and not any(any(row) for row in self.cells)

    def snapshot(self) -> Tuple[Tuple[Tuple[int, ...], ...], Tuple[int, ...], Tuple[int, ...]]:
        return (
            tuple(tuple(row) for row in self.cells),
            tuple(self.row_used),
            tuple(self.col_used),
        )

    def to_array(self) -> np.ndarray:
        return np.array(self.cells, dtype=np.int8)

    def __repr__(self) -> str:
        rows = " / ".join(" ".join(str(v) for v in row) for row in self.cells)
        return f"BoardState(size={self.size}, cells={rows})"
