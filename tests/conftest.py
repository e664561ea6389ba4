from itertools import permutations
from typing import Callable, Iterator, List

import pytest

Grid = List[List[int]]


def generate_latin_squares(size: int) -> Iterator[Grid]:
    rows = list(permutations(range(1, size + 1)))

    def extend(grid: Grid) -> Iterator[Grid]:
        if len(grid) == size:
            yield [list(row) for row in grid]
            return
        for row in rows:
            if all(row[c] != prev[c] for prev in grid for c in range(size)):
                yield from extend(grid + [list(row)])

    yield from extend([])


@pytest.fixture
def latin_squares() -> Callable[[int], Iterator[Grid]]:
    return generate_latin_squares
