from typing import List, Optional, Sequence, Tuple

import msgspec

from skyline.core.exceptions import SpecInvalid
from skyline.core.visibility import derive_clues

MIN_SIZE = 2
MAX_SIZE = 9
CLUE_SIDES = 4
SIDE_NAMES = ("top", "bottom", "left", "right")


class PuzzleSpec(msgspec.Struct, frozen=True):
    """Immutable clue set of one puzzle.

    ``top[c]``/``bottom[c]`` are the counts looking down/up column ``c``,
    ``left[r]``/``right[r]`` looking rightward/leftward along row ``r``.
    """

    size: int
    top: Tuple[int, ...]
    bottom: Tuple[int, ...]
    left: Tuple[int, ...]
    right: Tuple[int, ...]

    @classmethod
    def from_clues(cls, values: Sequence[int]) -> "PuzzleSpec":
        """Split ``4N`` clues into sides, in top, bottom, left, right order."""
        if not values or len(values) % CLUE_SIDES:
            raise SpecInvalid(f"Expected a positive multiple of {CLUE_SIDES} clues, got {len(values)}")
        size = len(values) // CLUE_SIDES
        chunks = [tuple(int(v) for v in values[i * size:(i + 1) * size]) for i in range(CLUE_SIDES)]
        return cls(size, *chunks)

    @classmethod
    def from_grid(cls, grid) -> "PuzzleSpec":
        top, bottom, left, right = derive_clues(grid)
        return cls(len(top), tuple(top), tuple(bottom), tuple(left), tuple(right))

    def clues(self) -> Tuple[int, ...]:
        return self.top + self.bottom + self.left + self.right


def validate_spec(spec: PuzzleSpec) -> PuzzleSpec:
    size = spec.size
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise SpecInvalid(f"Board size {size} outside [{MIN_SIZE}, {MAX_SIZE}]")
    for name in SIDE_NAMES:
        clues = getattr(spec, name)
        if len(clues) != size:
            raise SpecInvalid(f"Expected {size} {name} clues, got {len(clues)}")
        for value in clues:
            if not 1 <= value <= size:
                raise SpecInvalid(f"{name} clue {value} outside [1, {size}]")
    return spec


class PuzzleRecord(msgspec.Struct):
    id: str
    clues: List[int]
    solution: Optional[List[List[int]]] = None

    def to_spec(self) -> PuzzleSpec:
        return PuzzleSpec.from_clues(self.clues)
