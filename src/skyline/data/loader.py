from pathlib import Path
from typing import List, Optional

import msgspec

from skyline.core.exceptions import PuzzleFileError
from skyline.schemas.puzzle import PuzzleRecord
from skyline.utils.config import settings


def load_puzzles(path: Optional[Path] = None) -> List[PuzzleRecord]:
    """
    Reads a JSON array of puzzle records, e.g.
    ``[{"id": "p1", "clues": [4, 3, 2, 1, ...], "solution": [[1, 2, 3, 4], ...]}]``.
    """
    path = Path(path) if path is not None else settings.PUZZLE_PATH
    if not path.exists():
        raise FileNotFoundError(f"Puzzle set missing at {path}")

    try:
        return msgspec.json.decode(path.read_bytes(), type=List[PuzzleRecord])
    except msgspec.DecodeError as e:
        raise PuzzleFileError(f"Could not decode {path}: {e}") from e
