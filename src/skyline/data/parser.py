import re
from typing import List

from skyline.core.exceptions import SpecInvalid
from skyline.schemas.puzzle import PuzzleSpec, validate_spec

DIGITS = re.compile(r"[0-9]+")
# Anything longer cannot be a clue and would only slow int() down.
MAX_TOKEN_LENGTH = 7


def tokenize(text: str) -> List[int]:
    """Split on whitespace; every token must be a plain run of digits."""
    if not isinstance(text, str):
        raise SpecInvalid("Clues must be given as a string")
    values = []
    for token in text.split():
        if len(token) > MAX_TOKEN_LENGTH or not DIGITS.fullmatch(token):
            raise SpecInvalid(f"Invalid clue token: {token!r}")
        values.append(int(token))
    return values


def parse_clues(text: str) -> PuzzleSpec:
    """Parse ``4N`` clues given in top, bottom, left, right order."""
    return validate_spec(PuzzleSpec.from_clues(tokenize(text)))
