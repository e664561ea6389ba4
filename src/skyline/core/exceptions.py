"""Exception hierarchy for the skyline solver.

Infeasible puzzles are not errors: the solver reports them through
``SolveStatus``. Exceptions are reserved for broken inputs.
"""


class SkylineError(Exception):
    """Base exception for solver failures."""


class SpecInvalid(SkylineError):
    """Raised when a clue set breaks the size or range contract."""


class PuzzleFileError(SkylineError):
    """Raised when a puzzle set file cannot be decoded."""
