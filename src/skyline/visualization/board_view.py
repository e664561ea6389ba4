from rich import box
from rich.table import Table

from skyline.schemas.puzzle import PuzzleSpec

CLUE_STYLE = "bold cyan"
CELL_STYLE = "white"
CORNER = ""


def format_grid(grid) -> str:
    """One line per row, values separated by single spaces."""
    return "".join(" ".join(str(int(v)) for v in row) + "\n" for row in grid)


def render_board(grid, spec: PuzzleSpec) -> Table:
    """Grid framed by its clues: top/bottom as header and footer rows, left/right as edge columns."""
    table = Table(show_header=False, box=box.SIMPLE_HEAD, padding=(0, 1))
    for _ in range(spec.size + 2):
        table.add_column(justify="center")

    def clue_row(clues):
        return [CORNER] + [f"[{CLUE_STYLE}]{v}[/{CLUE_STYLE}]" for v in clues] + [CORNER]

    table.add_row(*clue_row(spec.top), end_section=True)
    for r, row in enumerate(grid):
        cells = [f"[{CELL_STYLE}]{int(v)}[/{CELL_STYLE}]" for v in row]
        table.add_row(
            f"[{CLUE_STYLE}]{spec.left[r]}[/{CLUE_STYLE}]",
            *cells,
            f"[{CLUE_STYLE}]{spec.right[r]}[/{CLUE_STYLE}]",
            end_section=r == spec.size - 1,
        )
    table.add_row(*clue_row(spec.bottom))
    return table
