import numpy as np
from rich.console import Console
from rich.table import Table
from skyline.schemas.puzzle import PuzzleSpec
from skyline.visualization.board_view import format_grid, render_board

GRID = np.array([[1, 2], [2, 1]], dtype=np.int8)
SPEC = PuzzleSpec(2, (2, 1), (1, 2), (2, 1), (1, 2))


def test_format_grid() -> None:
    assert format_grid(GRID) == "1 2\n2 1\n"
    assert format_grid([[3, 1, 2], [1, 2, 3], [2, 3, 1]]) == "3 1 2\n1 2 3\n2 3 1\n"


def test_render_board_layout() -> None:
    table = render_board(GRID, SPEC)
    assert isinstance(table, Table)
    assert len(table.columns) == 4
    assert table.row_count == 4


def test_render_board_prints_clues_and_cells() -> None:
    console = Console(record=True, width=40, color_system=None)
    console.print(render_board(GRID, SPEC))
    lines = [line.split() for line in console.export_text().splitlines() if line.strip()]
    rows = [line for line in lines if not set("".join(line)) <= set("─━ ")]
    assert rows[0] == ["2", "1"]
    assert rows[1] == ["2", "1", "2", "1"]
    assert rows[2] == ["1", "2", "1", "2"]
    assert rows[3] == ["1", "2"]
