from pathlib import Path
from typing import Annotated, Optional

import numpy as np
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from skyline.core.checker import count_errors
from skyline.core.exceptions import SkylineError
from skyline.core.precheck import find_contradiction
from skyline.core.solver import BacktrackingSolver, SolveResult
from skyline.data.loader import load_puzzles
from skyline.data.parser import parse_clues
from skyline.utils.config import settings
from skyline.utils.logger import get_logger
from skyline.visualization.board_view import format_grid, render_board

app = typer.Typer(help="Skyline: Skyscraper puzzle solver.")
console = Console()
LOGGER = get_logger(__name__)

ERROR_MESSAGE = "Error"
OK_MESSAGE = "OK"
ERROR_EXIT_CODE = 1

CYAN_STYLE = "cyan"
GREEN_STYLE = "green"
RED_STYLE = "red"
YELLOW_STYLE = "yellow"
MAGENTA_STYLE = "magenta"
BOLD_STYLE = "bold"
DIM_STYLE = "dim"

SOLVED_STATUS = "SOLVED"
FAILED_STATUS = "FAILED"
NO_REFERENCE = "-"


def fail() -> None:
    typer.echo(ERROR_MESSAGE)
    raise typer.Exit(code=ERROR_EXIT_CODE)


def print_stats(result: SolveResult) -> None:
    console.print(f"\n[{BOLD_STYLE}]Search Report:[/{BOLD_STYLE}]")
    console.print(f"  Status: [{BOLD_STYLE} {CYAN_STYLE}]{result.status.value}[/{BOLD_STYLE} {CYAN_STYLE}]")
    console.print(f"  Nodes: [{BOLD_STYLE} {CYAN_STYLE}]{result.nodes}[/{BOLD_STYLE} {CYAN_STYLE}]")
    console.print(f"  Backtracks: [{BOLD_STYLE} {CYAN_STYLE}]{result.backtracks}[/{BOLD_STYLE} {CYAN_STYLE}]")
    console.print(f"  Total Time: [{BOLD_STYLE} {MAGENTA_STYLE}]{result.elapsed_ms:.2f} ms[/{BOLD_STYLE} {MAGENTA_STYLE}]")


def reference_match(result: SolveResult, solution) -> str:
    if solution is None:
        return NO_REFERENCE
    if result.grid is None:
        return f"[{RED_STYLE}]no[/{RED_STYLE}]"
    if np.array_equal(result.grid, np.asarray(solution)):
        return f"[{GREEN_STYLE}]yes[/{GREEN_STYLE}]"
    return f"[{YELLOW_STYLE}]other[/{YELLOW_STYLE}]"


@app.command()
def solve(
    clues: Annotated[str, typer.Argument(help="4N clues: top, bottom, left, right")],
    prune: bool = typer.Option(settings.PRUNE, help="Prefix pruning and line completion checks"),
    precheck: bool = typer.Option(settings.PRECHECK, help="Reject contradictory clues before searching"),
    pretty: bool = typer.Option(False, help="Render the board framed by its clues"),
    stats: bool = typer.Option(False, help="Print search statistics"),
):
    try:
        spec = parse_clues(clues)
    except SkylineError as e:
        LOGGER.debug("Rejected clues: %s", e)
        fail()

    result = BacktrackingSolver(prune=prune, precheck=precheck).solve(spec)
    if stats:
        print_stats(result)
    if not result.solved:
        fail()

    if pretty:
        console.print(render_board(result.grid, spec))
    else:
        typer.echo(format_grid(result.grid), nl=False)


@app.command()
def check(
    clues: Annotated[str, typer.Argument(help="4N clues: top, bottom, left, right")],
):
    try:
        spec = parse_clues(clues)
    except SkylineError as e:
        console.print(f"[{DIM_STYLE}]{escape(str(e))}[/{DIM_STYLE}]")
        fail()

    reason = find_contradiction(spec)
    if reason is not None:
        console.print(f"[{DIM_STYLE}]{escape(reason)}[/{DIM_STYLE}]")
        fail()
    typer.echo(OK_MESSAGE)


@app.command()
def batch(
    path: Annotated[Optional[Path], typer.Argument(help="JSON puzzle set")] = None,
    prune: bool = typer.Option(settings.PRUNE, help="Prefix pruning and line completion checks"),
):
    try:
        records = load_puzzles(path)
    except (FileNotFoundError, SkylineError) as e:
        console.print(f"[{BOLD_STYLE} {RED_STYLE}]Error loading puzzle set:[/{BOLD_STYLE} {RED_STYLE}] {escape(str(e))}")
        raise typer.Exit(code=ERROR_EXIT_CODE)

    table = Table(title=f"Puzzle Set ({len(records)})", show_header=True, header_style=f"{BOLD_STYLE} {CYAN_STYLE}")
    table.add_column("ID", style=CYAN_STYLE)
    table.add_column("Size", justify="center")
    table.add_column("Status", justify="center")
    table.add_column("Nodes", justify="right", style=GREEN_STYLE)
    table.add_column("Time (ms)", justify="right", style=MAGENTA_STYLE)
    table.add_column("Reference", justify="center")

    solver = BacktrackingSolver(prune=prune)
    solved = 0
    for record in records:
        try:
            spec = record.to_spec()
            result = solver.solve(spec)
        except SkylineError as e:
            LOGGER.debug("Skipping %s: %s", record.id, e)
            table.add_row(record.id, NO_REFERENCE, f"[{RED_STYLE}]{ERROR_MESSAGE}[/{RED_STYLE}]", NO_REFERENCE, NO_REFERENCE, NO_REFERENCE)
            continue

        if result.solved and count_errors(result.grid, spec) == 0:
            solved += 1
            status_text = f"[{GREEN_STYLE}]{SOLVED_STATUS}[/{GREEN_STYLE}]"
        else:
            status_text = f"[{RED_STYLE}]{FAILED_STATUS}[/{RED_STYLE}]"
        table.add_row(
            record.id,
            f"{spec.size}x{spec.size}",
            status_text,
            f"{result.nodes:,}",
            f"{result.elapsed_ms:.2f}",
            reference_match(result, record.solution),
        )

    console.print(table)
    console.print(f"[{DIM_STYLE}]Solved {solved}/{len(records)} puzzles.[/{DIM_STYLE}]")


def main():
    app()


if __name__ == "__main__":
    main()
