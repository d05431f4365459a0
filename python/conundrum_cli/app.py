"""Command-line front end for the conundrum solver.

Usage::

    conundrum 1 2 3 4 5 0 6 7            # prints: 5
    conundrum 0 1 2 3 4 5 6 7 --check    # replay the answer and verify it
    conundrum 0 1 2 3 4 5 6 7 --stats -v # search counters and debug log
"""

import logging
from typing import List, Sequence

import rich.box
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from conundrum.engine.gameplay import GamePlay
from conundrum.engine.solver import SearchResult, Solver
from conundrum.errors import InvalidStateError, NoSolutionError

console = Console()
err_console = Console(stderr=True)


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _render_stats(result: SearchResult) -> Table:
    """Return a Rich Table with the search counters."""
    table = Table(
        show_header=False,
        box=rich.box.SIMPLE,
        border_style="bright_blue",
        padding=(0, 1),
    )
    table.add_column(style="dim")
    table.add_column(justify="right", style="bold yellow")
    table.add_row("Moves", str(result.length))
    table.add_row("Expanded", str(result.expanded))
    table.add_row("Generated", str(result.generated))
    return table


def _verify(state: List[int], moves: Sequence[int]) -> bool:
    game = GamePlay.from_flat(state)
    return game.apply(moves) and game.is_won


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    state: List[int] = typer.Argument(
        ...,
        metavar="CELL...",
        help="Eight cell values in board order, 0 for the blank.",
    ),
    check: bool = typer.Option(
        False, "--check",
        help="Replay the moves on the board and confirm the goal is reached.",
    ),
    stats: bool = typer.Option(
        False, "--stats",
        help="Show search counters.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Enable debug logging.",
    ),
) -> None:
    """Print the shortest sequence of tiles to slide into the blank."""
    _configure_logging(verbose)

    try:
        result = Solver().search(state)
    except InvalidStateError as exc:
        raise typer.BadParameter(str(exc), param_hint="CELL...") from exc
    except NoSolutionError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    # An empty line stands for the empty move sequence.
    console.print(" ".join(str(m) for m in result.moves), highlight=False)
    if not result.moves:
        err_console.print("[green]Already solved![/green]")

    if stats:
        console.print(_render_stats(result))

    if check:
        if not _verify(state, result.moves):
            err_console.print("[red]Replay did not reach the goal.[/red]")
            raise typer.Exit(code=1)
        console.print(f"[green]Verified: goal reached in {result.length} moves.[/green]")


if __name__ == "__main__":
    app()
