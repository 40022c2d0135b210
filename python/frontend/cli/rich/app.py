"""Rich terminal frontend: board tables, status panels, and a play loop.

Cells are addressed by their row-major index, which is shown in small
print under each tile so the player knows what to type.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from frontend.session import GamePlay
from slidecore.config import EMPTY
from slidecore.engine.moves import MoveEngine
from slidecore.engine.solvability import SolvabilityChecker
from slidecore.imaging import SliceResult
from slidecore.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, show_indices: bool = False) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    movable = set(MoveEngine.movable_indices(board))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            index = r * board.size + c
            if val == EMPTY:
                cell = "[dim]·[/dim]"
            elif board.is_tile_correct(index):
                cell = f"[bold green]{val:>{width}}[/bold green]"
            elif index in movable:
                cell = f"[bold cyan]{val:>{width}}[/bold cyan]"
            else:
                cell = f"[bold white]{val:>{width}}[/bold white]"
            if show_indices:
                cell += f"\n[dim]{index}[/dim]"
            cells.append(cell)
        table.add_row(*cells)

    return table


def board_summary(board: Board) -> Text:
    inversions = SolvabilityChecker.count_inversions(board.cells)
    solvable = SolvabilityChecker.is_solvable(board)
    solved = MoveEngine.is_solved(board)

    summary = Text()
    summary.append("Inversions: ", style="dim")
    summary.append(str(inversions), style="bold yellow")
    summary.append("    Solvable: ", style="dim")
    summary.append("yes" if solvable else "no", style="bold green" if solvable else "bold red")
    summary.append("    Solved: ", style="dim")
    summary.append("yes" if solved else "no", style="bold green" if solved else "bold white")
    return summary


def show_board(board: Board, title: str, status: str = "") -> None:
    """Print *board* in a panel with its parity summary underneath."""
    size = board.size
    parts = [Align.center(render_board(board)), Text(""), Align.center(board_summary(board))]
    if status:
        parts.append(Align.center(Text.from_markup(status)))
    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]{title}  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(panel)


def show_slices(result: SliceResult, written: list[str]) -> None:
    if not result.ok:
        console.print(f"[red]{result.error}[/red]")
        console.print("[dim]Falling back to numbered tiles.[/dim]")
        return
    table = Table(box=rich.box.ROUNDED, border_style="dim")
    table.add_column("Tile", justify="right", style="bold cyan")
    table.add_column("Size", justify="right", style="yellow")
    table.add_column("File", style="dim")
    for (val, frag), path in zip(sorted(result.fragments.items()), written):
        table.add_row(str(val), f"{frag.width}×{frag.height}", path)
    console.print(table)


# -- game screens -------------------------------------------------------------


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    size = game.size
    board_table = render_board(game.state.board, show_indices=True)

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")

    controls = Text()
    controls.append("  0-9", style="bold cyan")
    controls.append("  slide tile at index   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(board_table),
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(game: GamePlay) -> None:
    console.clear()

    size = game.size
    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append(f"  Solved in {game.state.moves} moves  ", style="green")
    congrats.append("★\n", style="bold yellow")

    panel = Panel(
        Group(Align.center(render_board(game.state.board)), Align.center(congrats)),
        title=f"[bold green]Sliding Puzzle  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


# -- game loop ----------------------------------------------------------------


def run(size: int, rng: random.Random | None = None) -> None:
    """Play until the player quits."""
    game = GamePlay(size, rng=rng)
    status = ""

    while True:
        if game.is_won:
            _draw_win(game)
            answer = Prompt.ask("  Play again?", choices=["r", "q"], default="r", console=console)
            if answer == "q":
                return
            game.restart()
            continue

        _draw_game(game, status)
        status = ""
        key = Prompt.ask("  Index", console=console).strip().lower()

        if key == "q":
            return
        if key == "r":
            game.restart()
            status = "[yellow]New board![/yellow]"
            continue
        try:
            index = int(key)
        except ValueError:
            status = f"[red]Not an index: {key!r}[/red]"
            continue
        if not game.click(index):
            status = f"[yellow]Tile at {index} cannot move.[/yellow]"
