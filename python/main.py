#!/usr/bin/env python3
"""Sliding Puzzle Engine.

Usage::

    python main.py new -s 4 --seed 7          # generate a solvable board
    python main.py check "1,2,3,4,5,6,8,7,0"  # parity report
    python main.py move "1,2,3,4,0,6,7,5,8" 7 # apply one click
    python main.py slice photo.png -s 3 -o tiles
    python main.py play -s 3                  # interactive Rich game
"""

import logging
import math
import random
import re
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from frontend.cli.rich import app as rich_app  # noqa: E402
from slidecore import api  # noqa: E402
from slidecore.config import DEFAULT_SIZE, EMPTY, GAME_SIZES, MIN_SIZE  # noqa: E402
from slidecore.errors import PuzzleError  # noqa: E402
from slidecore.imaging import slice_image  # noqa: E402
from slidecore.models.board import Board  # noqa: E402

app = typer.Typer(add_completion=False, help="Sliding puzzle engine.")


# -- helpers ------------------------------------------------------------------


def parse_cells(raw: str) -> list[int]:
    """Parse ``"1,2,3 4 _ 6"`` into cell values; ``_`` means the blank."""
    tokens = [t for t in re.split(r"[,\s]+", raw.strip()) if t]
    cells: list[int] = []
    for tok in tokens:
        if tok == "_":
            cells.append(EMPTY)
            continue
        try:
            cells.append(int(tok))
        except ValueError:
            raise typer.BadParameter(f"Not a cell value: {tok!r}") from None
    return cells


def _infer_size(cells: list[int], size: Optional[int]) -> int:
    if size is not None:
        return size
    root = math.isqrt(len(cells))
    if root * root != len(cells):
        raise typer.BadParameter(
            f"{len(cells)} cells do not form a square board; pass --size."
        )
    return root


def _rng(seed: Optional[int]) -> Optional[random.Random]:
    return random.Random(seed) if seed is not None else None


def _fail(exc: PuzzleError) -> NoReturn:
    rich_app.console.print(f"[red]{exc}[/red]")
    raise typer.Exit(code=2)


# -- CLI entry point ----------------------------------------------------------

SizeOption = typer.Option(
    DEFAULT_SIZE, "-s", "--size",
    min=MIN_SIZE,
    envvar="SLIDE_PUZZLE_SIZE",
    help=f"Grid size N for an N×N board (game sizes: {', '.join(map(str, GAME_SIZES))}).",
)
SeedOption = typer.Option(
    None, "--seed",
    envvar="SLIDE_PUZZLE_SEED",
    help="Seed for a reproducible shuffle.",
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log engine activity."),
) -> None:
    """Sliding puzzle engine."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=rich_app.console, show_path=False)],
        )


@app.command()
def new(size: int = SizeOption, seed: Optional[int] = SeedOption) -> None:
    """Generate a random solvable board."""
    try:
        board = api.generate(size, rng=_rng(seed))
    except PuzzleError as exc:
        _fail(exc)
    rich_app.show_board(board, "New board")
    rich_app.console.print(",".join(str(v) for v in board.cells))


@app.command()
def check(
    cells: str = typer.Argument(..., help="Row-major cells, 0 or _ for the blank."),
    size: Optional[int] = typer.Option(None, "-s", "--size", help="Grid size N."),
) -> None:
    """Report inversions, solvability, and whether a board is solved."""
    values = parse_cells(cells)
    n = _infer_size(values, size)
    try:
        board = Board.from_flat(n, values)
    except PuzzleError as exc:
        _fail(exc)
    rich_app.show_board(board, "Board")


@app.command()
def move(
    cells: str = typer.Argument(..., help="Row-major cells, 0 or _ for the blank."),
    index: int = typer.Argument(..., help="Index of the clicked cell."),
    size: Optional[int] = typer.Option(None, "-s", "--size", help="Grid size N."),
) -> None:
    """Click one cell and show the resulting board."""
    values = parse_cells(cells)
    n = _infer_size(values, size)
    try:
        result = api.apply_move(values, index, n)
    except PuzzleError as exc:
        _fail(exc)
    status = "[green]Move accepted.[/green]" if result.accepted else "[yellow]Move rejected.[/yellow]"
    rich_app.show_board(result.board, "After move", status)
    rich_app.console.print(",".join(str(v) for v in result.board.cells))


@app.command("slice")
def slice_cmd(
    image: Path = typer.Argument(..., exists=True, dir_okay=False, help="Image file."),
    size: int = SizeOption,
    out: Path = typer.Option(Path("tiles"), "-o", "--out", help="Output directory."),
) -> None:
    """Cut an image into numbered tile fragments."""
    try:
        result = slice_image(image.read_bytes(), size)
    except PuzzleError as exc:
        _fail(exc)

    written: list[str] = []
    if result.ok:
        out.mkdir(parents=True, exist_ok=True)
        for val, frag in sorted(result.fragments.items()):
            path = out / f"tile_{val}.png"
            frag.save(path)
            written.append(str(path))
    rich_app.show_slices(result, written)
    if not result.ok:
        raise typer.Exit(code=1)


@app.command()
def play(size: int = SizeOption, seed: Optional[int] = SeedOption) -> None:
    """Play in the terminal."""
    try:
        rich_app.run(size=size, rng=_rng(seed))
    except PuzzleError as exc:
        _fail(exc)


if __name__ == "__main__":
    app()
