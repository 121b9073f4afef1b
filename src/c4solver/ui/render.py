from __future__ import annotations
from typing import Iterable, List, Optional, Set

from c4solver.config import CLEAR_SCREEN
from c4solver.core.board import Board
from c4solver.types import Coord
from c4solver.ui.colors import BOLD, DIM, FG_CYAN, glyph, paint


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> List[str]:
    """Text rows of the board, top row first, built from the read-only cell enumeration."""
    hl: Set[Coord] = set(highlight) if highlight else set()

    columns: List[List[str]] = [[] for _ in range(board.width)]
    for col, row, cell in board.cells():
        columns[col].append(glyph(cell, (col, row) in hl))

    lines = []
    for row in range(board.height - 1, -1, -1):
        lines.append(" | " + " ".join(columns[col][row] for col in range(board.width)) + " |")
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(paint("CONNECT 4", BOLD))
    if status:
        print(paint(status, FG_CYAN))
    else:
        print()

    nums = "   " + " ".join(str(i + 1) for i in range(board.width))
    print(paint(nums, DIM))

    for line in board_lines(board, highlight):
        print(line)

    print(paint("   " + "—" * (2 * board.width - 1), DIM))
    print(paint(f"   Enter 1-{board.width} to drop. Enter q to quit.", DIM))
