from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from c4solver.config import CONNECT_N
from c4solver.core.outcome import DRAW, UNDECIDED, Outcome
from c4solver.types import Cell, Coord, Piece

Grid = Sequence[Sequence[Cell]]  # grid[col][row], row 0 = bottom

# Each window is anchored at its lowest column-major cell.
DIRECTIONS: Tuple[Coord, ...] = (
    (0, 1),   # vertical
    (1, 0),   # horizontal
    (1, 1),   # diagonal up-right
    (1, -1),  # diagonal down-right
)


def _window_from(grid: Grid, width: int, height: int, col: int, row: int) -> Optional[List[Coord]]:
    p = grid[col][row]
    last = CONNECT_N - 1
    for dc, dr in DIRECTIONS:
        end_c = col + dc * last
        end_r = row + dr * last
        if not (0 <= end_c < width and 0 <= end_r < height):
            continue
        line = [(col + dc * k, row + dr * k) for k in range(CONNECT_N)]
        if all(grid[c][r] == p for c, r in line[1:]):
            return line
    return None


def check_winner_with_line(grid: Grid, width: int, height: int) -> Optional[Tuple[Piece, List[Coord]]]:
    """
    Scan every occupied cell column by column, bottom to top, and return the
    first aligned window found together with its owner.
    """
    for col in range(width):
        column = grid[col]
        for row in range(height):
            p = column[row]
            if p is None:
                # pieces stack from the bottom, nothing above an empty cell
                break
            line = _window_from(grid, width, height, col, row)
            if line is not None:
                return p, line
    return None


def check_winner(grid: Grid, width: int, height: int) -> Optional[Piece]:
    res = check_winner_with_line(grid, width, height)
    return res[0] if res else None


def is_grid_full(grid: Grid) -> bool:
    return all(column[-1] is not None for column in grid)


def scan_outcome(grid: Grid, width: int, height: int) -> Outcome:
    winner = check_winner(grid, width, height)
    if winner is not None:
        return Outcome.won(winner)
    if is_grid_full(grid):
        return DRAW
    return UNDECIDED
