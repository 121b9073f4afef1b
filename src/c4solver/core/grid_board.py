# src/c4solver/core/grid_board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from c4solver.config import COLS, ROWS
from c4solver.core.board import Board
from c4solver.core.errors import BoardError, InvalidColumn
from c4solver.core.outcome import Outcome
from c4solver.core.rules import check_winner_with_line, scan_outcome
from c4solver.types import Cell, Coord


@dataclass(slots=True, repr=False, eq=False)
class GridBoard(Board):
    """
    Dense grid: one optional piece per cell plus per-column fill heights.
    The simplest representation, used as the reference for the others.
    """
    width: int = COLS
    height: int = ROWS
    grid: List[List[Cell]] = field(init=False)  # grid[col][row], row 0 = bottom
    heights: List[int] = field(init=False)
    _moves: List[int] = field(init=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}.")
        self.grid = [[None] * self.height for _ in range(self.width)]
        self.heights = [0] * self.width
        self._moves = []

    @property
    def num_moves(self) -> int:
        return len(self._moves)

    @property
    def history(self) -> Tuple[int, ...]:
        return tuple(self._moves)

    def column_height(self, col: int) -> int:
        if col < 0 or col >= self.width:
            raise InvalidColumn(col, self.width)
        return self.heights[col]

    def cell(self, col: int, row: int) -> Cell:
        return self.grid[col][row]

    def outcome(self) -> Outcome:
        return scan_outcome(self.grid, self.width, self.height)

    def winning_line(self) -> Optional[List[Coord]]:
        res = check_winner_with_line(self.grid, self.width, self.height)
        return res[1] if res else None

    def _play(self, col: int) -> None:
        row = self.heights[col]
        self.grid[col][row] = self.mover
        self.heights[col] = row + 1
        self._moves.append(col)

    def undo_last_move(self) -> int:
        """
        Remove the top-most piece of the last column played.
        Useful for AI search.
        """
        if not self._moves:
            raise BoardError("Cannot undo: no moves played.")
        col = self._moves.pop()
        row = self.heights[col] - 1
        self.grid[col][row] = None
        self.heights[col] = row
        return col
