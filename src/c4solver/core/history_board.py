from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from c4solver.config import COLS, ROWS
from c4solver.core.board import Board
from c4solver.core.errors import BoardError, InvalidColumn
from c4solver.core.grid_board import GridBoard
from c4solver.core.outcome import Outcome
from c4solver.types import Cell, Coord


@dataclass(slots=True, repr=False, eq=False)
class HistoryBoard(Board):
    """
    Move log: only the ordered column choices are the source of truth.

    Heights are counted from the log. Cell, outcome and line queries go
    through a dense grid that is replayed from the log on first use and then
    kept in step with every later move and undo, so undo stays a truncation.
    """
    width: int = COLS
    height: int = ROWS
    moves: List[int] = field(default_factory=list, init=False)
    _grid: Optional[GridBoard] = field(default=None, init=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}.")

    @property
    def num_moves(self) -> int:
        return len(self.moves)

    @property
    def history(self) -> Tuple[int, ...]:
        return tuple(self.moves)

    def column_height(self, col: int) -> int:
        if col < 0 or col >= self.width:
            raise InvalidColumn(col, self.width)
        if self._grid is not None:
            return self._grid.heights[col]
        return self.moves.count(col)

    def as_grid(self) -> GridBoard:
        if self._grid is None:
            self._grid = GridBoard.from_moves(self.moves, self.width, self.height)
        return self._grid

    def cell(self, col: int, row: int) -> Cell:
        return self.as_grid().cell(col, row)

    def outcome(self) -> Outcome:
        return self.as_grid().outcome()

    def winning_line(self) -> Optional[List[Coord]]:
        return self.as_grid().winning_line()

    def _play(self, col: int) -> None:
        self.moves.append(col)
        if self._grid is not None:
            self._grid._play(col)

    def undo_last_move(self) -> int:
        if not self.moves:
            raise BoardError("Cannot undo: no moves played.")
        col = self.moves.pop()
        if self._grid is not None:
            self._grid.undo_last_move()
        return col
