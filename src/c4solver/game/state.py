from __future__ import annotations
from dataclasses import dataclass

from c4solver.core.board import Board
from c4solver.types import Piece


@dataclass(slots=True)
class GameState:
    board: Board
    last_status: str = "Player X starts."

    @property
    def current(self) -> Piece:
        return self.board.mover
