# src/c4solver/types.py

from __future__ import annotations
from enum import Enum
from typing import Optional, NewType


class Piece(str, Enum):
    FIRST = "X"
    SECOND = "O"

    @classmethod
    def for_ply(cls, ply: int) -> "Piece":
        return cls.FIRST if ply % 2 == 0 else cls.SECOND

    @property
    def other(self) -> "Piece":
        return Piece.SECOND if self is Piece.FIRST else Piece.FIRST

    def __str__(self) -> str:
        return self.value


Cell = Optional[Piece]
Move = NewType("Move", int)   # column index 0..width-1
Coord = tuple[int, int]       # (col, row), row 0 = bottom
