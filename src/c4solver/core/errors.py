from __future__ import annotations


class BoardError(ValueError):
    """Base class for rejected board operations. The board is left unmodified."""


class InvalidColumn(BoardError):
    def __init__(self, col: int, width: int) -> None:
        super().__init__(f"Column {col} is out of range (0..{width - 1}).")
        self.col = col
        self.width = width


class ColumnFull(BoardError):
    def __init__(self, col: int) -> None:
        super().__init__(f"Column {col} is full.")
        self.col = col
