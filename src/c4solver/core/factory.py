from __future__ import annotations
from typing import Dict, Type

from c4solver.config import COLS, DEFAULT_BOARD, ROWS
from c4solver.core.bit_board import BitBoard
from c4solver.core.board import Board
from c4solver.core.grid_board import GridBoard
from c4solver.core.history_board import HistoryBoard

BOARD_KINDS: Dict[str, Type[Board]] = {
    "grid": GridBoard,
    "history": HistoryBoard,
    "bit": BitBoard,
}


def board_class(kind: str) -> Type[Board]:
    try:
        return BOARD_KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown board kind {kind!r}. Choose from: {', '.join(BOARD_KINDS)}") from None


def new_board(kind: str = DEFAULT_BOARD, width: int = COLS, height: int = ROWS) -> Board:
    return board_class(kind)(width, height)  # type: ignore[call-arg]
