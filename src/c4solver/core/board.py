# src/c4solver/core/board.py

from __future__ import annotations
import abc
from functools import lru_cache
from typing import Iterable, Iterator, List, Optional, Tuple, Type, TypeVar, Union

from c4solver.ai import search
from c4solver.config import COLS, ROWS
from c4solver.core.errors import ColumnFull, InvalidColumn
from c4solver.core.outcome import Outcome, OutcomeKind
from c4solver.types import Cell, Coord, Move, Piece

B = TypeVar("B", bound="Board")


@lru_cache(maxsize=None)
def center_first_order(width: int) -> Tuple[int, ...]:
    """
    Center-first column visiting order: center, center-1, center+1, center-2, ...
    Only a search heuristic, never a game rule.
    """
    center = width // 2
    return tuple(center + (1 - 2 * (i % 2)) * ((i + 1) // 2) for i in range(width))


class Board(abc.ABC):
    """
    Capability contract shared by every board representation.

    A board has a fixed width and height and a move count N that only grows
    through `apply_move` (and shrinks again through `undo_last_move` during
    search). The piece for ply N is always `Piece.for_ply(N)`: the side to
    move is derived from the move count and never stored separately.

    Subclasses implement the storage primitives (`_play`, `undo_last_move`,
    `column_height`, `cell`, `outcome`, ...); validation, move ordering and
    scoring live here so every representation behaves the same way.
    """

    __slots__ = ()

    width: int
    height: int

    # --- storage primitives --------------------------------------------------

    @property
    @abc.abstractmethod
    def num_moves(self) -> int:
        ...

    @property
    @abc.abstractmethod
    def history(self) -> Tuple[int, ...]:
        """Columns played so far, oldest first."""

    @abc.abstractmethod
    def column_height(self, col: int) -> int:
        ...

    @abc.abstractmethod
    def cell(self, col: int, row: int) -> Cell:
        ...

    @abc.abstractmethod
    def outcome(self) -> Outcome:
        ...

    @abc.abstractmethod
    def winning_line(self) -> Optional[List[Coord]]:
        ...

    @abc.abstractmethod
    def _play(self, col: int) -> None:
        """Drop the mover's piece into `col`. Callers have checked playability."""

    @abc.abstractmethod
    def undo_last_move(self) -> int:
        """Revert the most recent move exactly and return its column."""

    # --- construction ---------------------------------------------------------

    @classmethod
    def from_moves(
        cls: Type[B],
        moves: Union[str, Iterable[int]],
        width: int = COLS,
        height: int = ROWS,
    ) -> B:
        board = cls(width, height)  # type: ignore[call-arg]
        for m in moves:
            board.apply_move(int(m))
        return board

    def copy(self: B) -> B:
        return type(self).from_moves(self.history, self.width, self.height)

    # --- shared queries ---------------------------------------------------------

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def mover(self) -> Piece:
        return Piece.for_ply(self.num_moves)

    def is_full(self) -> bool:
        return self.num_moves >= self.size

    def is_playable(self, col: int) -> bool:
        return (
            0 <= col < self.width
            and self.num_moves < self.size
            and self.column_height(col) < self.height
        )

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.width) if self.is_playable(c)]

    def column_order(self) -> Tuple[int, ...]:
        return center_first_order(self.width)

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (col, row, cell) for every cell, column by column, bottom row first."""
        for col in range(self.width):
            for row in range(self.height):
                yield col, row, self.cell(col, row)

    # --- mutation ---------------------------------------------------------------

    def _check_column(self, col: int) -> None:
        if col < 0 or col >= self.width:
            raise InvalidColumn(col, self.width)
        if not self.is_playable(col):
            raise ColumnFull(col)

    def apply_move(self, col: int) -> None:
        self._check_column(col)
        self._play(col)

    def is_winning_move(self, col: int) -> bool:
        self._check_column(col)
        piece = self.mover
        self._play(col)
        try:
            result = self.outcome()
        finally:
            self.undo_last_move()
        return result.kind is OutcomeKind.WON and result.winner is piece

    # --- scoring ------------------------------------------------------------------

    def score(self) -> int:
        return search.score(self)

    def score_in_range(self, alpha: int, beta: int) -> int:
        return search.score_in_range(self, alpha, beta)

    def __repr__(self) -> str:
        moves = "".join(str(c) for c in self.history) if self.width <= 10 else list(self.history)
        return f"{type(self).__name__}({self.width}x{self.height}, moves={moves!r})"
