# src/c4solver/core/bit_board.py

from __future__ import annotations
from typing import List, Optional, Tuple

from c4solver.config import COLS, ROWS
from c4solver.core.board import Board
from c4solver.core.errors import BoardError, InvalidColumn
from c4solver.core.outcome import DRAW, UNDECIDED, Outcome
from c4solver.types import Cell, Coord, Piece


def _anchors(mask: int, stride: int) -> int:
    """
    Bits marking the lowest cell of every 4-in-a-row inside `mask`.

    Shift magnitudes: 1 is the cell above, stride the cell to the right,
    stride - 1 down-right, stride + 1 up-right. The always-empty guard bit on
    top of each column stops a run from leaking into the next column.
    """
    found = 0
    for shift in (1, stride, stride - 1, stride + 1):
        m = mask & (mask >> shift)
        found |= m & (m >> (2 * shift))
    return found


def has_alignment(mask: int, stride: int) -> bool:
    for shift in (1, stride, stride - 1, stride + 1):
        m = mask & (mask >> shift)
        if m & (m >> (2 * shift)):
            return True
    return False


class BitBoard(Board):
    """
    Bit-packed board.

    Cell (col, row) lives at bit col * (height + 1) + row. `occupied` marks
    filled cells, `first` marks cells owned by the first mover; the second
    mover's cells are `occupied ^ first`. Moves and undos are single-bit
    updates and win detection is a constant number of shifts and ANDs.
    """

    __slots__ = (
        "width", "height", "stride",
        "occupied", "first",
        "_bits", "_cols",
        "_bottom", "_top", "_column_mask",
    )

    def __init__(self, width: int = COLS, height: int = ROWS) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}.")
        self.width = width
        self.height = height
        self.stride = height + 1
        self.occupied = 0
        self.first = 0
        self._bits: List[int] = []  # bit set by each move, for undo
        self._cols: List[int] = []

        self._bottom = tuple(1 << (c * self.stride) for c in range(width))
        self._top = tuple(1 << (c * self.stride + height - 1) for c in range(width))
        self._column_mask = tuple(((1 << height) - 1) << (c * self.stride) for c in range(width))

    @property
    def num_moves(self) -> int:
        return len(self._bits)

    @property
    def history(self) -> Tuple[int, ...]:
        return tuple(self._cols)

    def second(self) -> int:
        return self.occupied ^ self.first

    def mask_of(self, piece: Piece) -> int:
        return self.first if piece is Piece.FIRST else self.occupied ^ self.first

    def column_height(self, col: int) -> int:
        if col < 0 or col >= self.width:
            raise InvalidColumn(col, self.width)
        return (self.occupied & self._column_mask[col]).bit_count()

    def is_playable(self, col: int) -> bool:
        return (
            0 <= col < self.width
            and len(self._bits) < self.width * self.height
            and not self.occupied & self._top[col]
        )

    def cell(self, col: int, row: int) -> Cell:
        bit = 1 << (col * self.stride + row)
        if not self.occupied & bit:
            return None
        return Piece.FIRST if self.first & bit else Piece.SECOND

    def _landing_bit(self, col: int) -> int:
        # adding the column's bottom bit carries through the filled cells
        return (self.occupied + self._bottom[col]) & self._column_mask[col]

    def _play(self, col: int) -> None:
        bit = self._landing_bit(col)
        if len(self._bits) % 2 == 0:
            self.first |= bit
        self.occupied |= bit
        self._bits.append(bit)
        self._cols.append(col)

    def undo_last_move(self) -> int:
        if not self._bits:
            raise BoardError("Cannot undo: no moves played.")
        bit = self._bits.pop()
        self.occupied &= ~bit
        self.first &= ~bit
        return self._cols.pop()

    def is_winning_move(self, col: int) -> bool:
        self._check_column(col)
        own = self.first if len(self._bits) % 2 == 0 else self.occupied ^ self.first
        return has_alignment(own | self._landing_bit(col), self.stride)

    def _first_line_anchor(self) -> Optional[Tuple[Piece, int]]:
        """Owner and anchor bit of the line a column-major scan would meet first."""
        best: Optional[Tuple[Piece, int]] = None
        for piece, mask in ((Piece.FIRST, self.first), (Piece.SECOND, self.occupied ^ self.first)):
            found = _anchors(mask, self.stride)
            if not found:
                continue
            lowest = found & -found
            if best is None or lowest < best[1]:
                best = (piece, lowest)
        return best

    def outcome(self) -> Outcome:
        hit = self._first_line_anchor()
        if hit is not None:
            return Outcome.won(hit[0])
        if len(self._bits) == self.width * self.height:
            return DRAW
        return UNDECIDED

    def winning_line(self) -> Optional[List[Coord]]:
        hit = self._first_line_anchor()
        if hit is None:
            return None
        piece, anchor = hit
        mask = self.mask_of(piece)
        index = anchor.bit_length() - 1
        for shift in (1, self.stride, self.stride + 1, self.stride - 1):
            if all(mask & (anchor << (k * shift)) for k in range(4)):
                return [divmod(index + k * shift, self.stride) for k in range(4)]
        return None
