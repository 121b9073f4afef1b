from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from c4solver.types import Piece


class OutcomeKind(Enum):
    UNDECIDED = "undecided"
    DRAW = "draw"
    WON = "won"


@dataclass(frozen=True, slots=True)
class Outcome:
    """
    Result of a board: still undecided, drawn (full, no line) or won by a piece.
    `winner` is set exactly when kind is WON.
    """
    kind: OutcomeKind
    winner: Optional[Piece] = None

    def __post_init__(self) -> None:
        if (self.kind is OutcomeKind.WON) != (self.winner is not None):
            raise ValueError("winner must be given for WON outcomes and only for them")

    @classmethod
    def won(cls, piece: Piece) -> "Outcome":
        return _WON[piece]

    @property
    def is_over(self) -> bool:
        return self.kind is not OutcomeKind.UNDECIDED

    def __str__(self) -> str:
        if self.kind is OutcomeKind.WON:
            return f"{self.winner} wins"
        if self.kind is OutcomeKind.DRAW:
            return "draw"
        return "undecided"


UNDECIDED = Outcome(OutcomeKind.UNDECIDED)
DRAW = Outcome(OutcomeKind.DRAW)
_WON = {p: Outcome(OutcomeKind.WON, p) for p in Piece}
