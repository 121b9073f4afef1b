from __future__ import annotations
from dataclasses import dataclass, field
import random

from c4solver.game.state import GameState
from c4solver.types import Move


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)

    def choose_move(self, state: GameState) -> Move:
        moves = state.board.valid_moves()
        if not moves:
            raise ValueError("No valid moves.")
        return self.rng.choice(moves)
