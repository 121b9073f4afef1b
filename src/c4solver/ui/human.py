from __future__ import annotations
from typing import Optional

from c4solver.ai.base import QuitGame
from c4solver.game.state import GameState
from c4solver.types import Move

QUIT_WORDS = {"q", "quit", "exit"}


def parse_move(raw: str, cols: int) -> Optional[Move]:
    """
    Parse a 1-based column typed by a player. Returns None when the player quits.
    """
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number or q.")
    col = int(s) - 1
    if not 0 <= col < cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Move(col)


class HumanAgent:
    """Reads one column per turn from the terminal."""

    name = "Human"

    def choose_move(self, state: GameState) -> Move:
        move = parse_move(input(f"Player {state.current} move: "), state.board.width)
        if move is None:
            raise QuitGame()
        return move
