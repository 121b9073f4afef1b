from __future__ import annotations
from typing import Protocol

from c4solver.game.state import GameState
from c4solver.types import Move


class QuitGame(Exception):
    """Raised from `choose_move` when the player abandons the game."""


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Move:
        """Column for the side to move. ValueError means: ask again."""
        ...


def describe_choice(agent: Agent, move: Move) -> str:
    info = getattr(agent, "last_info", None)
    if not info:
        return f"{agent.name} chose {int(move) + 1}"

    status = f"{agent.name} chose {info.get('move_col')} | {info.get('time_ms')}ms"
    if "nodes" in info:
        status += f" | nodes={info['nodes']}"
    if "outlook" in info:
        status += f" | {info['outlook']}"
    return status
