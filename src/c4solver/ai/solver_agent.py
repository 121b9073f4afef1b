from __future__ import annotations

from dataclasses import dataclass, field
import time

from c4solver.ai.search import Negamax, describe_score
from c4solver.config import ANALYSIS_MIN_MOVES
from c4solver.core.board import Board
from c4solver.game.state import GameState
from c4solver.types import Move


def _gives_away_win(board: Board, col: int) -> bool:
    """True if playing `col` lets the opponent win on their next move."""
    board.apply_move(col)
    try:
        return any(
            board.is_playable(c) and board.is_winning_move(c)
            for c in board.column_order()
        )
    finally:
        board.undo_last_move()


def tactical_move(board: Board) -> Move:
    """
    Cheap fallback before exact search is affordable:
    1) Immediate win
    2) Center-first move that does not hand the opponent a win
    3) Center-first playable move
    """
    order = [c for c in board.column_order() if board.is_playable(c)]
    if not order:
        raise ValueError("No valid moves.")

    for c in order:
        if board.is_winning_move(c):
            return Move(c)

    for c in order:
        if not _gives_away_win(board, c):
            return Move(c)

    return Move(order[0])


@dataclass(slots=True)
class SolverAgent:
    """
    Perfect player once the game is deep enough to solve quickly.
    Knobs:
      - exact_from_move: plies played before exact scores are used
    """
    name: str = "Solver"
    exact_from_move: int = ANALYSIS_MIN_MOVES
    engine: Negamax = field(default_factory=Negamax)

    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        board = state.board
        if board.is_full():
            raise ValueError("No valid moves.")

        start = time.perf_counter()

        if board.num_moves < self.exact_from_move:
            move = tactical_move(board)
            self.last_info = {
                "move_col": int(move) + 1,
                "mode": "tactical",
                "time_ms": max(1, int((time.perf_counter() - start) * 1000)),
            }
            return move

        best, value = self.engine.best_move(board)
        self.last_info = {
            "move_col": best + 1,
            "mode": "exact",
            "eval": value,
            "outlook": describe_score(board, value),
            "nodes": self.engine.stats.nodes,
            "time_ms": max(1, int((time.perf_counter() - start) * 1000)),
        }
        return Move(best)
