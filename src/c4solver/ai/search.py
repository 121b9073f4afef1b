from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
import logging
import sys
import time
from typing import TYPE_CHECKING, Dict, Iterator, Optional, Tuple

from c4solver.config import RECURSION_HEADROOM

if TYPE_CHECKING:
    from c4solver.core.board import Board

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0
    time_ms: float = 0.0


@contextmanager
def recursion_headroom(depth: int) -> Iterator[None]:
    """
    Let the interpreter stack hold a search `depth` plies deep for the
    duration of the block. The previous limit is restored on exit.
    """
    previous = sys.getrecursionlimit()
    needed = depth + RECURSION_HEADROOM
    if previous >= needed:
        yield
        return

    logger.debug("Raising recursion limit to %d", needed)
    sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Negamax:
    """
    Exact negamax search with alpha-beta pruning and center-first ordering.

    Scores are from the side to move: 0 is a draw, a positive score k is a
    forced win, larger when it comes sooner ((size + 1 - N) // 2 for a win on
    the very next move), and a negative score is the opponent's forced win.

    The board is mutated in place. Every move applied by the search is undone
    before the call that applied it returns, cutoffs included.
    """

    def __init__(self) -> None:
        self.stats = SearchStats()

    def score(self, board: Board) -> int:
        return self.score_in_range(board, -board.size, board.size)

    def score_in_range(self, board: Board, alpha: int, beta: int) -> int:
        if alpha >= beta:
            raise ValueError(f"Empty search window [{alpha}, {beta}].")

        self.stats = SearchStats()
        start = time.perf_counter()
        with recursion_headroom(board.size - board.num_moves):
            result = self._negamax(board, alpha, beta)
        self.stats.time_ms = (time.perf_counter() - start) * 1000

        logger.debug(
            "score=%d window=[%d, %d] moves=%d nodes=%d cutoffs=%d %.1fms",
            result, alpha, beta, board.num_moves,
            self.stats.nodes, self.stats.cutoffs, self.stats.time_ms,
        )
        return result

    def _negamax(self, board: Board, alpha: int, beta: int) -> int:
        self.stats.nodes += 1

        size = board.size
        n = board.num_moves
        if n == size:
            return 0

        order = board.column_order()

        # An immediate win beats anything a deeper line could give
        for col in order:
            if board.is_playable(col) and board.is_winning_move(col):
                return (size + 1 - n) // 2

        # Without an immediate win the opponent moves at least once more
        best = (size - 1 - n) // 2
        if beta > best:
            beta = best
        if alpha >= best:
            return best

        for col in order:
            if not board.is_playable(col):
                continue
            board.apply_move(col)
            try:
                child = -self._negamax(board, -beta, -alpha)
            finally:
                board.undo_last_move()

            if child >= beta:
                self.stats.cutoffs += 1
                return child
            if child > alpha:
                alpha = child

        return alpha

    def _child_score(self, board: Board, col: int, alpha: int, beta: int) -> int:
        """Score of playing `col` for the side to move, searched within [alpha, beta]."""
        board.apply_move(col)
        try:
            return -self._negamax(board, -beta, -alpha)
        finally:
            board.undo_last_move()

    def column_scores(self, board: Board) -> Dict[int, Optional[int]]:
        """
        Exact score of every column for the side to move, None where the
        column cannot be played.
        """
        self.stats = SearchStats()
        start = time.perf_counter()

        size = board.size
        win = (size + 1 - board.num_moves) // 2
        scores: Dict[int, Optional[int]] = {}
        with recursion_headroom(size - board.num_moves):
            for col in range(board.width):
                if not board.is_playable(col):
                    scores[col] = None
                elif board.is_winning_move(col):
                    scores[col] = win
                else:
                    scores[col] = self._child_score(board, col, -size, size)

        self.stats.time_ms = (time.perf_counter() - start) * 1000
        return scores

    def best_move(self, board: Board) -> Tuple[int, int]:
        """
        Highest-scoring column and its exact score; ties go to the column
        searched first.

        Columns after the first are searched with their lower bound raised to
        the best score so far, so a column that cannot beat it only costs a
        refutation.
        """
        if board.is_full():
            raise ValueError("No valid moves.")

        self.stats = SearchStats()
        start = time.perf_counter()

        size = board.size
        order = [c for c in board.column_order() if board.is_playable(c)]
        best_col: Optional[int] = None
        best = -size

        for col in order:
            if board.is_winning_move(col):
                best_col, best = col, (size + 1 - board.num_moves) // 2
                break
        else:
            with recursion_headroom(size - board.num_moves):
                for col in order:
                    value = self._child_score(board, col, best, size)
                    # values <= best are only upper bounds
                    if best_col is None or value > best:
                        best_col, best = col, value

        self.stats.time_ms = (time.perf_counter() - start) * 1000
        logger.debug("best move %s score=%d nodes=%d", best_col, best, self.stats.nodes)
        return best_col, best  # type: ignore[return-value]


def score(board: Board) -> int:
    return Negamax().score(board)


def score_in_range(board: Board, alpha: int, beta: int) -> int:
    return Negamax().score_in_range(board, alpha, beta)


def moves_to_win(board: Board, value: int) -> int:
    """
    Number of moves the winning side still has to play under perfect play,
    for a nonzero score `value` of `board`.
    """
    if value > 0:
        return (board.size + 1 - board.num_moves) // 2 - value + 1
    if value < 0:
        return (board.size - board.num_moves) // 2 + value + 1
    raise ValueError("A score of 0 is a draw.")


def describe_score(board: Board, value: int) -> str:
    if value == 0:
        return "draw with best play"
    winner = board.mover if value > 0 else board.mover.other
    k = moves_to_win(board, value)
    unit = "move" if k == 1 else "moves"
    return f"{winner} wins in {k} {unit}"
