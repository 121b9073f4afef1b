from __future__ import annotations

import logging
from typing import Optional

from c4solver.ai.base import Agent, QuitGame, describe_choice
from c4solver.ai.search import Negamax, describe_score
from c4solver.config import ANALYSIS_MIN_MOVES
from c4solver.core.board import Board
from c4solver.core.factory import new_board
from c4solver.core.outcome import Outcome, OutcomeKind
from c4solver.game.state import GameState
from c4solver.ui.render import render

logger = logging.getLogger(__name__)


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_x: Agent, agent_o: Agent, state: GameState) -> str:
    """
    Prepend a persistent header showing who X and O are.
    """
    x_name = _agent_name(agent_x, "Player X")
    o_name = _agent_name(agent_o, "Player O")

    header = f"X: {x_name} | O: {o_name} | Turn: {state.current} | Move {state.board.num_moves + 1}"
    if status:
        return f"{header}\n{status}"
    return header


def _analysis(board: Board, engine: Negamax) -> str:
    value = engine.score(board)
    return f"Score {value:+d} for {board.mover} ({describe_score(board, value)})"


def run_game(
    agent_x: Agent,
    agent_o: Agent,
    board: Optional[Board] = None,
    *,
    show_analysis: bool = True,
) -> Outcome:
    """
    Play one game on `board` (a fresh default board when omitted) and return
    its outcome. A game quit by a human returns an undecided outcome.
    """
    state = GameState(board=board if board is not None else new_board(), last_status="Player X starts.")
    board = state.board
    engine = Negamax()

    while True:
        render(board, _status_with_agents(state.last_status, agent_x, agent_o, state))

        result = board.outcome()
        if result.kind is OutcomeKind.WON:
            render(
                board,
                _status_with_agents(f"Player {result.winner} wins!", agent_x, agent_o, state),
                highlight=board.winning_line(),
            )
            return result

        if result.kind is OutcomeKind.DRAW:
            render(board, _status_with_agents("Draw game.", agent_x, agent_o, state))
            return result

        current_agent = agent_x if board.num_moves % 2 == 0 else agent_o
        player = state.current

        try:
            move = current_agent.choose_move(state)
            board.apply_move(move)
            logger.debug("ply %d: %s -> column %d", board.num_moves, player, move)
            status = describe_choice(current_agent, move)

            if (
                show_analysis
                and board.num_moves >= ANALYSIS_MIN_MOVES
                and not board.outcome().is_over
            ):
                status += f"\n{_analysis(board, engine)}"

            state.last_status = status

        except QuitGame:
            render(board, _status_with_agents("Game quit.", agent_x, agent_o, state))
            logger.info("Game quit after %d moves", board.num_moves)
            return result

        except ValueError as e:
            # InvalidColumn / ColumnFull / bad input: board is unchanged, ask again
            logger.debug("Rejected move from %s: %s", player, e)
            state.last_status = str(e)
