from __future__ import annotations

import logging
import time

import pandas as pd

from c4solver.ai.search import Negamax
from c4solver.config import COLS, ROWS
from c4solver.core.errors import BoardError
from c4solver.core.factory import board_class

logger = logging.getLogger(__name__)

RESULT_COLS = [
    "source", "line", "moves", "expected",
    "board", "num_moves", "actual", "ok", "nodes", "time_ms", "error",
]


def check_line(moves: str, expected: int, kind: str, engine: Negamax, width: int = COLS, height: int = ROWS) -> dict:
    """Replay `moves` on an empty board of `kind`, score it and compare with `expected`."""
    row = {
        "board": kind,
        "num_moves": len(moves),
        "actual": None,
        "ok": False,
        "nodes": 0,
        "time_ms": 0.0,
        "error": "",
    }
    try:
        board = board_class(kind).from_moves(moves, width, height)
    except BoardError as e:
        row["error"] = str(e)
        return row

    start = time.perf_counter()
    actual = engine.score(board)
    row["time_ms"] = (time.perf_counter() - start) * 1000
    row["actual"] = actual
    row["nodes"] = engine.stats.nodes
    row["ok"] = actual == expected
    return row


def run_reference(ref: pd.DataFrame, kind: str, width: int = COLS, height: int = ROWS) -> pd.DataFrame:
    engine = Negamax()
    rows = []
    for rec in ref.itertuples(index=False):
        result = check_line(rec.moves, int(rec.expected), kind, engine, width, height)
        if not result["ok"]:
            logger.warning(
                "%s:%s %s expected %s got %s %s",
                rec.source, rec.line, rec.moves, rec.expected, result["actual"], result["error"],
            )
        rows.append({"source": rec.source, "line": rec.line, "moves": rec.moves, "expected": rec.expected, **result})

    out = pd.DataFrame(rows, columns=RESULT_COLS)
    passed = int(out["ok"].sum()) if not out.empty else 0
    logger.info("%s: %d/%d reference lines match", kind, passed, len(out))
    return out
