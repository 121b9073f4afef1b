from __future__ import annotations
import os

from c4solver.config import USE_COLOR
from c4solver.types import Cell, Piece

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

PIECE_COLORS = {
    Piece.FIRST: "\033[31m",  # red
    Piece.SECOND: "\033[33m",  # yellow
}
EMPTY_GLYPH = "·"


def color_enabled() -> bool:
    # https://no-color.org
    return USE_COLOR and not os.environ.get("NO_COLOR")


def paint(text: str, *codes: str) -> str:
    if not codes or not color_enabled():
        return text
    return "".join(codes) + text + RESET


def glyph(cell: Cell, highlight: bool = False) -> str:
    """One board cell as printed: the piece letter in its color, or a dim dot."""
    if cell is None:
        return paint(EMPTY_GLYPH, FG_GRAY)
    text = paint(str(cell), PIECE_COLORS[cell])
    if highlight:
        # reverse video even without color so the winning line stays visible
        return f"{REVERSE}{text}{RESET}"
    return text
