# src/c4solver/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

# Representation used by the interactive driver and the harness default
DEFAULT_BOARD = "bit"

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# The driver only shows exact scores once this many plies were played;
# earlier positions take too long to solve interactively.
ANALYSIS_MIN_MOVES = 26

# Extra interpreter frames kept on top of width * height search depth
RECURSION_HEADROOM = 200

LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
