from __future__ import annotations

import logging

from c4solver.config import LOG_FORMAT, LOG_LEVEL
from c4solver.ui.menu import run_menu


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    run_menu()


if __name__ == "__main__":
    main()
