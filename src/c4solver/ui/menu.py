from __future__ import annotations

import time

from c4solver.ai.random_agent import RandomAgent
from c4solver.ai.solver_agent import SolverAgent
from c4solver.game.controller import run_game
from c4solver.ui.human import HumanAgent


def run_menu() -> None:
    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human vs Solver")
    print("3) Solver vs Random AI")

    choice = input("Choice: ").strip()

    if choice == "1":
        p1, p2 = HumanAgent(), HumanAgent()
    elif choice == "2":
        p1, p2 = HumanAgent(), SolverAgent()
    elif choice == "3":
        p1, p2 = SolverAgent(), RandomAgent()
    else:
        print("\nInvalid choice. Defaulting to Human vs Human.\n")
        p1, p2 = HumanAgent(), HumanAgent()

    print(f"\nStarting game: {p1.name} vs {p2.name}")
    print("Game will start in 3 seconds...\n")
    time.sleep(3)
    run_game(p1, p2)
