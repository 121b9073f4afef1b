from __future__ import annotations

import sys

from .cli.analyze_csv import main as analyze_main
from .cli.run_conformance import main as run_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Default behavior: check the shipped fixtures
    if not argv:
        return run_main([])

    cmd = argv[0].lower()
    rest = argv[1:]

    if cmd in {"run", "check"}:
        return run_main(rest)

    if cmd in {"analyze", "analysis"}:
        return analyze_main(rest)

    if cmd.startswith("-"):
        return run_main(argv)

    print("Usage:")
    print("  python -m c4solver_bench run [--ref FILE ...] [--board bit|grid|history|all] [--csv OUT]")
    print("  python -m c4solver_bench analyze --csv OUT [--figures DIR]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
