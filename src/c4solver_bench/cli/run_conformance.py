from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pandas as pd

from c4solver.config import COLS, DEFAULT_BOARD, LOG_FORMAT, LOG_LEVEL, ROWS
from c4solver.core.factory import BOARD_KINDS

from ..io.reference import load_reference, reference_files
from ..metrics.summarize import failures, summarize
from ..runner import run_reference


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="c4solver_bench run",
        description="Check solver scores against '<moves> <score>' reference files.",
    )
    ap.add_argument("--ref", type=str, nargs="*", default=None, help="Reference file(s). If omitted, uses every file in --ref-dir.")
    ap.add_argument("--ref-dir", type=str, default="tests/fixtures", help="Directory searched when --ref is not given")
    ap.add_argument("--pattern", type=str, default="*.txt", help="Glob pattern for files in --ref-dir")
    ap.add_argument(
        "--board",
        type=str,
        nargs="+",
        default=[DEFAULT_BOARD],
        choices=sorted(BOARD_KINDS) + ["all"],
        help="Board representation(s) to check",
    )
    ap.add_argument("--width", type=int, default=COLS)
    ap.add_argument("--height", type=int, default=ROWS)
    ap.add_argument("--csv", type=str, default=None, help="Write per-line results to this CSV")
    ap.add_argument("--log-level", type=str, default=LOG_LEVEL)
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    if args.ref:
        paths = [Path(p) for p in args.ref]
    else:
        paths = reference_files(Path(args.ref_dir), pattern=args.pattern)

    ref = load_reference(paths)
    print(f"Loaded {len(ref):,} reference lines from {len(paths)} file(s)")

    kinds = sorted(BOARD_KINDS) if "all" in args.board else list(dict.fromkeys(args.board))
    results = pd.concat(
        [run_reference(ref, kind, args.width, args.height) for kind in kinds],
        ignore_index=True,
    )

    print("\n=== Summary ===")
    print(summarize(results).to_string(index=False))

    bad = failures(results)
    if not bad.empty:
        print("\n=== Mismatches ===")
        print(bad.to_string(index=False))

    if args.csv:
        out = Path(args.csv)
        out.parent.mkdir(parents=True, exist_ok=True)
        results.to_csv(out, index=False)
        print(f"\nSaved results to: {out.resolve()}")

    return 0 if bad.empty else 1


if __name__ == "__main__":
    raise SystemExit(main())
