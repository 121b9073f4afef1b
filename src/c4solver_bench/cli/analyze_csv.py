from __future__ import annotations

import argparse
from pathlib import Path

from ..metrics.summarize import LoadSpec, cost_by_depth, failures, load_results, summarize
from ..plots.chart import plot_cost_by_depth, plot_histograms


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="c4solver_bench analyze", description="Summarize a conformance results CSV.")
    ap.add_argument("--csv", type=str, required=True, help="Results CSV written by 'run --csv'")
    ap.add_argument("--figures", type=str, default=None, help="Directory for saving plots (no plots when omitted)")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    csv_path = Path(args.csv)
    df = load_results(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Rows: {len(df):,}")

    print("\n=== Summary ===")
    print(summarize(df).to_string(index=False))

    by_depth = cost_by_depth(df)
    print("\n=== Cost by moves played ===")
    print(by_depth.to_string(index=False))

    bad = failures(df)
    if not bad.empty:
        print("\n=== Mismatches ===")
        print(bad.to_string(index=False))

    if args.figures:
        outdir = Path(args.figures)
        created = plot_histograms(df, outdir, ["nodes", "time_ms"])
        trend = plot_cost_by_depth(by_depth, outdir)
        if trend is not None:
            created.append(trend)
        print(f"\nSaved {len(created)} figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
