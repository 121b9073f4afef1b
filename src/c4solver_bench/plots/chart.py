from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str]) -> list[Path]:
    num_cols = [c for c in cols if c in df.columns and pd.api.types.is_numeric_dtype(df[c])]
    if not num_cols:
        return []

    _ensure_dir(outdir)
    created = []
    for c in num_cols:
        fig = plt.figure()
        for kind, part in df.groupby("board"):
            plt.hist(part[c].dropna(), bins=30, alpha=0.6, label=str(kind))
        plt.title(f"Histogram: {c}")
        plt.xlabel(c)
        plt.ylabel("count")
        plt.legend()

        path = outdir / f"hist_{c}.png"
        fig.savefig(path, dpi=200, bbox_inches="tight")
        plt.close(fig)
        created.append(path)
    return created


def plot_cost_by_depth(by_depth: pd.DataFrame, outdir: Path, metric: str = "time_ms") -> Path | None:
    """
    Mean search cost against the number of moves already played, one line per board.
    """
    if metric not in by_depth.columns or by_depth.empty:
        return None

    _ensure_dir(outdir)
    fig = plt.figure()
    for kind, part in by_depth.groupby("board"):
        plt.plot(part["num_moves"], part[metric], marker="o", label=str(kind))
    plt.yscale("log")
    plt.title(f"{metric} vs moves played")
    plt.xlabel("moves played")
    plt.ylabel(metric)
    plt.legend()

    path = outdir / f"{metric}_by_depth.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path
