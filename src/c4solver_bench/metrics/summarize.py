from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from c4solver_bench.runner import RESULT_COLS


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    expected_cols: tuple[str, ...] = tuple(RESULT_COLS)


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def load_results(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path, dtype={"moves": str}, keep_default_na=False)

    # Trim whitespace in column names just in case
    df.columns = [c.strip() for c in df.columns]
    _require_cols(df, list(spec.expected_cols))

    for c in ["line", "expected", "num_moves", "actual", "nodes", "time_ms"]:
        df[c] = pd.to_numeric(df[c], errors="coerce")
    df["ok"] = df["ok"].astype(str).str.lower().isin({"true", "1"})
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Pass rate and cost per board representation."""
    _require_cols(df, ["board", "ok", "nodes", "time_ms"])
    if df.empty:
        return pd.DataFrame(columns=["board", "lines", "passed", "pass_rate", "nodes", "mean_ms", "max_ms"])

    out = (
        df.groupby("board")
        .agg(
            lines=("ok", "size"),
            passed=("ok", "sum"),
            nodes=("nodes", "sum"),
            mean_ms=("time_ms", "mean"),
            max_ms=("time_ms", "max"),
        )
        .reset_index()
    )
    out["pass_rate"] = out["passed"] / out["lines"]
    return out[["board", "lines", "passed", "pass_rate", "nodes", "mean_ms", "max_ms"]]


def failures(df: pd.DataFrame) -> pd.DataFrame:
    _require_cols(df, ["ok"])
    keep = [c for c in ["board", "source", "line", "moves", "expected", "actual", "error"] if c in df.columns]
    return df.loc[~df["ok"], keep].reset_index(drop=True)


def cost_by_depth(df: pd.DataFrame) -> pd.DataFrame:
    """Mean nodes and time per number of moves already played."""
    _require_cols(df, ["board", "num_moves", "nodes", "time_ms"])
    return (
        df.groupby(["board", "num_moves"])[["nodes", "time_ms"]]
        .mean()
        .reset_index()
        .sort_values(["board", "num_moves"])
        .reset_index(drop=True)
    )
