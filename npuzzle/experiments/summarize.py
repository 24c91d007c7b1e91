#!/usr/bin/env python3
"""Aggregate benchmark CSVs per (algorithm, heuristic) and optionally plot them."""
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt


def load(paths: Sequence[Path]) -> pd.DataFrame:
    dfs = [pd.read_csv(p) for p in paths]
    df = pd.concat(dfs, ignore_index=True)
    need = {"algorithm", "heuristic", "time_sec", "expanded", "termination"}
    missing = need - set(df.columns)
    if missing:
        raise ValueError(f"Benchmark CSV is missing columns: {sorted(missing)}")
    df["heuristic"] = df["heuristic"].fillna("-")
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """One row per (algorithm, heuristic): run count, time stats, mean expanded."""
    g = df.groupby(["algorithm", "heuristic"], sort=True)
    out = g["time_sec"].agg(["count", "mean", "std", "min", "max"])
    out["std"] = out["std"].fillna(0.0)
    out["expanded_mean"] = g["expanded"].mean()
    out["solved"] = g["termination"].apply(lambda s: int((s == "ok").sum()))
    return out.reset_index()


def plot_summary(summary: pd.DataFrame, out_path: Path) -> None:
    labels = [f"{a}\n{h}" for a, h in zip(summary["algorithm"], summary["heuristic"])]
    x = np.arange(len(labels))
    fig, ax = plt.subplots(figsize=(max(4, 1.4 * len(labels)), 3.5))
    ax.bar(x, summary["mean"], yerr=summary["std"], capsize=4, color="#0072B2")
    ax.set_xticks(x)
    ax.set_xticklabels(labels, fontsize=8)
    ax.set_ylabel("time (s)")
    ax.set_title("Mean solve time")
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=200)
    plt.close(fig)


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Summarize npuzzle benchmark CSVs")
    ap.add_argument("csv", type=Path, nargs="+")
    ap.add_argument("--plot", type=Path, default=None, help="Save a bar chart of mean time here")
    args = ap.parse_args(argv)

    summary = summarize(load(args.csv))
    print(summary.to_string(index=False, float_format=lambda v: f"{v:.4f}"))
    if args.plot is not None:
        plot_summary(summary, args.plot)
        print(f"Saved {args.plot}")


if __name__ == "__main__":
    main()
