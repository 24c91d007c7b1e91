#!/usr/bin/env python3
"""Time every algorithm x heuristic combination on one fixed board."""
from __future__ import annotations
import argparse, csv, logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from npuzzle.cli import parse_pieces
from npuzzle.domains.board import Board
from npuzzle.errors import MalformedBoard
from npuzzle.solver import ALGORITHMS, size_for_tile_count, solve

logger = logging.getLogger(__name__)

HEADER = ["algorithm", "heuristic", "run", "cost", "expanded", "generated", "time_sec", "termination"]

# 15-puzzle from the Wikipedia article
DEFAULT_PIECES = "1,2,4,3,5,6,7,8,9,10,11,15,13,14,12"

_USES_HEURISTIC = ("a-star", "id-a-star", "ida-star")


def run_benchmark(board: Board, algorithms: Sequence[str], heuristics: Sequence[str],
                  runs: int, timeout_sec: Optional[float] = None) -> List[Dict[str, object]]:
    rows: List[Dict[str, object]] = []
    for algo in algorithms:
        # uninformed searches ignore the heuristic, so time them once
        heurs = heuristics if algo in _USES_HEURISTIC else [""]
        for heur in heurs:
            for run in range(1, runs + 1):
                res = solve(board, algo, heur or "taxicab", timeout_sec=timeout_sec)
                logger.info("%s/%s run %d: %s in %.4fs", algo, heur or "-", run,
                            res.termination, res.time)
                rows.append({
                    "algorithm": algo, "heuristic": heur, "run": run,
                    "cost": "" if res.cost is None else res.cost,
                    "expanded": res.expanded, "generated": res.generated,
                    "time_sec": f"{res.time:.6f}", "termination": res.termination,
                })
    return rows


def write_csv(rows: List[Dict[str, object]], out: Path) -> None:
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER)
        w.writeheader()
        w.writerows(rows)


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="N-puzzle algorithm/heuristic benchmark")
    ap.add_argument("--algorithms", nargs="+", choices=ALGORITHMS, default=["a-star", "id-a-star"])
    ap.add_argument("--heuristics", nargs="+", choices=["taxicab", "num-incorrect"],
                    default=["taxicab", "num-incorrect"])
    ap.add_argument("--pieces", type=parse_pieces, default=parse_pieces(DEFAULT_PIECES))
    ap.add_argument("--x-blank", type=int, default=3)
    ap.add_argument("--y-blank", type=int, default=3)
    ap.add_argument("--runs", type=int, default=5)
    ap.add_argument("--timeout-sec", type=float, default=None, help="Per-run wall time")
    ap.add_argument("--out", type=Path, default=Path("results/benchmark.csv"))
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        size = size_for_tile_count(len(args.pieces))
        board = Board.from_tiles(size, args.pieces, (args.x_blank, args.y_blank))
    except MalformedBoard as e:
        ap.error(f"Failed to create puzzle: {e}")
    rows = run_benchmark(board, args.algorithms, args.heuristics, args.runs, args.timeout_sec)
    write_csv(rows, args.out)
    print(f"Wrote {args.out} ({len(rows)} runs)")


if __name__ == "__main__":
    main()
