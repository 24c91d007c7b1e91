#!/usr/bin/env python3
"""Solve one N-puzzle from the command line.

Usage::

    python -m npuzzle.cli --pieces 7,8,5,3,1,4,6,2 --x-blank 0 --y-blank 2
    python -m npuzzle.cli -a id-a-star -r num-incorrect \\
        --pieces 1,2,4,3,5,6,7,8,9,10,11,15,13,14,12 --x-blank 3 --y-blank 3
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from npuzzle.domains.board import Board
from npuzzle.errors import MalformedBoard
from npuzzle.heuristics.selector import HEURISTICS
from npuzzle.search.result import TIMEOUT
from npuzzle.solver import ALGORITHMS, size_for_tile_count, solve

logger = logging.getLogger(__name__)


def parse_pieces(text: str) -> List[int]:
    """Comma-separated list of positive integers."""
    out = []
    for raw in text.split(","):
        try:
            v = int(raw)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Failed to parse {raw!r} as a number") from None
        if v <= 0:
            raise argparse.ArgumentTypeError(f"Failed to convert {raw!r} to a positive number")
        out.append(v)
    return out


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve an 8- or 15-puzzle with a chosen search algorithm")
    ap.add_argument("-a", "--algorithm", choices=ALGORITHMS, default="a-star")
    ap.add_argument("-r", "--heuristic", choices=list(HEURISTICS), default="taxicab",
                    help="Only used by a-star and id-a-star")
    ap.add_argument("-p", "--pieces", type=parse_pieces, required=True,
                    help="Tiles in row-major order without the blank, e.g. 7,8,5,3,1,4,6,2")
    ap.add_argument("-x", "--x-blank", type=int, required=True, help="Row of the blank")
    ap.add_argument("-y", "--y-blank", type=int, required=True, help="Column of the blank")
    ap.add_argument("--timeout-sec", type=float, default=None, help="Wall time budget for the search")
    ap.add_argument("--no-solvability-check", action="store_true",
                    help="Search even when the parity test says the board is unsolvable")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    level = logging.WARNING if args.verbose == 0 else (logging.INFO if args.verbose == 1 else logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        size = size_for_tile_count(len(args.pieces))
        if not 0 <= args.x_blank < size:
            ap.error(f"Expected x_blank to be less than {size}, but got {args.x_blank}")
        if not 0 <= args.y_blank < size:
            ap.error(f"Expected y_blank to be less than {size}, but got {args.y_blank}")
        board = Board.from_tiles(size, args.pieces, (args.x_blank, args.y_blank))
    except MalformedBoard as e:
        ap.error(f"Failed to create puzzle: {e}")

    logger.info("Solving with %s (heuristic %s)", args.algorithm, args.heuristic)
    res = solve(board, args.algorithm, args.heuristic,
                check_solvable=not args.no_solvability_check,
                timeout_sec=args.timeout_sec)

    if not res.found:
        if res.termination == TIMEOUT:
            print(f"No solution within {args.timeout_sec}s (timeout).")
        else:
            print(f"No solution found ({res.termination}).")
        return 1

    for node in res.path:
        print(node)
    print(f"This cost of this solution (the # of moves) was {res.cost}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
