from __future__ import annotations
from typing import Callable, Dict

from npuzzle.domains.board import Board
from npuzzle.heuristics.misplaced import num_incorrect
from npuzzle.heuristics.taxicab import taxicab_distance

Heuristic = Callable[[Board], int]

HEURISTICS: Dict[str, Heuristic] = {
    "num-incorrect": num_incorrect,
    "taxicab": taxicab_distance,
}


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic {name!r}; choose from {', '.join(HEURISTICS)}"
        ) from None
