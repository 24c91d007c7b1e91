"""Puzzle-level entry points: run one of the five search algorithms on a Board."""
from __future__ import annotations
import logging
from typing import Callable, Dict, Optional, Union

from npuzzle.domains.board import Board
from npuzzle.errors import MalformedBoard
from npuzzle.heuristics.selector import Heuristic, get_heuristic
from npuzzle.search.a_star import a_star
from npuzzle.search.bfs import bfs
from npuzzle.search.dfs import dfs
from npuzzle.search.iddfs import iddfs
from npuzzle.search.ida_star import ida_star
from npuzzle.search.result import UNSOLVABLE, SearchResult

logger = logging.getLogger(__name__)

HeuristicArg = Union[str, Heuristic]

# tile count -> board size accepted from callers
SIZES: Dict[int, int] = {8: 3, 15: 4}


def size_for_tile_count(count: int) -> int:
    try:
        return SIZES[count]
    except KeyError:
        raise MalformedBoard(f"Expected 8 or 15 pieces, but got {count}") from None


def _resolve(heuristic: HeuristicArg) -> Heuristic:
    return get_heuristic(heuristic) if isinstance(heuristic, str) else heuristic


def _unsolvable(board: Board, algorithm: str) -> Optional[SearchResult[Board]]:
    if board.is_solvable():
        return None
    logger.info("%s skipped: board fails the parity test", algorithm)
    return SearchResult(algorithm=algorithm, path=None, cost=None, termination=UNSOLVABLE)


def solve_bfs(board: Board, check_solvable: bool = True,
              timeout_sec: Optional[float] = None) -> SearchResult[Board]:
    """Shortest solution in moves."""
    res = _unsolvable(board, "BFS") if check_solvable else None
    if res is not None:
        return res
    return bfs(board, Board.successors, Board.is_goal, timeout_sec=timeout_sec)


def solve_dfs(board: Board, check_solvable: bool = True,
              timeout_sec: Optional[float] = None) -> SearchResult[Board]:
    """First solution found; no optimality guarantee."""
    res = _unsolvable(board, "DFS") if check_solvable else None
    if res is not None:
        return res
    return dfs(board, Board.successors, Board.is_goal, timeout_sec=timeout_sec)


def solve_iddfs(board: Board, check_solvable: bool = True,
                timeout_sec: Optional[float] = None) -> SearchResult[Board]:
    """Shortest solution in moves, O(depth) memory."""
    res = _unsolvable(board, "IDDFS") if check_solvable else None
    if res is not None:
        return res
    return iddfs(board, Board.successors, Board.is_goal, timeout_sec=timeout_sec)


def solve_a_star(board: Board, heuristic: HeuristicArg = "taxicab",
                 check_solvable: bool = True, tie_break: str = "fifo",
                 timeout_sec: Optional[float] = None) -> SearchResult[Board]:
    """Optimal-cost solution."""
    hfun = _resolve(heuristic)
    res = _unsolvable(board, "A*") if check_solvable else None
    if res is not None:
        return res
    return a_star(board, Board.successors_with_cost, hfun, Board.is_goal,
                  tie_break=tie_break, timeout_sec=timeout_sec)


def solve_ida_star(board: Board, heuristic: HeuristicArg = "taxicab",
                   check_solvable: bool = True,
                   timeout_sec: Optional[float] = None) -> SearchResult[Board]:
    """Optimal-cost solution, O(depth) memory."""
    hfun = _resolve(heuristic)
    res = _unsolvable(board, "IDA*") if check_solvable else None
    if res is not None:
        return res
    return ida_star(board, Board.successors_with_cost, hfun, Board.is_goal,
                    timeout_sec=timeout_sec)


_UNINFORMED: Dict[str, Callable[..., SearchResult[Board]]] = {
    "bfs": solve_bfs,
    "dfs": solve_dfs,
    "id-dfs": solve_iddfs,
}
_INFORMED: Dict[str, Callable[..., SearchResult[Board]]] = {
    "a-star": solve_a_star,
    "id-a-star": solve_ida_star,
    "ida-star": solve_ida_star,
}
ALGORITHMS = tuple(_UNINFORMED) + tuple(_INFORMED)


def solve(board: Board, algorithm: str = "a-star", heuristic: HeuristicArg = "taxicab",
          check_solvable: bool = True,
          timeout_sec: Optional[float] = None) -> SearchResult[Board]:
    """Dispatch on the algorithm name; the heuristic only matters for a-star/id-a-star."""
    if algorithm in _UNINFORMED:
        return _UNINFORMED[algorithm](board, check_solvable=check_solvable,
                                      timeout_sec=timeout_sec)
    if algorithm in _INFORMED:
        return _INFORMED[algorithm](board, heuristic, check_solvable=check_solvable,
                                    timeout_sec=timeout_sec)
    raise ValueError(f"Unknown algorithm {algorithm!r}; choose from {', '.join(ALGORITHMS)}")
