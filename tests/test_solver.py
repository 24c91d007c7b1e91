"""Puzzle entry points: every algorithm on real boards.

Start boards are short random walks back from the goal so that the
uninformed searches stay fast; the walk is a test helper only.
"""

from __future__ import annotations

import random

import pytest

from npuzzle.domains.board import Board
from npuzzle.errors import MalformedBoard
from npuzzle.search.result import EXHAUSTED, OK, UNSOLVABLE, SearchResult
from npuzzle.solver import (
    ALGORITHMS, size_for_tile_count, solve, solve_a_star, solve_bfs, solve_dfs,
    solve_ida_star, solve_iddfs,
)

# four moves from the goal; taxicab distance is also 4
FOUR_MOVES = Board.from_tiles(3, [1, 3, 4, 2, 5, 7, 8, 6], (0, 0))
UNSOLVABLE_8 = Board.from_tiles(3, [2, 1, 3, 4, 5, 6, 7, 8], (2, 2))
UNSOLVABLE_3 = Board.from_tiles(2, [2, 1, 3], (1, 1))


# -- helpers ------------------------------------------------------------------


def _walk(n: int, moves: int, seed: int) -> Board:
    rng = random.Random(seed)
    board = Board.goal(n)
    for _ in range(moves):
        board = rng.choice(board.successors())
    return board


def _assert_valid_solution(start: Board, res: SearchResult) -> None:
    assert res.termination == OK
    path = res.path
    assert path[0] == start
    assert path[-1].is_goal()
    for prev, nxt in zip(path, path[1:]):
        assert nxt in prev.successors()
    assert res.cost == len(path) - 1


# -- solvable boards ----------------------------------------------------------


@pytest.mark.parametrize("algorithm", ALGORITHMS)
@pytest.mark.parametrize("heuristic", ["taxicab", "num-incorrect"])
def test_every_algorithm_solves(algorithm: str, heuristic: str) -> None:
    res = solve(FOUR_MOVES, algorithm, heuristic)
    _assert_valid_solution(FOUR_MOVES, res)
    if algorithm == "dfs":
        assert res.cost >= 4
    else:
        assert res.cost == 4


@pytest.mark.parametrize("seed", range(5))
def test_optimal_algorithms_agree(seed: int) -> None:
    start = _walk(3, 14, seed)
    reference = solve_bfs(start)
    _assert_valid_solution(start, reference)
    assert reference.cost <= 14
    for res in (
        solve_iddfs(start),
        solve_a_star(start, "taxicab"),
        solve_a_star(start, "num-incorrect"),
        solve_ida_star(start, "taxicab"),
        solve_ida_star(start, "num-incorrect"),
    ):
        _assert_valid_solution(start, res)
        assert res.cost == reference.cost, res.algorithm


def test_dfs_path_is_legal_but_not_shortest() -> None:
    start = _walk(3, 10, 42)
    res = solve_dfs(start)
    _assert_valid_solution(start, res)
    assert res.cost >= solve_bfs(start).cost


def test_a_star_and_ida_star_agree_on_scrambled_board() -> None:
    start = Board.from_tiles(3, [7, 8, 5, 3, 1, 4, 6, 2], (0, 2))
    a = solve_a_star(start, "taxicab")
    ida = solve_ida_star(start, "taxicab")
    _assert_valid_solution(start, a)
    _assert_valid_solution(start, ida)
    assert a.cost == ida.cost
    assert a.cost >= start.taxicab_distance()


def test_heuristic_function_can_be_passed_directly() -> None:
    res = solve_a_star(FOUR_MOVES, Board.taxicab_distance)
    assert res.cost == 4


def test_goal_board_needs_no_moves() -> None:
    goal = Board.goal(4)
    for algorithm in ALGORITHMS:
        res = solve(goal, algorithm)
        assert res.path == (goal,)
        assert res.cost == 0


def test_two_by_two() -> None:
    start = Board.from_tiles(2, [1, 2, 3], (1, 0))
    for algorithm in ALGORITHMS:
        res = solve(start, algorithm)
        _assert_valid_solution(start, res)
        if algorithm == "dfs":
            # the first branch goes the long way round the 12-state cycle
            assert res.cost == 11
        else:
            assert res.cost == 1


# -- unsolvable boards --------------------------------------------------------


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_unsolvable_board_reports_no_solution(algorithm: str) -> None:
    res = solve(UNSOLVABLE_8, algorithm)
    assert res.termination == UNSOLVABLE
    assert res.no_solution
    assert res.path is None and res.cost is None


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_unsolvable_small_board_exhausts_space(algorithm: str) -> None:
    res = solve(UNSOLVABLE_3, algorithm, check_solvable=False)
    assert res.termination == EXHAUSTED
    assert res.no_solution


def test_bfs_exhausts_unsolvable_eight_puzzle() -> None:
    res = solve_bfs(UNSOLVABLE_8, check_solvable=False)
    assert res.termination == EXHAUSTED
    # half of 9! arrangements are reachable
    assert res.expanded == 181440


# -- dispatch -----------------------------------------------------------------


def test_unknown_algorithm() -> None:
    with pytest.raises(ValueError):
        solve(FOUR_MOVES, "greedy")


def test_unknown_heuristic() -> None:
    with pytest.raises(ValueError):
        solve(FOUR_MOVES, "a-star", "linear_conflict")


@pytest.mark.parametrize("count, size", [(8, 3), (15, 4)])
def test_size_for_tile_count(count: int, size: int) -> None:
    assert size_for_tile_count(count) == size


@pytest.mark.parametrize("count", [0, 3, 9, 16, 24])
def test_size_for_other_tile_counts(count: int) -> None:
    with pytest.raises(MalformedBoard):
        size_for_tile_count(count)
