from __future__ import annotations
import logging
import math
from time import perf_counter
from typing import Callable, Hashable, Iterable, List, Optional, Set, Tuple, TypeVar

from npuzzle.search.result import (
    EXHAUSTED, OK, TIMEOUT, SearchResult,
)

S = TypeVar("S", bound=Hashable)

logger = logging.getLogger(__name__)

FOUND = -1


def ida_star(
    start: S,
    successors_fn: Callable[[S], Iterable[Tuple[S, float]]],
    hfun: Callable[[S], float],
    success_fn: Callable[[S], bool],
    timeout_sec: Optional[float] = None,
) -> SearchResult[S]:
    """
    IDA*: repeated depth-first passes bounded by f = g + h.

    The first bound is h(start); each later bound is the smallest f that
    overflowed the previous one. Only the current path is kept, so memory is
    O(depth). A pass that prunes nothing and finds nothing ends the search.
    """
    t0 = perf_counter()
    timed_out = object()

    expanded = 0
    generated = 0
    solution_g: Optional[float] = None

    def dfs(state: S, g: float, bound: float, pathset: Set[S], path: List[S]):
        """
        returns:
            * timed_out sentinel  if timeout
            * FOUND               if goal found (path then ends at the goal)
            * next_min_bound      the minimal f that exceeded 'bound' in this subtree
        """
        nonlocal expanded, generated, solution_g
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return timed_out

        f = g + hfun(state)
        if f > bound:
            return f
        if success_fn(state):
            solution_g = g
            return FOUND

        expanded += 1
        min_next = math.inf
        for s2, c in successors_fn(state):
            if s2 in pathset:
                continue
            generated += 1
            pathset.add(s2)
            path.append(s2)
            t = dfs(s2, g + c, bound, pathset, path)
            if t is timed_out or t == FOUND:
                return t
            if t < min_next:
                min_next = t
            path.pop()
            pathset.remove(s2)
        return min_next

    def done(termination: str, bound: float, path: List[S]) -> SearchResult[S]:
        logger.info("IDA* %s: bound=%s expanded=%d generated=%d",
                    termination, bound, expanded, generated)
        found = termination == OK
        return SearchResult(
            algorithm="IDA*",
            path=tuple(path) if found else None,
            cost=solution_g if found else None,
            termination=termination, expanded=expanded, generated=generated,
            time=perf_counter() - t0, bound_final=bound,
        )

    pathset: Set[S] = {start}
    path: List[S] = [start]
    bound = hfun(start)
    while True:
        logger.debug("IDA* pass with f bound %s", bound)
        t = dfs(start, 0, bound, pathset, path)
        if t is timed_out:
            return done(TIMEOUT, bound, path)
        if t == FOUND:
            return done(OK, bound, path)
        if t == math.inf:
            return done(EXHAUSTED, bound, path)
        bound = t
