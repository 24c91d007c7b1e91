from __future__ import annotations
import logging
from time import perf_counter
from typing import Callable, Hashable, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

from npuzzle.search.result import EXHAUSTED, OK, TIMEOUT, SearchResult

S = TypeVar("S", bound=Hashable)

logger = logging.getLogger(__name__)


def dfs(
    start: S,
    successors_fn: Callable[[S], Iterable[S]],
    success_fn: Callable[[S], bool],
    max_depth: Optional[int] = None,
    timeout_sec: Optional[float] = None,
) -> SearchResult[S]:
    """
    Iterative DFS with a global visited set and optional depth bound.
    Reports the first path found, which is usually far from the shortest.
    The current path is exactly the stack, so no parent map is kept.
    """
    t0 = perf_counter()
    expanded = 0           # nodes whose children we started to iterate
    generated = 0          # child edges considered

    # stack holds: (state, depth, iterator_over_successors)
    stack: List[Tuple[S, int, Iterator[S]]] = []
    visited: Set[S] = {start}

    def done(termination: str, goal: Optional[S] = None) -> SearchResult[S]:
        path = None
        if goal is not None:
            path = tuple(frame[0] for frame in stack) + (goal,)
        logger.info("DFS %s: expanded=%d generated=%d", termination, expanded, generated)
        return SearchResult(
            algorithm="DFS", path=path,
            cost=len(path) - 1 if path is not None else None,
            termination=termination, expanded=expanded, generated=generated,
            time=perf_counter() - t0, bound_final=max_depth,
        )

    if success_fn(start):
        return done(OK, start)

    stack.append((start, 0, iter(successors_fn(start))))
    expanded += 1

    while stack:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return done(TIMEOUT)

        s, d, it = stack[-1]
        try:
            s2 = next(it)
        except StopIteration:
            stack.pop()
            continue

        generated += 1
        if s2 in visited:
            continue
        # enforce depth bound on the child
        if max_depth is not None and d + 1 > max_depth:
            continue
        visited.add(s2)

        if success_fn(s2):
            return done(OK, s2)

        stack.append((s2, d + 1, iter(successors_fn(s2))))
        expanded += 1

    return done(EXHAUSTED)
