from __future__ import annotations
import logging
from time import perf_counter
from typing import Callable, Hashable, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

from npuzzle.search.result import EXHAUSTED, OK, TIMEOUT, SearchResult

S = TypeVar("S", bound=Hashable)

logger = logging.getLogger(__name__)

_CUTOFF = "cutoff"


def iddfs(
    start: S,
    successors_fn: Callable[[S], Iterable[S]],
    success_fn: Callable[[S], bool],
    max_depth: Optional[int] = None,
    timeout_sec: Optional[float] = None,
) -> SearchResult[S]:
    """
    Iterative-deepening DFS: depth-limited rounds with limit 1, 2, 3, ...

    Nothing is remembered between rounds. Within a round a state already on
    the current path is never re-entered, which also rules out undoing the
    previous move. The first round that reaches the goal yields a shortest
    path. A round that is never cut off by its limit means every reachable
    simple path was walked, so the search stops with no solution.
    """
    t0 = perf_counter()
    expanded = 0
    generated = 0
    path: Optional[Tuple[S, ...]] = None

    def deadline_passed() -> bool:
        return timeout_sec is not None and (perf_counter() - t0) > timeout_sec

    def depth_limited(limit: int) -> Optional[str]:
        """Returns OK (sets ``path``), _CUTOFF, TIMEOUT or None (nothing left)."""
        nonlocal expanded, generated, path
        stack: List[Tuple[S, Iterator[S]]] = [(start, iter(successors_fn(start)))]
        on_path: Set[S] = {start}
        expanded += 1
        cut = False

        while stack:
            if deadline_passed():
                return TIMEOUT
            s, it = stack[-1]
            try:
                s2 = next(it)
            except StopIteration:
                on_path.remove(s)
                stack.pop()
                continue

            generated += 1
            if s2 in on_path:
                continue
            if success_fn(s2):
                path = tuple(frame[0] for frame in stack) + (s2,)
                return OK
            if len(stack) >= limit:
                cut = True
                continue

            on_path.add(s2)
            stack.append((s2, iter(successors_fn(s2))))
            expanded += 1

        return _CUTOFF if cut else None

    def done(termination: str, limit: Optional[int]) -> SearchResult[S]:
        logger.info("IDDFS %s: limit=%s expanded=%d generated=%d",
                    termination, limit, expanded, generated)
        return SearchResult(
            algorithm="IDDFS", path=path,
            cost=len(path) - 1 if path is not None else None,
            termination=termination, expanded=expanded, generated=generated,
            time=perf_counter() - t0, bound_final=limit,
        )

    if success_fn(start):
        path = (start,)
        return done(OK, 0)

    limit = 1
    while True:
        logger.debug("IDDFS round with depth limit %d", limit)
        outcome = depth_limited(limit)
        if outcome == OK:
            return done(OK, limit)
        if outcome == TIMEOUT:
            return done(TIMEOUT, limit)
        if outcome is None:
            return done(EXHAUSTED, limit)
        if max_depth is not None and limit >= max_depth:
            return done(EXHAUSTED, limit)
        limit += 1
