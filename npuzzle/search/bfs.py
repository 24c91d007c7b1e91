from __future__ import annotations
from collections import deque
import logging
from time import perf_counter
from typing import Callable, Dict, Hashable, Iterable, Optional, TypeVar

from npuzzle.search.result import (
    EXHAUSTED, OK, TIMEOUT, SearchResult, reconstruct_path,
)

S = TypeVar("S", bound=Hashable)

logger = logging.getLogger(__name__)


def bfs(start: S,
        successors_fn: Callable[[S], Iterable[S]],
        success_fn: Callable[[S], bool],
        timeout_sec: Optional[float] = None) -> SearchResult[S]:
    """Breadth-first search; the path found has the fewest moves.

    The goal test runs when a state is generated, so the goal is caught one
    level before it would be popped.
    """
    t0 = perf_counter()
    expanded = generated = 0
    parent: Dict[S, Optional[S]] = {start: None}

    def done(termination: str, goal: Optional[S] = None) -> SearchResult[S]:
        path = reconstruct_path(parent, goal) if goal is not None else None
        res = SearchResult(
            algorithm="BFS", path=path,
            cost=len(path) - 1 if path is not None else None,
            termination=termination, expanded=expanded, generated=generated,
            time=perf_counter() - t0,
        )
        logger.info("BFS %s: expanded=%d generated=%d", termination, expanded, generated)
        return res

    if success_fn(start):
        return done(OK, start)

    q = deque([start])
    while q:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return done(TIMEOUT)
        s = q.popleft()
        expanded += 1
        for s2 in successors_fn(s):
            generated += 1
            if s2 in parent:
                continue
            parent[s2] = s
            if success_fn(s2):
                return done(OK, s2)
            q.append(s2)
    return done(EXHAUSTED)
