from __future__ import annotations
import heapq
import itertools
import logging
import math
from time import perf_counter
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Set, Tuple, TypeVar

from npuzzle.search.result import (
    EXHAUSTED, OK, TIMEOUT, Node, SearchResult, path_from_node,
)

S = TypeVar("S", bound=Hashable)

logger = logging.getLogger(__name__)

TIE_BREAKS = ("fifo", "lifo", "h", "g")


def a_star(
    start: S,
    successors_fn: Callable[[S], Iterable[Tuple[S, int]]],
    hfun: Callable[[S], int],
    success_fn: Callable[[S], bool],
    tie_break: str = "fifo",
    timeout_sec: Optional[float] = None,
) -> SearchResult[S]:
    """
    A* over ``successors_fn(state) -> [(next_state, cost)]``.

    Equal f values are ordered by ``tie_break``: "fifo" (insertion order),
    "lifo", "h" (smaller h first) or "g" (larger g first); the insertion
    counter keeps every choice deterministic. The reported cost is the g of
    the goal node.
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"Unknown tie_break {tie_break!r}; choose from {TIE_BREAKS}")
    t0 = perf_counter()

    open_heap: List[Tuple[Tuple[int, int, int], Node[S]]] = []
    counter = itertools.count()

    def priority_tuple(f: int, g: int, h: int, ctr: int) -> Tuple[int, int, int]:
        if tie_break == "h":    return (f, h, ctr)
        if tie_break == "g":    return (f, -g, ctr)
        if tie_break == "lifo": return (f, 0, -ctr)
        return (f, 0, ctr)

    h0 = hfun(start)
    heapq.heappush(open_heap, (priority_tuple(h0, 0, h0, next(counter)), Node(start)))

    best_g: Dict[S, int] = {start: 0}
    closed: Set[S] = set()
    expanded = 0
    generated = 0

    def done(termination: str, node: Optional[Node[S]] = None) -> SearchResult[S]:
        logger.info("A* %s: expanded=%d generated=%d", termination, expanded, generated)
        return SearchResult(
            algorithm="A*",
            path=path_from_node(node) if node is not None else None,
            cost=node.g if node is not None else None,
            termination=termination, expanded=expanded, generated=generated,
            time=perf_counter() - t0,
        )

    while open_heap:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return done(TIMEOUT)

        _, node = heapq.heappop(open_heap)
        if node.state in closed:
            continue
        if success_fn(node.state):
            return done(OK, node)

        closed.add(node.state)
        expanded += 1

        for s2, c in successors_fn(node.state):
            generated += 1
            g2 = node.g + c
            if g2 < best_g.get(s2, math.inf):
                best_g[s2] = g2
                h2 = hfun(s2)
                child = Node(s2, g2, node)
                heapq.heappush(open_heap, (priority_tuple(g2 + h2, g2, h2, next(counter)), child))

    # Open exhausted without finding goal
    return done(EXHAUSTED)
