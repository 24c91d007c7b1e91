from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Generic, Hashable, List, Optional, Tuple, TypeVar

S = TypeVar("S", bound=Hashable)

OK = "ok"
EXHAUSTED = "exhausted"
TIMEOUT = "timeout"
UNSOLVABLE = "unsolvable"


@dataclass(frozen=True)
class SearchResult(Generic[S]):
    """Outcome of one search call.

    ``path`` runs start -> goal inclusive and ``cost`` is the solution cost,
    both ``None`` unless ``termination == "ok"``.
    """

    algorithm: str
    path: Optional[Tuple[S, ...]]
    cost: Optional[float]
    termination: str
    expanded: int = 0
    generated: int = 0
    time: float = 0.0
    bound_final: Optional[float] = None

    @property
    def found(self) -> bool:
        return self.termination == OK

    @property
    def no_solution(self) -> bool:
        """The goal is unreachable (space exhausted or parity says so)."""
        return self.termination in (EXHAUSTED, UNSOLVABLE)


@dataclass
class Node(Generic[S]):
    state: S
    g: int = 0
    parent: Optional["Node[S]"] = None


def path_from_node(node: Optional[Node[S]]) -> Tuple[S, ...]:
    path: List[S] = []
    while node is not None:
        path.append(node.state)
        node = node.parent
    path.reverse()
    return tuple(path)


def reconstruct_path(parents: Dict[S, Optional[S]], goal: S) -> Tuple[S, ...]:
    path: List[S] = []
    s: Optional[S] = goal
    while s is not None:
        path.append(s)
        s = parents.get(s)
    return tuple(reversed(path))
