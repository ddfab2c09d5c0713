# navgraph/domain/entities/route.py
from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
from typing import Literal


@dataclass
class SearchStats:
    expanded: int = 0  # nodes extracted from the frontier
    pushed: int = 0  # entries pushed, duplicates included
    frontier_peak: int = 0
    frontier_left: int = 0  # entries still queued when the search stopped


@dataclass(frozen=True)
class PathFound:
    """Successful search. `nodes` runs from start's successor to goal; start is excluded."""

    nodes: tuple[Hashable, ...]
    cost: float
    stats: SearchStats = field(default_factory=SearchStats, compare=False)

    found = True

    def __bool__(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self.nodes)


@dataclass(frozen=True)
class NoPath:
    reason: Literal["unreachable", "budget_exhausted"] = "unreachable"
    stats: SearchStats = field(default_factory=SearchStats, compare=False)

    found = False

    def __bool__(self) -> bool:
        return False


SearchResult = PathFound | NoPath


def path_cost(graph, start: Hashable, nodes: Sequence[Hashable]) -> float:
    """Sum of edge distances walking start -> nodes[0] -> ... -> nodes[-1]."""
    total, prev = 0.0, start
    for n in nodes:
        total += graph.edge_distance(prev, n)
        prev = n
    return total
