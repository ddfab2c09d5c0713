from collections.abc import Hashable
from typing import Protocol, runtime_checkable

from navgraph.domain.entities.geography import Position

NodeRef = Hashable


# ------------- Graph --------------------
@runtime_checkable
class SpatialGraph(Protocol):
    """
    Responsibilities:
    • Expose the outgoing neighbours of a node by index.
    • Report a node's position and the cost of traversing an edge.
    Read-only for the duration of a search; the search never mutates it.
    """

    def __contains__(self, node: object) -> bool: ...
    def neighbor_count(self, node: NodeRef) -> int: ...
    def neighbor(self, node: NodeRef, i: int) -> NodeRef:
        """Return the i-th neighbour, 0 <= i < neighbor_count(node)."""

    def position(self, node: NodeRef) -> Position: ...
    def edge_distance(self, a: NodeRef, b: NodeRef) -> float:
        """Non-negative cost of a -> b; b must be a neighbour of a."""


# ------------- Search strategies --------------------
@runtime_checkable
class Heuristic(Protocol):
    """
    Estimate the remaining cost from `node` to `goal`.
    `via` is the node whose expansion relaxed `node`.
    Must never overestimate for the returned path to be optimal.
    """

    def __call__(
        self,
        graph: SpatialGraph,
        node: NodeRef,
        goal: NodeRef,
        *,
        via: NodeRef | None = None,
    ) -> float: ...
