# navgraph/domain/graphs/adjacency.py
from collections.abc import Hashable
from math import isfinite

from navgraph.domain.entities.geography import Position, euclidean_distance


class AdjacencyGraph:
    """Dict-backed spatial graph keyed by any hashable node id.

    Neighbour order is insertion order, so repeated searches over the same
    graph see the same iteration order.
    """

    def __init__(self):
        self._pos: dict[Hashable, Position] = {}
        self._adj: dict[Hashable, list[Hashable]] = {}
        self._dist: dict[tuple[Hashable, Hashable], float] = {}

    # ------------- building -----------------

    def add_node(self, node: Hashable, x: float, y: float, z: float = 0.0) -> None:
        if node in self._pos:
            raise ValueError(f"Duplicate node {node!r}")
        self._pos[node] = Position(float(x), float(y), float(z))
        self._adj[node] = []

    def connect(
        self,
        a: Hashable,
        b: Hashable,
        *,
        distance: float | None = None,
        bidirectional: bool = True,
    ) -> None:
        for n in (a, b):
            if n not in self._pos:
                raise ValueError(f"Cannot connect unknown node {n!r}")
        d = euclidean_distance(self._pos[a], self._pos[b]) if distance is None else float(distance)
        if not isfinite(d) or d < 0:
            raise ValueError(f"Edge {a!r}->{b!r} needs a finite, non-negative distance, got {d}")
        self._link(a, b, d)
        if bidirectional:
            self._link(b, a, d)

    def _link(self, a, b, d: float) -> None:
        if (a, b) not in self._dist:
            self._adj[a].append(b)
        self._dist[(a, b)] = d

    @classmethod
    def from_model(cls, model) -> "AdjacencyGraph":
        g = cls()
        for n in model.nodes:
            g.add_node(n.id, n.x, n.y, n.z)
        for e in model.edges:
            g.connect(e.a, e.b, distance=e.distance, bidirectional=model.bidirectional)
        return g

    # ------------- SpatialGraph -----------------

    def __contains__(self, node: object) -> bool:
        try:
            return node in self._pos
        except TypeError:  # unhashable
            return False

    def __len__(self) -> int:
        return len(self._pos)

    def nodes(self):
        return iter(self._pos)

    def neighbor_count(self, node) -> int:
        return len(self._adj[node])

    def neighbor(self, node, i: int):
        return self._adj[node][i]

    def position(self, node) -> Position:
        return self._pos[node]

    def edge_distance(self, a, b) -> float:
        try:
            return self._dist[(a, b)]
        except KeyError:
            raise ValueError(f"{b!r} is not a neighbour of {a!r}")
