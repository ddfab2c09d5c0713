"""Remaining-cost estimates for A*.

Every strategy has the signature ``h(graph, node, goal, *, via=None)``.
`manhattan` is the default; it can overestimate when edge weights are
Euclidean lengths, so use `euclidean` when the returned path must be optimal.
"""

from navgraph.domain.entities.geography import euclidean_distance, manhattan_distance


def manhattan(graph, node, goal, *, via=None) -> float:
    return manhattan_distance(graph.position(node), graph.position(goal))


def euclidean(graph, node, goal, *, via=None) -> float:
    return euclidean_distance(graph.position(node), graph.position(goal))


def zero(graph, node, goal, *, via=None) -> float:
    """No guidance: the search degrades to Dijkstra."""
    return 0.0


def step_manhattan(graph, node, goal, *, via=None) -> float:
    """Manhattan length of the step from `via` to `node`.

    Legacy estimate kept for parity with older navigation data; it ignores the
    goal entirely and is neither admissible nor consistent.
    """
    if via is None:
        return 0.0
    return manhattan_distance(graph.position(via), graph.position(node))


class Weighted:
    """Scale another heuristic by a constant factor (weighted A*)."""

    def __init__(self, inner, weight: float):
        if weight < 0:
            raise ValueError(f"heuristic weight must be >= 0, got {weight}")
        self.inner, self.weight = inner, weight
        self.__name__ = f"{getattr(inner, '__name__', type(inner).__name__)}*{weight:g}"

    def __call__(self, graph, node, goal, *, via=None) -> float:
        return self.weight * self.inner(graph, node, goal, via=via)
