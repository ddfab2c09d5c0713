# search/astar.py
import time

from navgraph.app.protocols import Heuristic, NodeRef, SpatialGraph
from navgraph.domain.entities.route import NoPath, PathFound, SearchResult, SearchStats
from navgraph.domain.errors import InvalidNodeError

from .frontier import Frontier
from .heuristics import manhattan
from .hooks import NoopHooks, SearchHooks


def _name(fn) -> str:
    return getattr(fn, "__name__", type(fn).__name__)


def find_path(
    graph: SpatialGraph,
    start: NodeRef,
    goal: NodeRef,
    *,
    heuristic: Heuristic = manhattan,
    hooks: SearchHooks | None = None,
    max_expansions: int | None = None,
) -> SearchResult:
    """
    A* from `start` to `goal`.

    Returns PathFound with the nodes after `start` up to and including `goal`
    (empty when start == goal), or NoPath when the frontier runs dry or the
    expansion budget is spent. Raises InvalidNodeError for nodes the graph
    does not contain.
    """
    hooks = hooks or NoopHooks()
    for role, node in (("start", start), ("goal", goal)):
        if node not in graph:
            hooks.error(reason="invalid_node", role=role, node=repr(node))
            raise InvalidNodeError(node, role)

    t0 = time.perf_counter()
    hooks.search_start(start=start, goal=goal, heuristic=_name(heuristic))

    cost: dict[NodeRef, float] = {start: 0.0}
    parent: dict[NodeRef, NodeRef] = {}
    frontier = Frontier()
    frontier.push(start, 0.0)
    stats = SearchStats(pushed=1, frontier_peak=1)

    outcome = "unreachable"
    while not frontier.is_empty():
        current = frontier.peek_min()
        if current == goal:
            outcome = "found"
            break
        if max_expansions is not None and stats.expanded >= max_expansions:
            outcome = "budget_exhausted"
            break
        frontier.extract_min()
        stats.expanded += 1

        # a stale duplicate is relaxed with the current best cost, so it can't improve anything
        g = cost[current]
        hooks.expand(current, g=g, qsize=len(frontier), seq=stats.expanded)
        for i in range(graph.neighbor_count(current)):
            nxt = graph.neighbor(current, i)
            tentative = g + graph.edge_distance(current, nxt)
            known = cost.get(nxt)
            if known is None or tentative < known:
                cost[nxt] = tentative
                parent[nxt] = current
                frontier.push(nxt, tentative + heuristic(graph, nxt, goal, via=current))
                stats.pushed += 1
        stats.frontier_peak = max(stats.frontier_peak, len(frontier))

    stats.frontier_left = len(frontier)
    if outcome == "found":
        result = PathFound(_reconstruct(parent, goal), cost[goal], stats)
    else:
        result = NoPath(reason=outcome, stats=stats)

    hooks.search_end(
        outcome=outcome,
        path_len=len(result) if result else 0,
        cost=result.cost if result else None,
        stats=stats,
        wall_ms=(time.perf_counter() - t0) * 1000,
    )
    return result


def _reconstruct(parent: dict, goal) -> tuple:
    out = []
    node = goal
    while node in parent:
        out.append(node)
        node = parent[node]
    out.reverse()
    return tuple(out)
