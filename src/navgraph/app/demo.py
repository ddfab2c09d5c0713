# navgraph/app/demo.py
import time
from dataclasses import dataclass

from navgraph.app.protocols import Heuristic, NodeRef, SpatialGraph
from navgraph.domain.entities.route import SearchResult, path_cost
from navgraph.domain.graphs.adjacency import AdjacencyGraph
from navgraph.search.astar import find_path
from navgraph.search.heuristics import manhattan

SAMPLE_NODES = {
    "A": (1, 1),
    "B": (2, 1),
    "C": (2, 2),
    "D": (1, 2),
    "E": (4, 2),
    "F": (3, 0),
    "G": (-1, 0),
}
SAMPLE_EDGES = [
    ("A", "B"),
    ("A", "D"),
    ("A", "G"),
    ("B", "C"),
    ("B", "F"),
    ("C", "E"),
    ("C", "D"),
    ("E", "F"),
]


def sample_graph() -> AdjacencyGraph:
    """Seven nodes on the z=0 plane, undirected, Euclidean edge lengths."""
    g = AdjacencyGraph()
    for n, (x, y) in SAMPLE_NODES.items():
        g.add_node(n, x, y)
    for a, b in SAMPLE_EDGES:
        g.connect(a, b)
    return g


@dataclass
class QueryReport:
    start: NodeRef
    goal: NodeRef
    result: SearchResult
    distance: float | None
    mean_ms: float | None = None  # only when benchmarked


def run_query(
    graph: SpatialGraph,
    start: NodeRef,
    goal: NodeRef,
    *,
    repeat: int = 1,
    heuristic: Heuristic = manhattan,
) -> QueryReport:
    if repeat < 1:
        raise ValueError(f"repeat must be >= 1, got {repeat}")
    t0 = time.perf_counter()
    for _ in range(repeat):
        result = find_path(graph, start, goal, heuristic=heuristic)
    elapsed_ms = (time.perf_counter() - t0) * 1000

    distance = path_cost(graph, start, result.nodes) if result else None
    return QueryReport(
        start, goal, result, distance, mean_ms=elapsed_ms / repeat if repeat > 1 else None
    )


def format_report(report: QueryReport) -> list[str]:
    lines = [f"Path {report.start} -> {report.goal}"]
    if report.mean_ms is not None:
        lines.append(f"  Time: {report.mean_ms:.4f} MS")
    if not report.result:
        lines.append("  Failed")
        return lines
    for i, n in enumerate(report.result.nodes, 1):
        lines.append(f"  {i}. {n}")
    lines.append(f"  Distance: {report.distance:g}")
    return lines
