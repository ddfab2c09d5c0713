# navgraph/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from navgraph.app.protocols import Heuristic, NodeRef, SpatialGraph
from navgraph.config.models import NavigatorModel
from navgraph.domain.entities.route import SearchResult
from navgraph.domain.graphs.adjacency import AdjacencyGraph
from navgraph.io.search_logging import SearchLogging  # JSON logs
from navgraph.runtime.registries import make_heuristic
from navgraph.search.astar import find_path
from navgraph.search.hooks import NoopHooks, SearchHooks


@dataclass
class Navigator:
    graph: SpatialGraph
    heuristic: Heuristic
    hooks: SearchHooks
    max_expansions: int | None = None

    def find_path(self, start: NodeRef, goal: NodeRef) -> SearchResult:
        return find_path(
            self.graph,
            start,
            goal,
            heuristic=self.heuristic,
            hooks=self.hooks,
            max_expansions=self.max_expansions,
        )


def build(
    cfg: NavigatorModel | Mapping,
    *,
    graph: SpatialGraph | None = None,
    use_logging: bool = True,
) -> Navigator:
    # 0) Validate config
    model = cfg if isinstance(cfg, NavigatorModel) else NavigatorModel.model_validate(cfg)

    # 1) Graph: an explicit one wins over the configured one
    if graph is None:
        if model.graph is None:
            raise ValueError("No graph provided")
        graph = AdjacencyGraph.from_model(model.graph)

    # 2) Strategy & hooks
    heuristic = make_heuristic(model.search.heuristic)
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    return Navigator(graph, heuristic, hooks, model.search.max_expansions)
