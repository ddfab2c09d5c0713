# tests/app/test_build_and_run.py
import pytest
from pydantic import ValidationError

from navgraph.app.build import Navigator, build
from navgraph.app.demo import SAMPLE_EDGES, SAMPLE_NODES, sample_graph
from navgraph.config.models import NavigatorModel
from navgraph.io.search_logging import SearchLogging
from navgraph.search.heuristics import Weighted, euclidean
from navgraph.search.hooks import NoopHooks


def _cfg(**search):
    return {
        "run_id": "t-1",
        "search": search,
        "graph": {
            "nodes": [{"id": n, "x": x, "y": y} for n, (x, y) in SAMPLE_NODES.items()],
            "edges": [list(e) for e in SAMPLE_EDGES],
        },
    }


def test_build_runs():
    nav = build(_cfg(heuristic={"kind": "euclidean"}), use_logging=False)
    assert isinstance(nav, Navigator)
    assert nav.heuristic is euclidean
    assert isinstance(nav.hooks, NoopHooks)
    res = nav.find_path("A", "E")
    assert res.found and abs(res.cost - 4.0) < 1e-9


def test_build_with_logging_hooks():
    nav = build(_cfg(), use_logging=True)
    assert isinstance(nav.hooks, SearchLogging)
    assert nav.hooks.run_id == "t-1"


def test_explicit_graph_wins_and_budget_applies():
    g = sample_graph()
    g.add_node("H", 9, 9)
    nav = build({"search": {"max_expansions": 2}}, graph=g, use_logging=False)
    assert nav.graph is g
    assert nav.find_path("A", "E").reason == "budget_exhausted"
    assert nav.find_path("A", "A").found


def test_weighted_heuristic_from_config():
    nav = build(_cfg(heuristic={"kind": "zero", "weight": 3.0}), use_logging=False)
    assert isinstance(nav.heuristic, Weighted)
    assert nav.find_path("G", "E").found


def test_build_without_graph_fails():
    with pytest.raises(ValueError, match="No graph"):
        build({}, use_logging=False)


@pytest.mark.parametrize(
    "bad",
    [
        {"search": {"heuristic": {"kind": "octile"}}},
        {"search": {"heuristic": {"kind": "manhattan", "weight": -1}}},
        {"search": {"max_expansions": 0}},
        {"log": {"sample_every": 0}},
        {"graph": {"nodes": [{"id": "A", "x": 0, "y": 0}, {"id": "A", "x": 1, "y": 1}]}},
        {"graph": {"nodes": [{"id": "A", "x": 0, "y": 0}], "edges": [["A", "B"]]}},
        {"graph": {"nodes": [{"id": "A", "x": 0, "y": 0}], "edges": [["A", "A", -2.0]]}},
        {"graph": {"nodes": [], "edges": [["A"]]}},
        {"unknown": 1},
    ],
)
def test_config_validation(bad):
    with pytest.raises(ValidationError):
        NavigatorModel.model_validate(bad)
