import math

import pytest

from navgraph.app.demo import sample_graph
from navgraph.config.models import HeuristicEuclideanModel, SearchModel
from navgraph.runtime.registries import make_heuristic, register_heuristic
from navgraph.search.heuristics import Weighted, euclidean, manhattan, step_manhattan, zero


def test_distances_on_sample_graph():
    g = sample_graph()
    # G(-1,0) -> E(4,2)
    assert manhattan(g, "G", "E") == 7.0
    assert math.isclose(euclidean(g, "G", "E"), math.hypot(5, 2))
    assert zero(g, "G", "E") == 0.0


def test_step_manhattan_measures_from_via():
    g = sample_graph()
    # A(1,1) -> F(3,0): the goal does not matter
    assert step_manhattan(g, "F", "E", via="A") == 3.0
    assert step_manhattan(g, "F", "G", via="A") == 3.0
    assert step_manhattan(g, "F", "E") == 0.0


def test_weighted_scales_and_names():
    g = sample_graph()
    h = Weighted(manhattan, 0.5)
    assert h(g, "G", "E") == 3.5
    assert h.__name__ == "manhattan*0.5"
    with pytest.raises(ValueError):
        Weighted(manhattan, -1.0)


def test_registry_builds_configured_kind():
    assert make_heuristic(SearchModel().heuristic) is manhattan
    assert make_heuristic(HeuristicEuclideanModel()) is euclidean
    h = make_heuristic(HeuristicEuclideanModel(weight=2.0))
    assert isinstance(h, Weighted) and h.inner is euclidean


def test_registry_unknown_kind():
    class _Bogus:
        kind = "bogus"
        weight = 1.0

    with pytest.raises(ValueError, match="bogus"):
        make_heuristic(_Bogus())


def test_registry_accepts_new_kinds():
    class _Octile:
        kind = "test_octile"
        weight = 1.0

    @register_heuristic("test_octile")
    def _make(cfg):
        return zero

    assert make_heuristic(_Octile()) is zero
