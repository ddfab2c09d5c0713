# runtime/registries.py
from collections.abc import Callable

from navgraph.app.protocols import Heuristic
from navgraph.config.models import (
    HeuristicEuclideanModel,
    HeuristicManhattanModel,
    HeuristicStepManhattanModel,
    HeuristicUnion,
    HeuristicZeroModel,
)
from navgraph.search.heuristics import Weighted, euclidean, manhattan, step_manhattan, zero

HeuristicFactory = Callable[[HeuristicUnion], Heuristic]

_heuristic_registry: dict[str, HeuristicFactory] = {}


# ------------------- Heuristic registry ---------------------------


def register_heuristic(kind: str):
    def deco(fn: HeuristicFactory):
        _heuristic_registry[kind] = fn
        return fn

    return deco


def make_heuristic(cfg: HeuristicUnion) -> Heuristic:
    try:
        factory = _heuristic_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown heuristic kind {cfg.kind!r}")
    h = factory(cfg)
    return h if cfg.weight == 1.0 else Weighted(h, cfg.weight)


@register_heuristic("manhattan")
def _make_manhattan(cfg: HeuristicManhattanModel):
    return manhattan


@register_heuristic("euclidean")
def _make_euclidean(cfg: HeuristicEuclideanModel):
    return euclidean


@register_heuristic("zero")
def _make_zero(cfg: HeuristicZeroModel):
    return zero


@register_heuristic("step_manhattan")
def _make_step_manhattan(cfg: HeuristicStepManhattanModel):
    return step_manhattan
