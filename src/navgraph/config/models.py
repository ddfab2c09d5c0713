from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

NodeId = int | str


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1000, ge=1)


# ----------------- HEURISTICS ---------------------


class _HeuristicBase(BaseModel):
    model_config = ConfigDict(extra="forbid")
    weight: float = 1.0

    @field_validator("weight")
    @classmethod
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if not isfinite(v) or v < 0:
            raise ValueError(f"{info.field_name} must be finite and >= 0")
        return v


class HeuristicManhattanModel(_HeuristicBase):
    kind: Literal["manhattan"] = "manhattan"


class HeuristicEuclideanModel(_HeuristicBase):
    kind: Literal["euclidean"] = "euclidean"


class HeuristicZeroModel(_HeuristicBase):
    kind: Literal["zero"] = "zero"


class HeuristicStepManhattanModel(_HeuristicBase):
    kind: Literal["step_manhattan"] = "step_manhattan"


HeuristicUnion = Annotated[
    HeuristicManhattanModel
    | HeuristicEuclideanModel
    | HeuristicZeroModel
    | HeuristicStepManhattanModel,
    Field(discriminator="kind"),
]


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    heuristic: HeuristicUnion = Field(default_factory=HeuristicManhattanModel)
    max_expansions: int | None = Field(default=None, gt=0)


# ----------------- GRAPH ---------------------


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: NodeId
    x: float
    y: float
    z: float = 0.0


class EdgeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    a: NodeId
    b: NodeId
    distance: float | None = None  # None => Euclidean between endpoints

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, v):
        # YAML/JSON shorthand: ["A", "B"] or ["A", "B", 2.5]
        if isinstance(v, (list, tuple)):
            if len(v) not in (2, 3):
                raise ValueError(f"edge shorthand must be [a, b] or [a, b, distance], got {v!r}")
            return {"a": v[0], "b": v[1], "distance": v[2] if len(v) == 3 else None}
        return v

    @field_validator("distance")
    @classmethod
    def _nonneg(cls, v: float | None) -> float | None:
        if v is not None and (not isfinite(v) or v < 0):
            raise ValueError("distance must be finite and >= 0")
        return v


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    nodes: list[NodeModel] = Field(default_factory=list)
    edges: list[EdgeModel] = Field(default_factory=list)
    bidirectional: bool = True

    @model_validator(mode="after")
    def _check_refs(self):
        ids = [n.id for n in self.nodes]
        if len(set(ids)) != len(ids):
            raise ValueError("node ids must be unique")
        known = set(ids)
        for e in self.edges:
            missing = [x for x in (e.a, e.b) if x not in known]
            if missing:
                raise ValueError(f"edge {e.a!r}-{e.b!r} references unknown node(s) {missing}")
        return self


# ------------------------------------------------------------------


class NavigatorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    run_id: str = "local"
    log: LogModel = LogModel()
    search: SearchModel = Field(default_factory=SearchModel)
    graph: GraphModel | None = None
