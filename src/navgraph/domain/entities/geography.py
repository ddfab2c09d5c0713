import math
from dataclasses import dataclass


# Core geometry type used by graphs and heuristics
@dataclass(frozen=True)
class Position:
    x: float  # world units
    y: float
    z: float = 0.0


def manhattan_distance(a: Position, b: Position) -> float:
    return abs(b.x - a.x) + abs(b.y - a.y) + abs(b.z - a.z)


def euclidean_distance(a: Position, b: Position) -> float:
    return math.sqrt((b.x - a.x) ** 2 + (b.y - a.y) ** 2 + (b.z - a.z) ** 2)
