# navgraph/domain/graphs/dense.py
from __future__ import annotations

import numpy as np

from navgraph.domain.entities.geography import Position


class DenseGraph:
    """
    Spatial graph over dense integer ids 0..n-1, stored as compressed rows:
    neighbours of node a are targets[offsets[a]:offsets[a + 1]].
    """

    def __init__(self, positions: np.ndarray, offsets: np.ndarray, targets: np.ndarray, weights: np.ndarray):
        self.positions, self.offsets, self.targets, self.weights = (
            positions,
            offsets,
            targets,
            weights,
        )

    @classmethod
    def from_edges(
        cls,
        positions,
        edges,
        *,
        distances=None,
        bidirectional: bool = True,
    ) -> DenseGraph:
        pos = np.asarray(positions, dtype=np.float64)
        if pos.ndim != 2 or pos.shape[1] not in (2, 3):
            raise ValueError(f"positions must be (n, 2) or (n, 3), got {pos.shape}")
        if pos.shape[1] == 2:
            pos = np.column_stack([pos, np.zeros(len(pos))])
        n = len(pos)

        e = np.asarray(edges, dtype=np.int64)
        if e.size == 0:
            e = e.reshape(0, 2)
        elif e.ndim != 2 or e.shape[1] != 2:
            raise ValueError(f"edges must be (m, 2), got {e.shape}")
        if e.size and (e.min() < 0 or e.max() >= n):
            raise ValueError(f"edge endpoints must lie in [0, {n})")
        src, dst = e[:, 0], e[:, 1]

        if distances is None:
            w = np.linalg.norm(pos[dst] - pos[src], axis=1)
        else:
            w = np.asarray(distances, dtype=np.float64).reshape(-1)
            if len(w) != len(e):
                raise ValueError(f"distances must have length {len(e)}, got {len(w)}")
            if np.any(w < 0) or not np.all(np.isfinite(w)):
                raise ValueError("distances must be finite and non-negative")

        if bidirectional:
            src, dst, w = (
                np.concatenate([src, dst]),
                np.concatenate([dst, src]),
                np.concatenate([w, w]),
            )

        order = np.lexsort((dst, src))
        src, dst, w = src[order], dst[order], w[order]
        if len(src):
            # parallel edges collapse to the cheapest one
            first = np.ones(len(src), dtype=bool)
            first[1:] = (src[1:] != src[:-1]) | (dst[1:] != dst[:-1])
            starts = np.flatnonzero(first)
            w = np.minimum.reduceat(w, starts)
            src, dst = src[starts], dst[starts]

        offsets = np.zeros(n + 1, dtype=np.int64)
        np.cumsum(np.bincount(src, minlength=n), out=offsets[1:])
        return cls(pos, offsets, dst, w)

    # ------------- SpatialGraph -----------------

    def __contains__(self, node: object) -> bool:
        if isinstance(node, bool) or not isinstance(node, (int, np.integer)):
            return False
        return 0 <= node < len(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def neighbor_count(self, node) -> int:
        return int(self.offsets[node + 1] - self.offsets[node])

    def neighbor(self, node, i: int) -> int:
        if not 0 <= i < self.neighbor_count(node):
            raise IndexError(f"node {node} has no neighbour #{i}")
        return int(self.targets[self.offsets[node] + i])

    def position(self, node) -> Position:
        x, y, z = self.positions[node]
        return Position(float(x), float(y), float(z))

    def edge_distance(self, a, b) -> float:
        lo, hi = self.offsets[a], self.offsets[a + 1]
        hits = np.flatnonzero(self.targets[lo:hi] == b)
        if not len(hits):
            raise ValueError(f"{b!r} is not a neighbour of {a!r}")
        return float(self.weights[lo + hits[0]])
