"""Rectangle predicates and the pairwise index every relationship pass iterates over.

All pair enumeration goes through ``PairwiseIndex``. It precomputes the center
distance matrix once and answers radius queries with a KD-tree.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

import numpy as np
from scipy.spatial import cKDTree
from scipy.spatial.distance import cdist

from screensight.models.geometry import Position
from screensight.models.relationships import RelativePosition


def center_distance(a: Position, b: Position) -> float:
    return math.hypot(b.center_x - a.center_x, b.center_y - a.center_y)


def edge_distance(a: Position, b: Position, center_dist: float | None = None) -> float:
    """Center distance minus both half-extents, floored at 0.

    A cheap stand-in for true box-to-box distance: 0 for boxes that touch or
    nearly touch, grows with separation.
    """
    d = center_distance(a, b) if center_dist is None else center_dist
    half_extents = (a.width + b.width) / 2 + (a.height + b.height) / 2
    return max(0.0, d - half_extents)


def is_contained(inner: Position, outer: Position, padding: float = 0.0) -> bool:
    """True when ``inner`` lies inside ``outer`` grown by ``padding`` on every side."""
    return (
        inner.x >= outer.x - padding
        and inner.y >= outer.y - padding
        and inner.right <= outer.right + padding
        and inner.bottom <= outer.bottom + padding
    )


def bboxes_intersect(a: Position, b: Position) -> bool:
    """Closed-box intersection: touching edges count."""
    return not (a.right < b.x or b.right < a.x or a.bottom < b.y or b.bottom < a.y)


def overlap_area(a: Position, b: Position) -> float:
    x_overlap = max(0.0, min(a.right, b.right) - max(a.x, b.x))
    y_overlap = max(0.0, min(a.bottom, b.bottom) - max(a.y, b.y))
    return x_overlap * y_overlap


def horizontally_aligned(a: Position, b: Position, tolerance: float) -> bool:
    """Same row: top edges or vertical centers within tolerance."""
    return abs(a.y - b.y) <= tolerance or abs(a.center_y - b.center_y) <= tolerance


def vertically_aligned(a: Position, b: Position, tolerance: float) -> bool:
    """Same column: left edges or horizontal centers within tolerance."""
    return abs(a.x - b.x) <= tolerance or abs(a.center_x - b.center_x) <= tolerance


def relative_position(a: Position, b: Position) -> RelativePosition:
    """Where ``b`` sits relative to ``a``, by the dominant axis of the center delta."""
    dx = b.center_x - a.center_x
    dy = b.center_y - a.center_y
    if abs(dx) > abs(dy):
        return RelativePosition.RIGHT if dx > 0 else RelativePosition.LEFT
    return RelativePosition.BELOW if dy > 0 else RelativePosition.ABOVE


def union_bounds(positions: Sequence[Position]) -> Position:
    if not positions:
        return Position()
    x0 = min(p.x for p in positions)
    y0 = min(p.y for p in positions)
    x1 = max(p.right for p in positions)
    y1 = max(p.bottom for p in positions)
    return Position.from_bbox((x0, y0, x1, y1))


class PairwiseIndex:
    """Center-distance view over a fixed list of boxes.

    Indices refer to the input order, which is also the stable order used to
    orient relationship endpoints.
    """

    def __init__(self, positions: Sequence[Position]) -> None:
        self.positions = list(positions)
        n = len(self.positions)
        centers = np.array([p.center for p in self.positions], dtype=np.float64).reshape(n, 2)
        self._centers = centers
        self._distances = cdist(centers, centers) if n else np.zeros((0, 0))
        self._tree = cKDTree(centers) if n else None

    def __len__(self) -> int:
        return len(self.positions)

    def pairs(self) -> Iterator[tuple[int, int]]:
        """Every unordered pair once, as (i, j) with i < j."""
        n = len(self.positions)
        for i in range(n):
            for j in range(i + 1, n):
                yield i, j

    def distance(self, i: int, j: int) -> float:
        return float(self._distances[i, j])

    def within(self, i: int, radius: float) -> list[int]:
        """Indices whose center lies strictly closer than ``radius`` to box ``i``, ascending."""
        if self._tree is None or radius <= 0:
            return []
        hits = self._tree.query_ball_point(self._centers[i], r=radius)
        return sorted(j for j in hits if j != i and self._distances[i, j] < radius)
