"""Alignment detection — greedy alignment groups plus pairwise edge / center alignments.

Group clustering is first-seen-wins: the first unassigned component seeds a
group and absorbs every later unassigned component whose coordinate is within
``alignment_tolerance`` of the seed. A chain of components drifting by 8 px
each is split. Each component lands in at most one group per axis.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from screensight.engine.config import EngineConfig
from screensight.models.layout import (
    AlignmentAnalysis,
    AlignmentAxis,
    AlignmentGroup,
    CenterAlignments,
    EdgeAlignments,
)
from screensight.models.scene import Component
from screensight.utils import stats

Pair = tuple[str, str]

_AXIS_COORD: dict[AlignmentAxis, Callable[[Component], float]] = {
    AlignmentAxis.HORIZONTAL: lambda c: c.position.y,
    AlignmentAxis.VERTICAL: lambda c: c.position.x,
}


class AlignmentAnalyzer:
    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def analyze(self, components: Sequence[Component]) -> AlignmentAnalysis:
        return AlignmentAnalysis(
            horizontal_groups=self.groups(components, AlignmentAxis.HORIZONTAL),
            vertical_groups=self.groups(components, AlignmentAxis.VERTICAL),
            edge_alignments=self.edge_alignments(components),
            center_alignments=self.center_alignments(components),
        )

    def groups(self, components: Sequence[Component], axis: AlignmentAxis) -> list[AlignmentGroup]:
        coord = _AXIS_COORD[axis]
        tol = self.config.alignment_tolerance
        assigned: set[int] = set()
        groups: list[AlignmentGroup] = []

        for i, seed in enumerate(components):
            if i in assigned:
                continue
            assigned.add(i)
            members = [seed]
            anchor = coord(seed)
            for j in range(i + 1, len(components)):
                if j in assigned:
                    continue
                if abs(coord(components[j]) - anchor) <= tol:
                    members.append(components[j])
                    assigned.add(j)

            if len(members) > 1:
                coords = [coord(m) for m in members]
                groups.append(AlignmentGroup(
                    axis=axis,
                    members=[m.id for m in members],
                    anchor=anchor,
                    mean_coordinate=stats.mean(coords),
                    quality=stats.inverse_variance(coords, self.config.regularity_variance_scale),
                ))
        return groups

    def edge_alignments(self, components: Sequence[Component]) -> EdgeAlignments:
        tol = self.config.alignment_tolerance
        left: list[Pair] = []
        right: list[Pair] = []
        top: list[Pair] = []
        bottom: list[Pair] = []
        for a, b in _pairs(components):
            pa, pb = a.position, b.position
            if abs(pa.x - pb.x) <= tol:
                left.append((a.id, b.id))
            if abs(pa.right - pb.right) <= tol:
                right.append((a.id, b.id))
            if abs(pa.y - pb.y) <= tol:
                top.append((a.id, b.id))
            if abs(pa.bottom - pb.bottom) <= tol:
                bottom.append((a.id, b.id))
        return EdgeAlignments(left=left, right=right, top=top, bottom=bottom)

    def center_alignments(self, components: Sequence[Component]) -> CenterAlignments:
        tol = self.config.alignment_tolerance
        horizontal: list[Pair] = []
        vertical: list[Pair] = []
        for a, b in _pairs(components):
            if abs(a.position.center_y - b.position.center_y) <= tol:
                horizontal.append((a.id, b.id))
            if abs(a.position.center_x - b.position.center_x) <= tol:
                vertical.append((a.id, b.id))
        return CenterAlignments(horizontal_center=horizontal, vertical_center=vertical)


def _pairs(components: Sequence[Component]):
    for i, a in enumerate(components):
        for b in components[i + 1:]:
            yield a, b
