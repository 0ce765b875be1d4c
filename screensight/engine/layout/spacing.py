"""Spacing measurement — neighbour gaps along each axis and page margins."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

from screensight.engine.config import EngineConfig
from screensight.engine.spatial import union_bounds
from screensight.models.geometry import ImageDimensions
from screensight.models.layout import MarginEstimate, SpacingAnalysis, SpacingStats, SpacingValue
from screensight.models.scene import Component
from screensight.utils import stats


class SpacingAnalyzer:
    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def analyze(
        self, components: Sequence[Component], image: ImageDimensions | None = None,
    ) -> SpacingAnalysis:
        return SpacingAnalysis(
            horizontal=self.summarize(self.horizontal_gaps(components)),
            vertical=self.summarize(self.vertical_gaps(components)),
            margins=self.margins(components, image or ImageDimensions()),
        )

    def horizontal_gaps(self, components: Sequence[Component]) -> list[float]:
        """Gaps between x-sorted neighbours that share a row (|Δy| within tolerance)."""
        tol = self.config.alignment_tolerance
        ordered = sorted(components, key=lambda c: c.position.x)
        gaps: list[float] = []
        for prev, nxt in zip(ordered, ordered[1:]):
            if abs(nxt.position.y - prev.position.y) > tol:
                continue
            gap = nxt.position.x - prev.position.right
            if gap >= 0:
                gaps.append(gap)
        return gaps

    def vertical_gaps(self, components: Sequence[Component]) -> list[float]:
        """Gaps between y-sorted neighbours that share a column (|Δx| within tolerance)."""
        tol = self.config.alignment_tolerance
        ordered = sorted(components, key=lambda c: c.position.y)
        gaps: list[float] = []
        for prev, nxt in zip(ordered, ordered[1:]):
            if abs(nxt.position.x - prev.position.x) > tol:
                continue
            gap = nxt.position.y - prev.position.bottom
            if gap >= 0:
                gaps.append(gap)
        return gaps

    def summarize(self, gaps: Sequence[float]) -> SpacingStats:
        if not gaps:
            return SpacingStats()
        return SpacingStats(
            count=len(gaps),
            average=round(stats.mean(gaps)),
            consistency=stats.consistency(gaps),
            common_values=self.common_values(gaps),
        )

    def common_values(self, gaps: Sequence[float]) -> list[SpacingValue]:
        """Most frequent gaps after rounding half-up to the nearest bucket.

        Equal counts are ordered by value, smallest first.
        """
        bucket = self.config.spacing_bucket
        counts = Counter(int(math.floor(g / bucket + 0.5)) * bucket for g in gaps)
        ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
        return [
            SpacingValue(value=value, count=count)
            for value, count in ranked[: self.config.common_spacing_count]
        ]

    def margins(self, components: Sequence[Component], image: ImageDimensions) -> MarginEstimate:
        if not components:
            return MarginEstimate()
        bounds = union_bounds([c.position for c in components])
        top = max(0.0, bounds.y)
        left = max(0.0, bounds.x)
        right = max(0.0, image.width - bounds.right)
        bottom = max(0.0, image.height - bounds.bottom)
        return MarginEstimate(
            top=top,
            right=right,
            bottom=bottom,
            left=left,
            consistency=stats.consistency([top, right, bottom, left]),
        )
