"""Layout analysis — combines grouping, alignment and spacing into one LayoutReport.

Layout type is decided by three scores tried in order:

    grid     mean(regularity, alignment score) > grid_score_threshold
    flexbox  +flex_line_weight per row with uniform heights / column with
             uniform widths, capped at 1, > flex_score_threshold
    flow     +flow_step_weight per reading-order successor, capped at 1,
             > flow_score_threshold
    custom   otherwise
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from screensight.engine.config import EngineConfig
from screensight.engine.layout.alignment import AlignmentAnalyzer
from screensight.engine.layout.grouping import GeometryGrouper
from screensight.engine.layout.spacing import SpacingAnalyzer
from screensight.models.geometry import ImageDimensions
from screensight.models.layout import (
    AlignmentAnalysis,
    GridAnalysis,
    LayoutHint,
    LayoutQuality,
    LayoutReport,
    LayoutStatistics,
    LayoutType,
    QualityFactors,
    QualityRating,
    ResponsiveIndicator,
    SpacingAnalysis,
)
from screensight.models.scene import Component, ComponentType
from screensight.utils import stats

logger = logging.getLogger(__name__)

# Rating floors, highest first
_RATINGS: tuple[tuple[float, QualityRating], ...] = (
    (0.8, QualityRating.EXCELLENT),
    (0.6, QualityRating.GOOD),
    (0.4, QualityRating.FAIR),
)


class LayoutAnalyzer:
    """Runs the geometry analyses over one screen and scores the result."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self.grouper = GeometryGrouper(self.config)
        self.alignment = AlignmentAnalyzer(self.config)
        self.spacing = SpacingAnalyzer(self.config)

    def analyze(
        self, components: Sequence[Component], image: ImageDimensions | None = None,
    ) -> LayoutReport:
        image = image or ImageDimensions()
        components = list(components)

        grid = self.grouper.analyze_grid(components)
        alignment = self.alignment.analyze(components)
        spacing = self.spacing.analyze(components, image)
        statistics = self.statistics(components, image)

        report = LayoutReport(
            layout_type=self.layout_type(components),
            grid=grid,
            alignment=alignment,
            spacing=spacing,
            layout_patterns=self.layout_hints(components),
            responsive_indicators=self.responsive_indicators(image),
            statistics=statistics,
            quality=self.quality(grid, alignment, spacing, statistics),
        )
        logger.debug(
            "Layout: %s, %d elements, grid=%s, quality=%.2f",
            report.layout_type.value, len(components), grid.detected, report.quality.score,
        )
        return report

    # ── Layout type ──

    def layout_type(self, components: Sequence[Component]) -> LayoutType:
        if not components:
            return LayoutType.EMPTY
        cfg = self.config
        if self.grouper.grid_score(components) > cfg.grid_score_threshold:
            return LayoutType.GRID
        if self.flex_score(components) > cfg.flex_score_threshold:
            return LayoutType.FLEXBOX
        if self.flow_score(components) > cfg.flow_score_threshold:
            return LayoutType.FLOW
        return LayoutType.CUSTOM

    def flex_score(self, components: Sequence[Component]) -> float:
        cfg = self.config
        score = 0.0
        for row in self.grouper.group_rows(components):
            if len(row) > 1 and stats.normalized_variance([c.position.height for c in row]) < cfg.flex_variance_limit:
                score += cfg.flex_line_weight
        for column in self.grouper.group_columns(components):
            if len(column) > 1 and stats.normalized_variance([c.position.width for c in column]) < cfg.flex_variance_limit:
                score += cfg.flex_line_weight
        return stats.score(score)

    def flow_score(self, components: Sequence[Component]) -> float:
        ordered = sorted(components, key=lambda c: (c.position.y, c.position.x))
        steps = sum(1 for prev, cur in zip(ordered, ordered[1:]) if cur.position.y >= prev.position.y)
        return stats.score(steps * self.config.flow_step_weight)

    # ── Hints ──

    def layout_hints(self, components: Sequence[Component]) -> list[LayoutHint]:
        hints = [
            self._header_hint(components),
            self._sidebar_hint(components),
            self._card_hint(components),
        ]
        return [h for h in hints if h is not None]

    def _header_hint(self, components: Sequence[Component]) -> LayoutHint | None:
        cfg = self.config
        top = [c for c in components if c.position.y < cfg.header_band_height]
        if len(top) < cfg.header_hint_min_elements:
            return None
        # Reference width is the first component supplied, usually the page container.
        reference = components[0].position.width
        if not any(c.position.width > reference * cfg.header_span_fraction for c in top):
            return None
        return LayoutHint(pattern="header", confidence=cfg.header_hint_confidence, elements=len(top))

    def _sidebar_hint(self, components: Sequence[Component]) -> LayoutHint | None:
        cfg = self.config
        left = [c for c in components if c.position.x < cfg.sidebar_left_edge]
        right = [c for c in components if c.position.x > cfg.sidebar_right_edge]
        minimum = cfg.sidebar_hint_min_elements
        if len(left) < minimum and len(right) < minimum:
            return None
        return LayoutHint(
            pattern="sidebar",
            confidence=cfg.sidebar_hint_confidence,
            side="left" if len(left) >= minimum else "right",
            elements=max(len(left), len(right)),
        )

    def _card_hint(self, components: Sequence[Component]) -> LayoutHint | None:
        cfg = self.config
        cards = [
            c for c in components
            if c.type == ComponentType.RECTANGLE
            and c.aspect_ratio is not None
            and 0.5 < c.aspect_ratio < 2
        ]
        if len(cards) < cfg.card_hint_min_elements:
            return None
        return LayoutHint(pattern="card_layout", confidence=cfg.card_hint_confidence, elements=len(cards))

    def responsive_indicators(self, image: ImageDimensions) -> list[ResponsiveIndicator]:
        cfg = self.config
        if image.width < cfg.mobile_max_width:
            return [ResponsiveIndicator(pattern="mobile_layout", indicators=["small_viewport", "stacked_elements"])]
        if image.width < cfg.desktop_min_width:
            return [ResponsiveIndicator(pattern="tablet_layout", indicators=["medium_viewport", "adaptive_columns"])]
        return [ResponsiveIndicator(pattern="desktop_layout", indicators=["large_viewport", "multi_column"])]

    # ── Statistics and quality ──

    def statistics(self, components: Sequence[Component], image: ImageDimensions) -> LayoutStatistics:
        n = len(components)
        return LayoutStatistics(
            total_elements=n,
            viewport_width=image.width,
            viewport_height=image.height,
            aspect_ratio=image.aspect_ratio,
            element_density=n / (image.area / 10_000),
            average_width=round(stats.mean([c.position.width for c in components])),
            average_height=round(stats.mean([c.position.height for c in components])),
            layout_efficiency=self.efficiency(components, image),
        )

    def efficiency(self, components: Sequence[Component], image: ImageDimensions) -> float:
        """Area coverage, penalised once it passes ``efficient_coverage``."""
        coverage = sum(c.position.area for c in components) / image.area
        limit = self.config.efficient_coverage
        if coverage > limit:
            return stats.score(1 - (coverage - limit) * 2)
        return stats.score(coverage)

    def quality(
        self,
        grid: GridAnalysis,
        alignment: AlignmentAnalysis,
        spacing: SpacingAnalysis,
        statistics: LayoutStatistics,
    ) -> LayoutQuality:
        cfg = self.config
        total = 0.0
        weight = 0.0

        grid_quality = grid.regularity if grid.detected else 0.0
        if grid.detected:
            total += grid_quality * cfg.quality_grid_weight
            weight += cfg.quality_grid_weight

        group_count = len(alignment.horizontal_groups) + len(alignment.vertical_groups)
        alignment_quality = stats.score(group_count / max(1.0, statistics.total_elements / 2))
        total += alignment_quality * cfg.quality_alignment_weight
        weight += cfg.quality_alignment_weight

        spacing_consistency = stats.score(
            (spacing.horizontal.consistency + spacing.vertical.consistency) / 2
        )
        total += spacing_consistency * cfg.quality_spacing_weight
        weight += cfg.quality_spacing_weight

        total += statistics.layout_efficiency * cfg.quality_efficiency_weight
        weight += cfg.quality_efficiency_weight

        score = stats.score(total / weight) if weight > 0 else 0.0
        return LayoutQuality(
            score=score,
            rating=_rating(score),
            factors=QualityFactors(
                grid_quality=grid_quality,
                alignment_quality=alignment_quality,
                spacing_consistency=spacing_consistency,
                layout_efficiency=statistics.layout_efficiency,
            ),
        )


def _rating(score: float) -> QualityRating:
    for floor, rating in _RATINGS:
        if score >= floor:
            return rating
    return QualityRating.POOR
