"""Layout report model — grid, alignment, spacing and quality of one screen."""

from __future__ import annotations

import enum

from pydantic import Field

from screensight.models.base import Report


class LayoutType(str, enum.Enum):
    GRID = "grid"
    FLEXBOX = "flexbox"
    FLOW = "flow"
    CUSTOM = "custom"
    EMPTY = "empty"


class AlignmentAxis(str, enum.Enum):
    HORIZONTAL = "horizontal"  # shared y (a row)
    VERTICAL = "vertical"  # shared x (a column)


class QualityRating(str, enum.Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class AlignmentGroup(Report):
    axis: AlignmentAxis
    members: tuple[str, ...] = ()
    anchor: float = 0.0  # coordinate of the seed element
    mean_coordinate: float = 0.0
    quality: float = Field(default=0.0, ge=0.0, le=1.0)

    @property
    def size(self) -> int:
        return len(self.members)


class GridCell(Report):
    row: int
    column: int
    component_id: str | None = None

    @property
    def occupied(self) -> bool:
        return self.component_id is not None


class GridAnalysis(Report):
    detected: bool = False
    rows: int = 0
    columns: int = 0
    cells: tuple[GridCell, ...] = ()
    regularity: float = 0.0
    alignment_score: float = 0.0


class EdgeAlignments(Report):
    left: tuple[tuple[str, str], ...] = ()
    right: tuple[tuple[str, str], ...] = ()
    top: tuple[tuple[str, str], ...] = ()
    bottom: tuple[tuple[str, str], ...] = ()


class CenterAlignments(Report):
    horizontal_center: tuple[tuple[str, str], ...] = ()
    vertical_center: tuple[tuple[str, str], ...] = ()


class AlignmentAnalysis(Report):
    horizontal_groups: tuple[AlignmentGroup, ...] = ()
    vertical_groups: tuple[AlignmentGroup, ...] = ()
    edge_alignments: EdgeAlignments = Field(default_factory=EdgeAlignments)
    center_alignments: CenterAlignments = Field(default_factory=CenterAlignments)


class SpacingValue(Report):
    value: int
    count: int


class SpacingStats(Report):
    count: int = 0
    average: float = 0.0
    consistency: float = 0.0
    common_values: tuple[SpacingValue, ...] = ()


class MarginEstimate(Report):
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    consistency: float = 0.0


class SpacingAnalysis(Report):
    horizontal: SpacingStats = Field(default_factory=SpacingStats)
    vertical: SpacingStats = Field(default_factory=SpacingStats)
    margins: MarginEstimate = Field(default_factory=MarginEstimate)


class LayoutHint(Report):
    pattern: str
    confidence: float = 0.0
    elements: int = 0
    side: str | None = None


class ResponsiveIndicator(Report):
    pattern: str
    indicators: tuple[str, ...] = ()


class LayoutStatistics(Report):
    total_elements: int = 0
    viewport_width: float = 0.0
    viewport_height: float = 0.0
    aspect_ratio: float = 0.0
    element_density: float = 0.0  # elements per 10 000 px²
    average_width: float = 0.0
    average_height: float = 0.0
    layout_efficiency: float = 0.0


class QualityFactors(Report):
    grid_quality: float = 0.0
    alignment_quality: float = 0.0
    spacing_consistency: float = 0.0
    layout_efficiency: float = 0.0


class LayoutQuality(Report):
    score: float = 0.0
    rating: QualityRating = QualityRating.POOR
    factors: QualityFactors = Field(default_factory=QualityFactors)


class LayoutReport(Report):
    """Complete layout analysis of one screen."""

    layout_type: LayoutType = LayoutType.EMPTY
    grid: GridAnalysis = Field(default_factory=GridAnalysis)
    alignment: AlignmentAnalysis = Field(default_factory=AlignmentAnalysis)
    spacing: SpacingAnalysis = Field(default_factory=SpacingAnalysis)
    layout_patterns: tuple[LayoutHint, ...] = ()
    responsive_indicators: tuple[ResponsiveIndicator, ...] = ()
    statistics: LayoutStatistics = Field(default_factory=LayoutStatistics)
    quality: LayoutQuality = Field(default_factory=LayoutQuality)
