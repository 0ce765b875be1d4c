"""Merged semantic result — the single output of an orchestrated analysis."""

from __future__ import annotations

from pydantic import Field

from screensight.models.base import EMPTY, ReadOnlyDict, Report
from screensight.models.geometry import ImageDimensions
from screensight.models.layout import LayoutReport
from screensight.models.patterns import PatternReport
from screensight.models.relationships import RelationshipReport


class SemanticResult(Report):
    image: ImageDimensions = Field(default_factory=ImageDimensions)
    component_count: int = 0
    text_element_count: int = 0

    layout: LayoutReport = Field(default_factory=LayoutReport)
    patterns: PatternReport = Field(default_factory=PatternReport)
    relationships: RelationshipReport = Field(default_factory=RelationshipReport)

    # Stage name -> failure message for stages skipped under non-strict runs
    errors: ReadOnlyDict[str, str] = EMPTY
    processing_time_ms: float = 0.0
    stage_timings_ms: ReadOnlyDict[str, float] = EMPTY

    @property
    def ok(self) -> bool:
        return not self.errors
