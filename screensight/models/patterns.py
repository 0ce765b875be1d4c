"""Pattern report model — named UI patterns detected on a screen."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import Field

from screensight.models.base import EMPTY, ReadOnlyDict, Report


class ComplexityLevel(str, enum.Enum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"
    VERY_COMPLEX = "very_complex"


class AdvancedLayoutKind(str, enum.Enum):
    CSS_GRID = "css_grid"
    FLEXBOX = "flexbox"
    SUBGRID = "subgrid"


class Pattern(Report):
    name: str
    description: str = ""
    confidence: float = Field(ge=0.0, le=1.0)
    evidence: tuple[str, ...] = ()
    characteristics: ReadOnlyDict[str, Any] = EMPTY


class ComplexityScore(Report):
    score: float = Field(default=0.0, ge=0.0, le=1.0)
    level: ComplexityLevel = ComplexityLevel.SIMPLE
    factors: tuple[str, ...] = ()


class AdvancedLayout(Report):
    kind: AdvancedLayoutKind
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    properties: ReadOnlyDict[str, Any] = EMPTY
    evidence: tuple[str, ...] = ()


class ComplianceScore(Report):
    score: float = Field(default=0.0, ge=0.0, le=1.0)
    notes: tuple[str, ...] = ()


class DesignSystemCompliance(Report):
    """How consistently one screen reuses colours, spacings, font sizes and component kinds."""

    color_consistency: ComplianceScore = Field(default_factory=ComplianceScore)
    spacing_consistency: ComplianceScore = Field(default_factory=ComplianceScore)
    typography_consistency: ComplianceScore = Field(default_factory=ComplianceScore)
    component_consistency: ComplianceScore = Field(default_factory=ComplianceScore)
    overall_score: float = Field(default=0.0, ge=0.0, le=1.0)


class PatternReport(Report):
    """Accepted patterns plus aggregate scores for one screen."""

    patterns: tuple[Pattern, ...] = ()
    pattern_confidence: float = 0.0
    complexity: ComplexityScore = Field(default_factory=ComplexityScore)
    design_system_compliance: DesignSystemCompliance = Field(default_factory=DesignSystemCompliance)
    advanced_layouts: tuple[AdvancedLayout, ...] = ()
    errors: ReadOnlyDict[str, str] = EMPTY

    def get(self, name: str) -> Pattern | None:
        for p in self.patterns:
            if p.name == name:
                return p
        return None

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.patterns]
