"""Pydantic models: analysis inputs and immutable report structures."""

from screensight.models.geometry import ImageDimensions, Position
from screensight.models.layout import (
    AlignmentAxis,
    AlignmentGroup,
    GridAnalysis,
    GridCell,
    LayoutReport,
    LayoutType,
    QualityRating,
    SpacingStats,
)
from screensight.models.patterns import (
    AdvancedLayout,
    AdvancedLayoutKind,
    ComplexityLevel,
    ComplexityScore,
    ComplianceScore,
    DesignSystemCompliance,
    Pattern,
    PatternReport,
)
from screensight.models.relationships import (
    ComponentGroup,
    FunctionalSubtype,
    HierarchicalSubtype,
    InteractionFlow,
    LayoutSubtype,
    RelationshipCategory,
    Relationship,
    RelationshipReport,
    RelativePosition,
    SemanticSubtype,
    SpatialSubtype,
)
from screensight.models.scene import (
    Component,
    ComponentType,
    FontInfo,
    FontSizeCategory,
    TextElement,
    TextType,
)
from screensight.models.semantic import SemanticResult

__all__ = [
    "AdvancedLayout",
    "AdvancedLayoutKind",
    "AlignmentAxis",
    "AlignmentGroup",
    "ComplexityLevel",
    "ComplexityScore",
    "ComplianceScore",
    "Component",
    "ComponentGroup",
    "ComponentType",
    "DesignSystemCompliance",
    "FontInfo",
    "FontSizeCategory",
    "FunctionalSubtype",
    "GridAnalysis",
    "GridCell",
    "HierarchicalSubtype",
    "ImageDimensions",
    "InteractionFlow",
    "LayoutReport",
    "LayoutSubtype",
    "LayoutType",
    "Pattern",
    "PatternReport",
    "Position",
    "QualityRating",
    "Relationship",
    "RelationshipCategory",
    "RelationshipReport",
    "RelativePosition",
    "SemanticResult",
    "SemanticSubtype",
    "SpacingStats",
    "SpatialSubtype",
    "TextElement",
    "TextType",
]
