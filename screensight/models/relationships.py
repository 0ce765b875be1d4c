"""Relationship report model — pairwise component relationships, groups and flows.

Every relationship category has its own closed subtype enum. A ``Relationship``
validates that its subtype belongs to its category, so code branching on
``category`` can rely on the subtype family.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import Field, model_validator

from screensight.models.base import EMPTY, ReadOnlyDict, Report
from screensight.models.geometry import Position


class RelationshipCategory(str, enum.Enum):
    SPATIAL = "spatial"
    FUNCTIONAL = "functional"
    HIERARCHICAL = "hierarchical"
    SEMANTIC = "semantic"
    LAYOUT = "layout"


class SpatialSubtype(str, enum.Enum):
    CONTAINS = "contains"
    CONTAINED_BY = "contained_by"
    OVERLAPPING = "overlapping"
    HORIZONTAL_ALIGNED = "horizontal_aligned"
    VERTICAL_ALIGNED = "vertical_aligned"
    ADJACENT = "adjacent"


class FunctionalSubtype(str, enum.Enum):
    FORM_SUBMISSION = "form_submission"
    FORM_GROUP = "form_group"
    FORM_LABELING = "form_labeling"
    NAV_GROUP = "nav_group"
    NAV_ACTION = "nav_action"
    NAVIGATION_GROUP = "navigation_group"
    CONTENT_HIERARCHY = "content_hierarchy"
    MEDIA_CAPTION = "media_caption"
    CARD_GROUP = "card_group"
    CONTAINMENT = "containment"
    LAYOUT_COMPLEMENT = "layout_complement"


class HierarchicalSubtype(str, enum.Enum):
    CONTAINMENT = "containment"
    SIZE = "size"
    STACKING = "stacking"


class SemanticSubtype(str, enum.Enum):
    HEADER_CONTENT = "header_content"
    IMAGE_CAPTION = "image_caption"


class LayoutSubtype(str, enum.Enum):
    HORIZONTAL_ALIGNMENT = "horizontal_alignment"
    VERTICAL_ALIGNMENT = "vertical_alignment"
    GRID_NEIGHBORS = "grid_neighbors"


RelationshipSubtype = (
    SpatialSubtype | FunctionalSubtype | HierarchicalSubtype | SemanticSubtype | LayoutSubtype
)

SUBTYPES_BY_CATEGORY: dict[RelationshipCategory, type[enum.Enum]] = {
    RelationshipCategory.SPATIAL: SpatialSubtype,
    RelationshipCategory.FUNCTIONAL: FunctionalSubtype,
    RelationshipCategory.HIERARCHICAL: HierarchicalSubtype,
    RelationshipCategory.SEMANTIC: SemanticSubtype,
    RelationshipCategory.LAYOUT: LayoutSubtype,
}


class RelativePosition(str, enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    ABOVE = "above"
    BELOW = "below"


class GroupKind(str, enum.Enum):
    PROXIMITY = "proximity"
    FUNCTIONAL = "functional"
    VISUAL = "visual"


class FlowKind(str, enum.Enum):
    FORM_SUBMISSION = "form_submission"
    NAVIGATION = "navigation"
    CALL_TO_ACTION = "call_to_action"


class FlowAction(str, enum.Enum):
    INPUT = "input"
    SUBMIT = "submit"
    CLICK = "click"
    NAVIGATE = "navigate"


class Relationship(Report):
    """One relationship between two endpoints, recorded once per unordered pair.

    ``component_a`` precedes ``component_b`` in input order. Endpoints that come
    from text fragments rather than components carry a ``label_``/``header_``/
    ``text_`` prefix.
    """

    component_a: str
    component_b: str
    category: RelationshipCategory
    subtype: RelationshipSubtype
    strength: float = Field(ge=0.0, le=1.0)
    evidence: tuple[str, ...] = ()
    relative_position: RelativePosition | None = None
    distance: float | None = None
    level: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _resolve_subtype(cls, data: Any) -> Any:
        # "containment" exists in two families; the category picks the right one.
        if isinstance(data, dict) and isinstance(data.get("subtype"), str) and "category" in data:
            family = SUBTYPES_BY_CATEGORY[RelationshipCategory(data["category"])]
            data = {**data, "subtype": family(data["subtype"])}
        return data

    @model_validator(mode="after")
    def _subtype_matches_category(self) -> Relationship:
        expected = SUBTYPES_BY_CATEGORY[self.category]
        if not isinstance(self.subtype, expected):
            raise ValueError(
                f"subtype {self.subtype!r} does not belong to category {self.category.value}"
            )
        return self

    @property
    def confidence(self) -> float:
        return self.strength

    @property
    def pair(self) -> tuple[str, str]:
        return (self.component_a, self.component_b)


class SubtypeCount(Report):
    subtype: str
    count: int


class ComponentGroup(Report):
    kind: GroupKind
    members: tuple[str, ...] = ()
    center: tuple[float, float] = (0.0, 0.0)
    bounds: Position = Field(default_factory=Position)


class FlowStep(Report):
    component_id: str
    action: FlowAction


class InteractionFlow(Report):
    kind: FlowKind
    steps: tuple[FlowStep, ...] = ()
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    description: str = ""


class GraphNode(Report):
    id: str
    type: str
    position: Position


class GraphEdge(Report):
    source: str
    target: str
    category: RelationshipCategory
    subtype: str
    strength: float = 0.0


class RelationshipGraph(Report):
    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()
    density: float = 0.0

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)


class RelationshipSummary(Report):
    total_relationships: int = 0
    by_category: ReadOnlyDict[str, int] = EMPTY
    strongest: tuple[Relationship, ...] = ()
    density: float = 0.0


class RelationshipReport(Report):
    """Complete relationship mapping of one screen."""

    spatial: tuple[Relationship, ...] = ()
    functional: tuple[Relationship, ...] = ()
    hierarchical: tuple[Relationship, ...] = ()
    semantic: tuple[Relationship, ...] = ()
    layout: tuple[Relationship, ...] = ()
    spatial_patterns: tuple[SubtypeCount, ...] = ()
    max_hierarchy_depth: int = 0
    groups: tuple[ComponentGroup, ...] = ()
    flows: tuple[InteractionFlow, ...] = ()
    graph: RelationshipGraph = Field(default_factory=RelationshipGraph)
    summary: RelationshipSummary = Field(default_factory=RelationshipSummary)

    def all_relationships(self) -> list[Relationship]:
        return [*self.spatial, *self.functional, *self.hierarchical, *self.semantic, *self.layout]

    def of_category(self, category: RelationshipCategory) -> list[Relationship]:
        match category:
            case RelationshipCategory.SPATIAL:
                return list(self.spatial)
            case RelationshipCategory.FUNCTIONAL:
                return list(self.functional)
            case RelationshipCategory.HIERARCHICAL:
                return list(self.hierarchical)
            case RelationshipCategory.SEMANTIC:
                return list(self.semantic)
            case RelationshipCategory.LAYOUT:
                return list(self.layout)
