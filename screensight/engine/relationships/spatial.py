"""Spatial relationships — containment, overlap, alignment and adjacency between component pairs.

Subtype precedence per pair:
    1. containment (either direction), strength 0.9, final
    2. overlap (closed boxes intersect), strength 0.8, final
    3. alignment within ``aligned_max_distance``: 0.7 − d/500
       (vertical wins when both axes align)
    4. adjacency (edge distance < ``proximity_threshold``) replaces the
       subtype; strength max(current, 0.6 − edge/100)

Subtypes read from ``component_a``'s side: ``contained_by`` means A lies inside B.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from screensight.engine.config import EngineConfig
from screensight.engine.spatial import (
    PairwiseIndex,
    bboxes_intersect,
    edge_distance,
    horizontally_aligned,
    is_contained,
    relative_position,
    vertically_aligned,
)
from screensight.models.relationships import (
    Relationship,
    RelationshipCategory,
    SpatialSubtype,
    SubtypeCount,
)
from screensight.models.scene import Component
from screensight.utils import stats


def classify_pair(
    a: Component, b: Component, d: float, config: EngineConfig,
) -> tuple[SpatialSubtype | None, float, list[str]]:
    """Subtype, strength and evidence for one pair; subtype None when nothing applies."""
    pa, pb = a.position, b.position
    pad = config.containment_padding

    if is_contained(pa, pb, pad):
        return SpatialSubtype.CONTAINED_BY, config.containment_strength, [f"{a.id} contained in {b.id}"]
    if is_contained(pb, pa, pad):
        return SpatialSubtype.CONTAINS, config.containment_strength, [f"{a.id} contains {b.id}"]
    if bboxes_intersect(pa, pb):
        return SpatialSubtype.OVERLAPPING, config.overlap_strength, ["overlapping components"]

    subtype: SpatialSubtype | None = None
    strength = 0.0
    evidence: list[str] = []

    if d < config.aligned_max_distance:
        aligned_strength = config.aligned_base_strength - d / config.aligned_distance_scale
        if vertically_aligned(pa, pb, config.alignment_tolerance):
            subtype, strength = SpatialSubtype.VERTICAL_ALIGNED, aligned_strength
            evidence.append("vertically aligned")
        elif horizontally_aligned(pa, pb, config.alignment_tolerance):
            subtype, strength = SpatialSubtype.HORIZONTAL_ALIGNED, aligned_strength
            evidence.append("horizontally aligned")

    edge = edge_distance(pa, pb, d)
    if edge < config.proximity_threshold:
        subtype = SpatialSubtype.ADJACENT
        strength = max(strength, config.adjacent_base_strength - edge / config.adjacent_distance_scale)
        evidence.append("adjacent components")

    return subtype, stats.score(strength), evidence


def spatial_relationships(
    components: Sequence[Component], index: PairwiseIndex, config: EngineConfig,
) -> list[Relationship]:
    found: list[Relationship] = []
    for i, j in index.pairs():
        a, b = components[i], components[j]
        d = index.distance(i, j)
        subtype, strength, evidence = classify_pair(a, b, d, config)
        if subtype is None or strength <= config.spatial_min_strength:
            continue
        rel_pos = relative_position(a.position, b.position)
        found.append(Relationship(
            component_a=a.id,
            component_b=b.id,
            category=RelationshipCategory.SPATIAL,
            subtype=subtype,
            strength=strength,
            evidence=[*evidence, f"{b.id} is {rel_pos.value} of {a.id}"],
            relative_position=rel_pos,
            distance=round(d, 3),
        ))
    return sorted(found, key=lambda r: r.strength, reverse=True)


def spatial_patterns(relationships: Sequence[Relationship]) -> list[SubtypeCount]:
    """Subtype histogram, most frequent first."""
    counts = Counter(r.subtype.value for r in relationships)
    return [SubtypeCount(subtype=s, count=n) for s, n in counts.most_common()]
