"""Hierarchical relationships — containment chains and nesting depth.

Records are parent → child (``component_a`` is the container). ``level`` is
the child's number of ancestors, found by repeatedly stepping to the tightest
container of the current box.
"""

from __future__ import annotations

from collections.abc import Sequence

from screensight.engine.config import EngineConfig
from screensight.engine.spatial import PairwiseIndex, is_contained
from screensight.models.relationships import HierarchicalSubtype, Relationship, RelationshipCategory
from screensight.models.scene import Component


def parent_of(i: int, components: Sequence[Component], config: EngineConfig) -> int | None:
    """Smallest other component whose box contains ``i``; ties go to input order."""
    pos = components[i].position
    containers = [
        k for k, other in enumerate(components)
        if k != i and is_contained(pos, other.position, config.containment_padding)
    ]
    if not containers:
        return None
    return min(containers, key=lambda k: (components[k].position.area, k))


def nesting_level(i: int, components: Sequence[Component], config: EngineConfig) -> int:
    # Identical boxes contain each other, so the walk must stop on revisits.
    seen = {i}
    level = 0
    current = parent_of(i, components, config)
    while current is not None and current not in seen:
        seen.add(current)
        level += 1
        current = parent_of(current, components, config)
    return level


def containment_hierarchy(
    components: Sequence[Component], index: PairwiseIndex, config: EngineConfig,
) -> list[Relationship]:
    pad = config.containment_padding
    levels: dict[int, int] = {}
    found: list[Relationship] = []

    for i, j in index.pairs():
        pi, pj = components[i].position, components[j].position
        i_holds_j = is_contained(pj, pi, pad)
        j_holds_i = is_contained(pi, pj, pad)
        # Mutual containment (near-identical boxes) is recorded once, earlier component as parent.
        if i_holds_j:
            parent, child = i, j
        elif j_holds_i:
            parent, child = j, i
        else:
            continue
        if child not in levels:
            levels[child] = nesting_level(child, components, config)
        found.append(Relationship(
            component_a=components[parent].id,
            component_b=components[child].id,
            category=RelationshipCategory.HIERARCHICAL,
            subtype=HierarchicalSubtype.CONTAINMENT,
            strength=config.containment_strength,
            evidence=[f"{components[parent].id} contains {components[child].id}"],
            level=levels[child],
        ))
    return found


def size_hierarchy(components: Sequence[Component], config: EngineConfig) -> list[Relationship]:
    """Hook for size-ranked hierarchy; no evidence source yet."""
    return []


def stacking_hierarchy(components: Sequence[Component], config: EngineConfig) -> list[Relationship]:
    """Hook for z-order hierarchy; needs occlusion data the engine does not receive."""
    return []


def hierarchical_relationships(
    components: Sequence[Component], index: PairwiseIndex, config: EngineConfig,
) -> list[Relationship]:
    return [
        *containment_hierarchy(components, index, config),
        *size_hierarchy(components, config),
        *stacking_hierarchy(components, config),
    ]


def max_depth(relationships: Sequence[Relationship]) -> int:
    return max((r.level or 0 for r in relationships), default=0)
