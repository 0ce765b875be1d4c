"""Component groups — greedy proximity clustering."""

from __future__ import annotations

from collections.abc import Sequence

from screensight.engine.config import EngineConfig
from screensight.engine.spatial import PairwiseIndex, union_bounds
from screensight.models.relationships import ComponentGroup, GroupKind
from screensight.models.scene import Component


def proximity_groups(
    components: Sequence[Component], index: PairwiseIndex, config: EngineConfig,
) -> list[ComponentGroup]:
    """Seed with the first unclustered component, absorb every unclustered one within reach of the seed."""
    used: set[int] = set()
    groups: list[ComponentGroup] = []
    for seed in range(len(components)):
        if seed in used:
            continue
        used.add(seed)
        members = [seed]
        for other in index.within(seed, config.proximity_group_distance):
            if other not in used:
                members.append(other)
                used.add(other)
        if len(members) < 2:
            continue
        bounds = union_bounds([components[m].position for m in members])
        groups.append(ComponentGroup(
            kind=GroupKind.PROXIMITY,
            members=[components[m].id for m in members],
            center=bounds.center,
            bounds=bounds,
        ))
    return groups


def functional_groups(components: Sequence[Component], config: EngineConfig) -> list[ComponentGroup]:
    """Hook for grouping by shared function."""
    return []


def visual_groups(components: Sequence[Component], config: EngineConfig) -> list[ComponentGroup]:
    """Hook for grouping by visual similarity; needs per-pixel style features."""
    return []


def component_groups(
    components: Sequence[Component], index: PairwiseIndex, config: EngineConfig,
) -> list[ComponentGroup]:
    return [
        *proximity_groups(components, index, config),
        *functional_groups(components, config),
        *visual_groups(components, config),
    ]
