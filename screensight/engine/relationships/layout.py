"""Layout relationships read off a finished LayoutReport: shared alignment groups and grid neighbours."""

from __future__ import annotations

from collections.abc import Sequence

from screensight.engine.config import EngineConfig
from screensight.models.layout import AlignmentGroup, GridAnalysis, LayoutReport
from screensight.models.relationships import LayoutSubtype, Relationship, RelationshipCategory
from screensight.models.scene import Component


def layout_relationships(
    components: Sequence[Component], layout: LayoutReport, config: EngineConfig,
) -> list[Relationship]:
    order = {c.id: i for i, c in enumerate(components)}
    found: list[Relationship] = []
    for group in layout.alignment.horizontal_groups:
        found.extend(_group_pairs(group, LayoutSubtype.HORIZONTAL_ALIGNMENT, order, config))
    for group in layout.alignment.vertical_groups:
        found.extend(_group_pairs(group, LayoutSubtype.VERTICAL_ALIGNMENT, order, config))
    if layout.grid.detected:
        found.extend(grid_neighbors(layout.grid, order, config))
    return found


def _group_pairs(
    group: AlignmentGroup, subtype: LayoutSubtype, order: dict[str, int], config: EngineConfig,
) -> list[Relationship]:
    members = sorted((m for m in group.members if m in order), key=order.__getitem__)
    evidence = ["Horizontally aligned in layout" if subtype == LayoutSubtype.HORIZONTAL_ALIGNMENT
                else "Vertically aligned in layout"]
    return [
        Relationship(
            component_a=a,
            component_b=b,
            category=RelationshipCategory.LAYOUT,
            subtype=subtype,
            strength=config.layout_alignment_confidence,
            evidence=evidence,
        )
        for n, a in enumerate(members)
        for b in members[n + 1:]
    ]


def grid_neighbors(grid: GridAnalysis, order: dict[str, int], config: EngineConfig) -> list[Relationship]:
    """Occupied cells that share an edge (right or down neighbour), one record per pair."""
    occupant = {(c.row, c.column): c.component_id for c in grid.cells if c.occupied}
    found: list[Relationship] = []
    for (row, col), cid in sorted(occupant.items()):
        for d_row, d_col, direction in ((0, 1, "row"), (1, 0, "column")):
            other = occupant.get((row + d_row, col + d_col))
            if other is None or other == cid or cid not in order or other not in order:
                continue
            a, b = sorted((cid, other), key=order.__getitem__)
            found.append(Relationship(
                component_a=a,
                component_b=b,
                category=RelationshipCategory.LAYOUT,
                subtype=LayoutSubtype.GRID_NEIGHBORS,
                strength=config.grid_neighbor_confidence,
                evidence=[f"Grid neighbors: same {direction}"],
            ))
    return found
