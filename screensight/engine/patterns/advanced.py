"""Advanced layout hints — which CSS layout model most likely produced the screen.

Each detector reads the finished LayoutReport and returns an additive
confidence. css_grid and flexbox are reported above 0.6, subgrid above 0.5.
"""

from __future__ import annotations

from collections.abc import Sequence

from screensight.engine.config import EngineConfig
from screensight.engine.spatial import is_contained
from screensight.models.layout import LayoutReport
from screensight.models.patterns import AdvancedLayout, AdvancedLayoutKind
from screensight.models.scene import Component
from screensight.utils import stats


def detect_advanced_layouts(
    components: Sequence[Component], layout: LayoutReport, config: EngineConfig,
) -> list[AdvancedLayout]:
    found: list[AdvancedLayout] = []

    grid = css_grid(components, layout, config)
    if grid.confidence > config.css_grid_min_confidence:
        found.append(grid)

    flex = flexbox(components, layout, config)
    if flex.confidence > config.flexbox_min_confidence:
        found.append(flex)

    sub = subgrid(components, layout, config)
    if sub.confidence > config.subgrid_min_confidence:
        found.append(sub)

    return found


def css_grid(components: Sequence[Component], layout: LayoutReport, config: EngineConfig) -> AdvancedLayout:
    if not layout.grid.detected:
        return AdvancedLayout(kind=AdvancedLayoutKind.CSS_GRID)

    grid = layout.grid
    confidence = config.css_grid_base_weight
    evidence = ["Regular grid structure detected"]
    properties: dict[str, object] = {
        "rows": grid.rows,
        "columns": grid.columns,
        "regularity": grid.regularity,
    }

    if layout.spacing.horizontal.consistency > config.grid_gap_consistency:
        confidence += config.css_grid_gap_weight
        evidence.append("Consistent horizontal spacing (grid-gap)")
    if layout.spacing.vertical.consistency > config.grid_gap_consistency:
        confidence += config.css_grid_gap_weight
        evidence.append("Consistent vertical spacing (grid-gap)")

    mean_width = stats.mean([c.position.width for c in components])
    spanning = [c for c in components if c.position.width > mean_width * config.spanning_width_factor]
    if spanning:
        confidence += config.css_grid_spanning_weight
        evidence.append(f"{len(spanning)} elements spanning multiple columns")
        properties["spanning_elements"] = len(spanning)

    return AdvancedLayout(
        kind=AdvancedLayoutKind.CSS_GRID,
        confidence=stats.score(confidence),
        properties=properties,
        evidence=evidence,
    )


def flexbox(components: Sequence[Component], layout: LayoutReport, config: EngineConfig) -> AdvancedLayout:
    by_id = {c.id: c for c in components}
    alignment = layout.alignment
    confidence = 0.0
    evidence: list[str] = []
    properties: dict[str, object] = {}

    if alignment.horizontal_groups:
        row = max(alignment.horizontal_groups, key=lambda g: g.size)
        if row.size >= config.flexbox_min_items:
            confidence += config.flexbox_axis_weight
            evidence.append(f"Horizontal flex container with {row.size} items")
            properties.update(direction="row", item_count=row.size)
            widths = [by_id[m].position.width for m in row.members if m in by_id]
            if stats.normalized_variance(widths) > config.flexbox_width_variance:
                confidence += config.flexbox_grow_weight
                evidence.append("Variable item widths suggest flex-grow usage")
                properties["flex_grow"] = True

    if alignment.vertical_groups:
        column = max(alignment.vertical_groups, key=lambda g: g.size)
        if column.size >= config.flexbox_min_items:
            confidence += config.flexbox_axis_weight
            evidence.append(f"Vertical flex container with {column.size} items")
            properties.update(direction="column", item_count=column.size)

    if (
        confidence > 0
        and alignment.horizontal_groups
        and layout.spacing.horizontal.consistency > config.grid_gap_consistency
    ):
        confidence += config.flexbox_justify_weight
        evidence.append("Even spacing suggests justify-content: space-between/around")
        properties["justify_content"] = "space-between"

    return AdvancedLayout(
        kind=AdvancedLayoutKind.FLEXBOX,
        confidence=stats.score(confidence),
        properties=properties,
        evidence=evidence,
    )


def subgrid(components: Sequence[Component], layout: LayoutReport, config: EngineConfig) -> AdvancedLayout:
    if not layout.grid.detected:
        return AdvancedLayout(kind=AdvancedLayoutKind.SUBGRID)

    confidence = 0.0
    evidence: list[str] = []
    nested = 0
    for container in components:
        box = container.position
        if box.width <= config.subgrid_container_min_width or box.height <= config.subgrid_container_min_height:
            continue
        children = [
            c for c in components
            if c is not container and c.id != container.id and is_contained(c.position, box)
        ]
        if len(children) < config.subgrid_min_children:
            continue
        if position_regularity(children) > config.subgrid_regularity_threshold:
            confidence += config.subgrid_nested_weight
            nested += 1
            evidence.append(f"Nested grid found in container with {len(children)} items")

    return AdvancedLayout(
        kind=AdvancedLayoutKind.SUBGRID,
        confidence=stats.score(confidence),
        properties={"nested_grids": nested} if nested else {},
        evidence=evidence,
    )


def position_regularity(components: Sequence[Component]) -> float:
    """Mean consistency of the sorted x-origin steps and sorted y-origin steps."""
    xs = sorted(c.position.x for c in components)
    ys = sorted(c.position.y for c in components)
    x_steps = [b - a for a, b in zip(xs, xs[1:])]
    y_steps = [b - a for a, b in zip(ys, ys[1:])]
    return (stats.consistency(x_steps) + stats.consistency(y_steps)) / 2
