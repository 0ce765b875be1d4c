"""Visual complexity score.

    score = min(n/20, 1)·0.3 + min(colours/15, 1)·0.2 + layout factor + edge_density·0.3

capped at 1. Colour count and edge density come from upstream pixel analysis;
the engine never computes them.
"""

from __future__ import annotations

from screensight.engine.config import EngineConfig
from screensight.models.layout import LayoutType
from screensight.models.patterns import ComplexityLevel, ComplexityScore
from screensight.utils import stats

# Level floors, highest first
_LEVELS: tuple[tuple[float, ComplexityLevel], ...] = (
    (0.8, ComplexityLevel.VERY_COMPLEX),
    (0.6, ComplexityLevel.COMPLEX),
    (0.3, ComplexityLevel.MODERATE),
)


def complexity_level(score: float) -> ComplexityLevel:
    for floor, level in _LEVELS:
        if score >= floor:
            return level
    return ComplexityLevel.SIMPLE


def layout_complexity(
    component_count: int,
    layout_type: LayoutType,
    config: EngineConfig,
    *,
    color_count: int = 0,
    edge_density: float = 0.0,
) -> ComplexityScore:
    factors: list[str] = []

    component_factor = min(component_count / config.complexity_component_scale, 1.0)
    total = component_factor * config.complexity_component_weight
    factors.append(f"{component_count} components ({round(component_factor * 100)}%)")

    color_factor = min(color_count / config.complexity_color_scale, 1.0)
    total += color_factor * config.complexity_color_weight
    factors.append(f"{color_count} colors ({round(color_factor * 100)}%)")

    layout_weight = {
        LayoutType.GRID: config.complexity_grid_weight,
        LayoutType.FLEXBOX: config.complexity_flexbox_weight,
        LayoutType.CUSTOM: config.complexity_custom_weight,
    }.get(layout_type)
    if layout_weight is not None:
        total += layout_weight
        factors.append(f"{layout_type.value.capitalize()} layout ({round(layout_weight * 100)}%)")

    edge_density = stats.score(edge_density)
    total += edge_density * config.complexity_edge_weight
    factors.append(f"Edge complexity ({round(edge_density * 100)}%)")

    score = stats.score(total)
    return ComplexityScore(score=score, level=complexity_level(score), factors=factors)
