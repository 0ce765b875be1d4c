"""Tests for the complexity score and advanced layout hints."""

import pytest

from screensight.engine.config import EngineConfig
from screensight.engine.layout.analyzer import LayoutAnalyzer
from screensight.engine.patterns.advanced import (
    css_grid,
    detect_advanced_layouts,
    flexbox,
    position_regularity,
    subgrid,
)
from screensight.engine.patterns.complexity import complexity_level, layout_complexity
from screensight.models.layout import GridAnalysis, LayoutReport, LayoutType, SpacingAnalysis, SpacingStats
from screensight.models.patterns import AdvancedLayoutKind, ComplexityLevel
from tests.conftest import NAV_SCENE, PAGE, comp

CONFIG = EngineConfig()


def test_maximal_complexity():
    result = layout_complexity(20, LayoutType.GRID, CONFIG, color_count=15, edge_density=1.0)
    assert result.score == 1.0
    assert result.level == ComplexityLevel.VERY_COMPLEX
    assert "Grid layout (20%)" in result.factors


def test_moderate_custom_layout():
    result = layout_complexity(10, LayoutType.CUSTOM, CONFIG)
    assert result.score == pytest.approx(0.45)
    assert result.level == ComplexityLevel.MODERATE
    assert result.factors[2] == "Custom layout (30%)"


def test_empty_screen_is_simple():
    result = layout_complexity(0, LayoutType.EMPTY, CONFIG)
    assert result.score == 0.0
    assert result.level == ComplexityLevel.SIMPLE
    # no layout factor for empty / flow screens
    assert len(result.factors) == 3


def test_edge_density_clamped():
    result = layout_complexity(0, LayoutType.FLOW, CONFIG, edge_density=4.0)
    assert result.score == pytest.approx(0.3)


@pytest.mark.parametrize(
    "score, level",
    [
        (0.0, ComplexityLevel.SIMPLE),
        (0.3, ComplexityLevel.MODERATE),
        (0.6, ComplexityLevel.COMPLEX),
        (0.8, ComplexityLevel.VERY_COMPLEX),
    ],
)
def test_complexity_levels(score, level):
    assert complexity_level(score) == level


def _grid_layout(h=0.9, v=0.9):
    return LayoutReport(
        grid=GridAnalysis(detected=True, rows=2, columns=2, regularity=1.0),
        spacing=SpacingAnalysis(
            horizontal=SpacingStats(count=2, consistency=h),
            vertical=SpacingStats(count=2, consistency=v),
        ),
    )


def test_css_grid_with_gaps_and_spanning_item():
    cells = [comp(f"c{i}", "card", 0, 0, 100, 100) for i in range(3)] + [comp("wide", "card", 0, 0, 400, 100)]
    result = css_grid(cells, _grid_layout(), CONFIG)
    assert result.kind == AdvancedLayoutKind.CSS_GRID
    assert result.confidence == 1.0
    assert result.properties["spanning_elements"] == 1


def test_css_grid_needs_detected_grid():
    assert css_grid([], LayoutReport(), CONFIG).confidence == 0.0


def test_css_grid_reported_above_threshold():
    cells = [comp(f"c{i}", "card", 0, 0, 100, 100) for i in range(4)]
    found = detect_advanced_layouts(cells, _grid_layout(), CONFIG)
    assert [f.kind for f in found] == [AdvancedLayoutKind.CSS_GRID]
    assert found[0].confidence == pytest.approx(0.8)


def test_flexbox_row_with_flex_grow():
    layout = LayoutAnalyzer().analyze(NAV_SCENE, PAGE)
    result = flexbox(NAV_SCENE, layout, CONFIG)
    # row of 4 + uneven widths + even gaps
    assert result.confidence == pytest.approx(0.6)
    assert result.properties["direction"] == "row"
    assert result.properties["flex_grow"] is True
    assert result.properties["justify_content"] == "space-between"


def test_subgrid_in_container():
    container = comp("panel", "container", 0, 0, 500, 400)
    children = [comp(f"tile{i}", "card", 10 + 110 * i, 10, 100, 100) for i in range(4)]
    items = [container, *children]
    assert position_regularity(children) == 1.0
    layout = LayoutReport(grid=GridAnalysis(detected=True))
    result = subgrid(items, layout, CONFIG)
    assert result.confidence == pytest.approx(0.4)
    assert result.properties == {"nested_grids": 1}


def test_advanced_weights_from_config():
    tuned = EngineConfig(css_grid_base_weight=0.1, css_grid_gap_weight=0.1, subgrid_nested_weight=0.25)
    cells = [comp(f"c{i}", "card", 0, 0, 100, 100) for i in range(4)]
    assert css_grid(cells, _grid_layout(), tuned).confidence == pytest.approx(0.3)

    container = comp("panel", "container", 0, 0, 500, 400)
    children = [comp(f"tile{i}", "card", 10 + 110 * i, 10, 100, 100) for i in range(4)]
    layout = LayoutReport(grid=GridAnalysis(detected=True))
    assert subgrid([container, *children], layout, tuned).confidence == pytest.approx(0.25)
