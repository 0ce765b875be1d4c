"""Tests for the design-system compliance sub-scores and their weighted mean."""

import pytest

from screensight.engine.config import EngineConfig
from screensight.engine.layout.analyzer import LayoutAnalyzer
from screensight.engine.patterns.compliance import (
    color_consistency,
    component_consistency,
    design_system_compliance,
    spacing_consistency,
    typography_consistency,
)
from screensight.engine.patterns.matcher import PatternMatcher
from screensight.models.geometry import Position
from screensight.models.scene import FontInfo, TextElement
from tests.conftest import NAV_SCENE, PAGE, comp

CONFIG = EngineConfig()

BUTTON_ROW = [comp(f"b{i}", "button", 60 * i, 0, 50, 20) for i in range(3)]


def _sized(id, size):
    return TextElement(
        id=id,
        text=id,
        position=Position(x=0, y=0, width=100, height=20),
        font_info=FontInfo(estimated_size=size) if size is not None else None,
    )


def test_color_top_palette_share():
    result = color_consistency([40, 20, 10, 5, 5, 5], CONFIG)
    # 80 % covered by the top five, boosted by 1.2
    assert result.score == pytest.approx(0.96)
    assert result.notes == ("Top 5 colors account for 80% of image", "6 total colors detected")


def test_color_capped_and_neutral():
    assert color_consistency([60, 30, 20], CONFIG).score == 1.0
    small = color_consistency([50, 50], CONFIG)
    assert small.score == 0.5
    assert small.notes == ("Limited color palette",)


def test_spacing_top_buckets_share():
    # centers at x = 100, 130, 170, 220: six distinct distances, ties go to the smallest
    items = [comp(f"c{i}", "icon", c - 5, 0, 10, 10) for i, c in enumerate((100, 130, 170, 220))]
    result = spacing_consistency(items, CONFIG)
    assert result.score == 0.5
    assert result.notes == ("Top spacing values: 30px, 40px, 50px", "50% of spacings use consistent values")


def test_spacing_repeated_distances():
    # distances 60, 60, 120
    assert spacing_consistency(BUTTON_ROW, CONFIG).score == 1.0


def test_spacing_without_close_pairs():
    far = [comp(f"f{i}", "card", 500 * i, 0, 50, 50) for i in range(3)]
    result = spacing_consistency(far, CONFIG)
    assert result.score == 0.3
    assert result.notes == ("No close component relationships found",)
    assert spacing_consistency(BUTTON_ROW[:2], CONFIG).score == 0.5


def test_typography_distinct_sizes():
    texts = [_sized(f"t{i}", s) for i, s in enumerate((16, 17, 24, 32))]
    result = typography_consistency(texts, CONFIG)
    # 17 rounds to 18: four sizes, one more than the free three
    assert result.score == pytest.approx(0.75)
    assert result.notes == ("4 distinct font sizes detected", "Font sizes: 32px, 24px, 18px, 16px")


def test_typography_single_size_capped_at_one():
    texts = [_sized(f"t{i}", 16) for i in range(3)]
    assert typography_consistency(texts, CONFIG).score == 1.0


def test_typography_without_sizes():
    texts = [_sized(f"t{i}", None) for i in range(3)]
    result = typography_consistency(texts, CONFIG)
    assert result.score == 0.3
    assert typography_consistency(texts[:2], CONFIG).score == 0.5


def test_component_repeated_kinds():
    items = [
        *BUTTON_ROW[:2],
        comp("in_a", "input", 0, 100, 200, 30),
        comp("in_b", "input", 0, 150, 200, 30),
        *[comp(f"card{i}", "card", 300 * i, 300, 200, 200) for i in range(3)],
    ]
    result = component_consistency(items, CONFIG)
    assert result.score == 1.0
    assert result.notes == ("2 buttons with consistent styling", "2 input fields", "3 cards in consistent layout")


def test_component_mixed_kinds():
    images = [comp(f"img{i}", "image", 200 * i, 0, 100, 100) for i in range(3)]
    result = component_consistency(images, CONFIG)
    assert result.score == 0.0
    assert result.notes == ("Mixed component types detected",)
    assert component_consistency([*BUTTON_ROW[:2], images[0]], CONFIG).score == pytest.approx(0.3)


def test_overall_is_weighted_mean():
    result = design_system_compliance(BUTTON_ROW, [], CONFIG)
    # colour 0.5, spacing 1.0, typography 0.5, component 0.3
    assert result.overall_score == pytest.approx(0.575)

    spatial_only = EngineConfig(compliance_color_weight=0, compliance_typography_weight=0)
    assert design_system_compliance(BUTTON_ROW, [], spatial_only).overall_score == pytest.approx(0.65)


def test_matcher_reports_compliance():
    layout = LayoutAnalyzer().analyze(NAV_SCENE, PAGE)
    report = PatternMatcher().match(NAV_SCENE, [], layout, PAGE, palette_usage=[40, 20, 10, 5, 5, 5])
    assert report.design_system_compliance.color_consistency.score == pytest.approx(0.96)
    assert 0.0 <= report.design_system_compliance.overall_score <= 1.0
