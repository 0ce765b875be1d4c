"""Tests for gap measurement, spacing statistics and margins."""

import pytest

from screensight.engine.config import EngineConfig
from screensight.engine.layout.spacing import SpacingAnalyzer
from screensight.models.geometry import ImageDimensions
from tests.conftest import PAGE, comp


def _row(*gaps, width=50, y=0):
    items = [comp("c0", "button", 0, y, width, 30)]
    x = width
    for n, gap in enumerate(gaps, start=1):
        x += gap
        items.append(comp(f"c{n}", "button", x, y, width, 30))
        x += width
    return items


def test_horizontal_gaps_follow_x_order():
    items = _row(10, 10, 11, 50)
    assert SpacingAnalyzer().horizontal_gaps(list(reversed(items))) == [10, 10, 11, 50]


def test_gaps_skip_other_rows_and_overlaps():
    items = [
        comp("a", "button", 0, 0, 50, 30),
        comp("b", "button", 40, 0, 50, 30),  # overlaps a
        comp("c", "button", 100, 200, 50, 30),  # another row
    ]
    assert SpacingAnalyzer().horizontal_gaps(items) == []


def test_vertical_gaps():
    items = [comp("a", "card", 0, 0, 100, 40), comp("b", "card", 4, 60, 100, 40), comp("c", "card", 0, 120, 100, 40)]
    assert SpacingAnalyzer().vertical_gaps(items) == [20, 20]


def test_common_values_round_to_bucket():
    stats = SpacingAnalyzer().summarize([10, 10, 11, 50])
    # 11 rounds to the 10 bucket
    assert stats.common_values[0].value == 10
    assert stats.common_values[0].count == 3
    assert stats.common_values[1].value == 50
    assert stats.count == 4
    assert stats.average == 20


def test_common_values_ties_go_to_smallest_value():
    values = SpacingAnalyzer().common_values([40, 20, 40, 20, 30])
    assert [(v.value, v.count) for v in values] == [(20, 2), (40, 2), (30, 1)]
    singles = SpacingAnalyzer().common_values([50, 10, 30])
    assert [v.value for v in singles] == [10, 30, 50]


def test_common_values_half_rounds_up():
    values = SpacingAnalyzer().common_values([12.5])
    assert values[0].value == 15


def test_consistency_bounds():
    analyzer = SpacingAnalyzer()
    assert analyzer.summarize([20, 20, 20]).consistency == 1.0
    assert 0.0 <= analyzer.summarize([1, 200, 3, 400]).consistency < 0.5


def test_bucket_override():
    stats = SpacingAnalyzer(EngineConfig(spacing_bucket=10)).summarize([14, 16, 21])
    assert stats.common_values[0].value == 20
    assert stats.common_values[0].count == 2


def test_empty_gaps():
    stats = SpacingAnalyzer().summarize([])
    assert stats.count == 0
    assert stats.common_values == ()
    assert stats.consistency == 0.0


def test_margins():
    items = [comp("a", "card", 100, 50, 400, 400), comp("b", "card", 500, 500, 400, 450)]
    margins = SpacingAnalyzer().margins(items, PAGE)
    assert (margins.top, margins.right, margins.bottom, margins.left) == (50, 100, 50, 100)
    # mean 75, var 625
    assert margins.consistency == pytest.approx(1 - 625 / 5626, abs=1e-6)


def test_margins_clamped_for_offscreen_boxes():
    items = [comp("wide", "card", -20, 0, 1200, 100)]
    margins = SpacingAnalyzer().margins(items, ImageDimensions(width=1000, height=800))
    assert margins.left == 0
    assert margins.right == 0
    assert margins.bottom == 700
