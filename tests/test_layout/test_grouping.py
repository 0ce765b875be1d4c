"""Tests for row / column grouping and grid detection."""

import pytest

from screensight.engine.config import EngineConfig
from screensight.engine.layout.grouping import GeometryGrouper
from tests.conftest import GRID_3X3, comp


def test_grid_3x3_detected(grid_scene):
    grid = GeometryGrouper().analyze_grid(grid_scene)
    assert grid.detected
    assert grid.rows == 3
    assert grid.columns == 3
    assert grid.regularity > 0.9


def test_grid_cells_row_major(grid_scene):
    grid = GeometryGrouper().analyze_grid(grid_scene)
    assert len(grid.cells) == 9
    assert all(cell.occupied for cell in grid.cells)
    assert [c.component_id for c in grid.cells[:3]] == ["cell_00", "cell_01", "cell_02"]
    assert grid.cells[4].component_id == "cell_11"


def test_each_cell_holds_at_most_one_component(grid_scene):
    grid = GeometryGrouper().analyze_grid(grid_scene)
    ids = [c.component_id for c in grid.cells if c.occupied]
    assert len(ids) == len(set(ids))


def test_rows_sorted_by_x():
    shuffled = [GRID_3X3[i] for i in (2, 0, 1, 5, 3, 4, 8, 6, 7)]
    rows = GeometryGrouper().group_rows(shuffled)
    assert [[c.id for c in row] for row in rows][0] == ["cell_00", "cell_01", "cell_02"]


def test_row_anchor_is_first_element():
    # 0 → 14 joins; 14 → 28 would, but 28 is 28 away from the anchor.
    items = [comp("a", "button", 0, 0, 10, 10), comp("b", "button", 20, 14, 10, 10), comp("c", "button", 40, 28, 10, 10)]
    rows = GeometryGrouper().group_rows(items)
    assert [[c.id for c in row] for row in rows] == [["a", "b"], ["c"]]


def test_alignment_score_counts_both_axes(grid_scene):
    # 9 same-row pairs + 9 same-column pairs over 36 pairs x 2 axes
    assert GeometryGrouper().alignment_score(grid_scene) == pytest.approx(0.25)


def test_irregular_population_is_not_a_grid():
    items = [
        comp("a", "card", 0, 0, 100, 100),
        comp("b", "card", 150, 0, 100, 100),
        comp("c", "card", 300, 0, 100, 100),
        comp("d", "card", 450, 0, 100, 100),
        comp("e", "card", 0, 200, 100, 100),
    ]
    assert not GeometryGrouper().analyze_grid(items).detected


def test_too_few_elements():
    items = [comp("a", "card", 0, 0, 100, 100), comp("b", "card", 200, 200, 100, 100)]
    grid = GeometryGrouper().analyze_grid(items)
    assert not grid.detected
    assert grid.cells == ()


def test_degenerate_inputs():
    grouper = GeometryGrouper()
    assert grouper.group_rows([]) == []
    assert grouper.alignment_score([]) == 0.0
    assert grouper.grid_score([comp("a", "card", 0, 0, 0, 0)]) == 0.0
    assert grouper.regularity([], []) == 0.0


def test_grid_tolerance_override(grid_scene):
    grid = GeometryGrouper(EngineConfig(grid_tolerance=150)).analyze_grid(grid_scene)
    # Lines merge unevenly (6 + 3 members), so the population is irregular
    assert not grid.detected
