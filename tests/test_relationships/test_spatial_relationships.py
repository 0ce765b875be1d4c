"""Tests for spatial pair classification and the pairwise index."""

import math

import pytest

from screensight.engine.config import EngineConfig
from screensight.engine.relationships.spatial import classify_pair, spatial_patterns, spatial_relationships
from screensight.engine.spatial import (
    PairwiseIndex,
    bboxes_intersect,
    edge_distance,
    is_contained,
    overlap_area,
    relative_position,
    union_bounds,
)
from screensight.models.geometry import Position
from screensight.models.relationships import RelativePosition, SpatialSubtype
from tests.conftest import comp

CONFIG = EngineConfig()


def _spatial(items):
    return spatial_relationships(items, PairwiseIndex([c.position for c in items]), CONFIG)


def test_adjacent_inputs():
    items = [comp("in_a", "input", 0, 0, 100, 40), comp("in_b", "input", 120, 0, 100, 40)]
    [rel] = _spatial(items)
    assert rel.pair == ("in_a", "in_b")
    # horizontally aligned at 0.46, adjacency lifts it to 0.6
    assert rel.subtype == SpatialSubtype.ADJACENT
    assert rel.strength == 0.6
    assert rel.relative_position == RelativePosition.RIGHT
    assert rel.distance == 120.0


def test_containment_reads_from_first_component():
    items = [comp("panel", "container", 0, 0, 500, 500), comp("ok", "button", 10, 10, 100, 40)]
    [rel] = _spatial(items)
    assert rel.subtype == SpatialSubtype.CONTAINS
    assert rel.strength == 0.9

    [rel] = _spatial(list(reversed(items)))
    assert rel.pair == ("ok", "panel")
    assert rel.subtype == SpatialSubtype.CONTAINED_BY


def test_containment_allows_padding():
    outer = comp("outer", "card", 10, 10, 100, 100)
    inner = comp("inner", "text", 6, 12, 50, 20)  # 4 px outside on the left
    subtype, strength, _ = classify_pair(outer, inner, 50.0, CONFIG)
    assert subtype == SpatialSubtype.CONTAINS


def test_overlap_beats_alignment():
    a = comp("a", "card", 0, 0, 100, 100)
    b = comp("b", "card", 50, 0, 100, 100)
    subtype, strength, evidence = classify_pair(a, b, 50.0, CONFIG)
    assert subtype == SpatialSubtype.OVERLAPPING
    assert strength == 0.8
    assert evidence == ["overlapping components"]


def test_vertical_alignment():
    # Same left edge, 150 px apart
    a = comp("a", "text", 0, 0, 40, 20)
    b = comp("b", "text", 0, 150, 40, 20)
    subtype, strength, _ = classify_pair(a, b, 150.0, CONFIG)
    assert subtype == SpatialSubtype.VERTICAL_ALIGNED
    assert strength == pytest.approx(0.4)


def test_vertical_alignment_wins_over_horizontal():
    # Offset by 8 px on both axes; adjacency disabled so alignment is visible
    a = comp("a", "icon", 0, 0, 4, 4)
    b = comp("b", "icon", 8, 8, 4, 4)
    d = math.hypot(8, 8)
    subtype, strength, evidence = classify_pair(a, b, d, EngineConfig(proximity_threshold=0))
    assert subtype == SpatialSubtype.VERTICAL_ALIGNED
    assert strength == pytest.approx(0.7 - d / 500, abs=1e-6)
    assert evidence == ["vertically aligned"]


def test_adjacency_overrides_alignment():
    a = comp("a", "icon", 0, 0, 4, 4)
    b = comp("b", "icon", 8, 8, 4, 4)
    subtype, strength, _ = classify_pair(a, b, math.hypot(8, 8), CONFIG)
    assert subtype == SpatialSubtype.ADJACENT
    # edge distance ≈ 3.31 px
    assert strength == pytest.approx(0.7 - math.hypot(8, 8) / 500, abs=1e-6)


def test_distant_unaligned_pair_has_no_relationship():
    a = comp("a", "text", 0, 0, 40, 20)
    b = comp("b", "text", 500, 700, 40, 20)
    subtype, strength, evidence = classify_pair(a, b, math.hypot(500, 700), CONFIG)
    assert subtype is None
    assert strength == 0.0
    assert evidence == []


def test_weak_relationships_dropped():
    # aligned at d = 199: 0.7 - 199/500 = 0.302, barely above the floor
    a = comp("a", "text", 0, 0, 20, 20)
    b = comp("b", "text", 0, 199, 20, 20)
    [rel] = _spatial([a, b])
    assert rel.strength == pytest.approx(0.302)

    stricter = EngineConfig(spatial_min_strength=0.31)
    index = PairwiseIndex([a.position, b.position])
    assert spatial_relationships([a, b], index, stricter) == []


def test_sorted_by_strength_and_histogram():
    items = [
        comp("panel", "container", 0, 0, 500, 500),
        comp("ok", "button", 10, 10, 100, 40),
        comp("cancel", "button", 10, 60, 100, 40),
    ]
    rels = _spatial(items)
    strengths = [r.strength for r in rels]
    assert strengths == sorted(strengths, reverse=True)
    counts = {c.subtype: c.count for c in spatial_patterns(rels)}
    assert counts["contains"] == 2


def test_geometry_helpers():
    a = Position(x=0, y=0, width=100, height=100)
    b = Position(x=100, y=0, width=50, height=50)
    assert bboxes_intersect(a, b)  # touching edges
    assert overlap_area(a, b) == 0.0
    assert overlap_area(a, Position(x=50, y=50, width=100, height=100)) == 2500.0
    assert is_contained(Position(x=10, y=10, width=10, height=10), a)
    assert not is_contained(a, b)
    assert relative_position(a, b) == RelativePosition.RIGHT
    assert relative_position(b, a) == RelativePosition.LEFT
    assert edge_distance(a, Position(x=400, y=0, width=100, height=100)) == 200.0
    assert union_bounds([a, b]) == Position(x=0, y=0, width=150, height=100)
    assert union_bounds([]) == Position()


def test_pairwise_index():
    positions = [
        Position(x=0, y=0, width=10, height=10),
        Position(x=30, y=40, width=10, height=10),
        Position(x=300, y=0, width=10, height=10),
    ]
    index = PairwiseIndex(positions)
    assert len(index) == 3
    assert list(index.pairs()) == [(0, 1), (0, 2), (1, 2)]
    assert index.distance(0, 1) == pytest.approx(50.0)
    assert index.within(0, 100) == [1]
    # strictly closer than the radius
    assert index.within(0, 50) == []
    assert index.within(0, 0) == []


def test_empty_index():
    index = PairwiseIndex([])
    assert len(index) == 0
    assert list(index.pairs()) == []
