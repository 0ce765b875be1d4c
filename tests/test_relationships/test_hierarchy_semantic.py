"""Tests for containment hierarchy and text-to-component semantic relationships."""

import math

import pytest

from screensight.engine.config import EngineConfig
from screensight.engine.relationships.hierarchical import (
    hierarchical_relationships,
    max_depth,
    nesting_level,
    parent_of,
)
from screensight.engine.relationships.semantic import semantic_relationships
from screensight.engine.spatial import PairwiseIndex
from screensight.models.relationships import HierarchicalSubtype, SemanticSubtype
from tests.conftest import comp, text

CONFIG = EngineConfig()

NESTED = [
    comp("outer", "container", 0, 0, 600, 600),
    comp("inner", "card", 10, 10, 300, 300),
    comp("leaf", "button", 20, 20, 50, 50),
]


def _hierarchy(items):
    return hierarchical_relationships(items, PairwiseIndex([c.position for c in items]), CONFIG)


def test_parent_is_tightest_container():
    assert parent_of(2, NESTED, CONFIG) == 1
    assert parent_of(1, NESTED, CONFIG) == 0
    assert parent_of(0, NESTED, CONFIG) is None


def test_nesting_levels():
    assert [nesting_level(i, NESTED, CONFIG) for i in range(3)] == [0, 1, 2]


def test_containment_records_run_parent_to_child():
    rels = _hierarchy(NESTED)
    assert [(r.component_a, r.component_b, r.level) for r in rels] == [
        ("outer", "inner", 1),
        ("outer", "leaf", 2),
        ("inner", "leaf", 2),
    ]
    assert all(r.subtype == HierarchicalSubtype.CONTAINMENT for r in rels)
    assert all(r.strength == 0.9 for r in rels)
    assert max_depth(rels) == 2


def test_order_of_input_does_not_flip_parent():
    rels = _hierarchy(list(reversed(NESTED)))
    assert {(r.component_a, r.component_b) for r in rels} == {
        ("outer", "inner"),
        ("outer", "leaf"),
        ("inner", "leaf"),
    }


def test_identical_boxes_recorded_once():
    twins = [comp("a", "card", 0, 0, 100, 100), comp("b", "card", 0, 0, 100, 100)]
    [rel] = _hierarchy(twins)
    assert rel.pair == ("a", "b")
    assert rel.level == 1


def test_disjoint_boxes_have_no_hierarchy():
    items = [comp("a", "card", 0, 0, 100, 100), comp("b", "card", 200, 0, 100, 100)]
    assert _hierarchy(items) == []
    assert max_depth([]) == 0


def test_header_above_content():
    items = [comp("body", "paragraph", 0, 50, 400, 100)]
    texts = [text("title", "header", "Welcome", 0, 0, 200, 30)]
    [rel] = semantic_relationships(items, texts, CONFIG)
    assert rel.pair == ("header_title", "body")
    assert rel.subtype == SemanticSubtype.HEADER_CONTENT
    assert rel.strength == pytest.approx(0.8 - math.hypot(100, 85) / 400, abs=1e-6)


def test_header_below_content_is_ignored():
    items = [comp("body", "paragraph", 0, 0, 400, 100)]
    texts = [text("title", "header", "Welcome", 0, 110, 200, 30)]
    assert semantic_relationships(items, texts, CONFIG) == []


def test_image_caption():
    items = [comp("photo", "image", 0, 300, 200, 150)]
    texts = [
        text("cap", "text", "A scenic mountain view", 0, 460, 200, 20),
        text("tiny", "text", "Photo", 0, 480, 200, 20),
    ]
    [rel] = semantic_relationships(items, texts, CONFIG)
    assert rel.pair == ("photo", "text_cap")
    assert rel.subtype == SemanticSubtype.IMAGE_CAPTION
    assert rel.strength == pytest.approx(0.7 - 95 / 300, abs=1e-6)


def test_semantic_results_sorted():
    items = [comp("body", "paragraph", 0, 50, 400, 100), comp("photo", "image", 0, 300, 200, 150)]
    texts = [
        text("title", "header", "Welcome", 0, 0, 200, 30),
        text("cap", "text", "A scenic mountain view", 0, 460, 200, 20),
    ]
    rels = semantic_relationships(items, texts, CONFIG)
    assert [r.subtype for r in rels] == [SemanticSubtype.HEADER_CONTENT, SemanticSubtype.IMAGE_CAPTION]
