"""Tests for the pattern registry and the @pattern decorator."""

import pytest

from screensight.engine.patterns.registry import (
    Detection,
    PatternRegistry,
    get_registry,
    load_detectors,
    pattern,
)


def _noop(scene, config):
    return Detection()


def test_decorator_registers_into_given_registry():
    reg = PatternRegistry()

    @pattern(id="X01", name="demo", description="Demo", characteristics={"k": 1}, registry=reg)
    def demo(scene, config):
        return Detection(0.5)

    assert "demo" in reg
    spec = reg.get("demo")
    assert spec.id == "X01"
    assert spec.fn is demo
    assert spec.characteristics == {"k": 1}
    assert reg.count == 1


def test_duplicate_name_rejected():
    reg = PatternRegistry()
    pattern(id="X01", name="demo", registry=reg)(_noop)
    with pytest.raises(ValueError, match="Duplicate pattern name"):
        pattern(id="X02", name="demo", registry=reg)(_noop)


def test_duplicate_id_rejected():
    reg = PatternRegistry()
    pattern(id="X01", name="first", registry=reg)(_noop)
    with pytest.raises(ValueError, match="Duplicate pattern ID"):
        pattern(id="X01", name="second", registry=reg)(_noop)


def test_all_and_catalog_sorted_by_id():
    reg = PatternRegistry()
    pattern(id="X03", name="c", registry=reg)(_noop)
    pattern(id="X01", name="a", registry=reg)(_noop)
    pattern(id="X02", name="b", registry=reg)(_noop)
    assert [s.id for s in reg.all()] == ["X01", "X02", "X03"]
    assert list(reg.catalog()) == ["a", "b", "c"]


def test_builtin_catalog():
    load_detectors()
    load_detectors()  # second call registers nothing new
    reg = get_registry()
    assert reg.count == 10
    assert [s.name for s in reg.all()] == [
        "horizontal_nav",
        "breadcrumb",
        "hero_section",
        "three_column",
        "card_grid",
        "form_layout",
        "gallery",
        "article",
        "sidebar",
        "masonry",
    ]
    assert all(s.description for s in reg.all())
