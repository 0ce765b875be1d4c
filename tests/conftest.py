"""Shared test fixtures and scene builders."""

from __future__ import annotations

import pytest

from screensight.engine.config import EngineConfig
from screensight.models.geometry import ImageDimensions, Position
from screensight.models.scene import (
    Component,
    ComponentType,
    FontInfo,
    FontSizeCategory,
    TextElement,
    TextType,
)


def comp(
    id: str,
    type: ComponentType | str,
    x: float,
    y: float,
    w: float,
    h: float,
    text: str | None = None,
    aspect: float | None = None,
) -> Component:
    return Component(
        id=id,
        type=ComponentType(type),
        position=Position(x=x, y=y, width=w, height=h),
        text_content=text,
        aspect_ratio=aspect,
    )


def text(
    id: str,
    type: TextType | str,
    content: str,
    x: float,
    y: float,
    w: float = 100,
    h: float = 20,
    size: FontSizeCategory | str | None = None,
) -> TextElement:
    return TextElement(
        id=id,
        type=TextType(type),
        text=content,
        position=Position(x=x, y=y, width=w, height=h),
        font_info=FontInfo(size_category=FontSizeCategory(size)) if size else None,
    )


# 3 x 3 rectangles, 100 x 80, gaps of 20-21 px
GRID_3X3 = [
    comp(f"cell_{r}{c}", "rectangle", x, y, 100, 80)
    for r, y in enumerate((0, 100, 201))
    for c, x in enumerate((0, 120, 241))
]

# Full-width header with three navigation boxes 300 px apart
NAV_SCENE = [
    comp("header", "header", 0, 0, 1000, 60),
    comp("nav_home", "navigation", 100, 10, 80, 30, text="Home"),
    comp("nav_about", "navigation", 400, 10, 80, 30, text="About"),
    comp("nav_contact", "navigation", 700, 10, 80, 30, text="Contact"),
]

# Login form: two stacked inputs, a label above each, a submit button below
FORM_COMPONENTS = [
    comp("email", "input", 200, 100, 160, 40),
    comp("password", "input", 200, 170, 160, 40),
    comp("submit", "button", 200, 240, 120, 40, text="Sign in / Submit"),
]
FORM_TEXT = [
    text("lbl_email", "label", "Email:", 200, 75, 80, 20),
    text("lbl_password", "label", "Password:", 200, 145, 90, 20),
]

DESKTOP = ImageDimensions(width=1280, height=800)
PAGE = ImageDimensions(width=1000, height=1000)


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig()


@pytest.fixture
def grid_scene() -> list[Component]:
    return list(GRID_3X3)


@pytest.fixture
def nav_scene() -> list[Component]:
    return list(NAV_SCENE)


@pytest.fixture
def form_scene() -> tuple[list[Component], list[TextElement]]:
    return list(FORM_COMPONENTS), list(FORM_TEXT)
