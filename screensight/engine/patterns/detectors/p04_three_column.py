"""P04 — Three-column layout: exactly three vertical alignment groups."""

from __future__ import annotations

from screensight.engine.config import EngineConfig
from screensight.engine.patterns.registry import Detection, PatternInput, pattern


@pattern(
    id="P04",
    name="three_column",
    description="Three column layout",
    characteristics={"columns": 3, "alignment": "vertical"},
)
def three_column(scene: PatternInput, config: EngineConfig) -> Detection:
    groups = scene.layout.alignment.vertical_groups
    if len(groups) != 3:
        return Detection()

    left, middle, right = sorted(g.anchor for g in groups)
    first_gap = middle - left
    second_gap = right - middle
    characteristics = {"column_positions": [left, middle, right]}

    if abs(first_gap - second_gap) < config.three_column_spacing_tolerance:
        return Detection(
            config.three_column_even_confidence,
            ["Three evenly spaced vertical columns detected"],
            {**characteristics, "equal_spacing": True},
        )
    return Detection(
        config.three_column_confidence,
        ["Three vertical columns with uneven spacing"],
        {**characteristics, "equal_spacing": False},
    )
