"""P01 — Horizontal navigation bar.

Three or more navigation/button components sharing one horizontal alignment
group. A bar in the top fifth of the page scores higher than one further down.
"""

from __future__ import annotations

from screensight.engine.config import EngineConfig
from screensight.engine.patterns.registry import Detection, PatternInput, pattern
from screensight.models.scene import ComponentType
from screensight.utils import stats

_NAV_TYPES = {ComponentType.NAVIGATION, ComponentType.BUTTON}


@pattern(
    id="P01",
    name="horizontal_nav",
    description="Horizontal navigation bar",
    characteristics={"alignment": "horizontal", "spacing": "uniform", "position": "top"},
)
def horizontal_nav(scene: PatternInput, config: EngineConfig) -> Detection:
    nav = {c.id: c for c in scene.components if c.type in _NAV_TYPES}
    if len(nav) < config.nav_min_elements:
        return Detection()

    for group in scene.layout.alignment.horizontal_groups:
        members = [nav[m] for m in group.members if m in nav]
        if len(members) < config.nav_min_elements:
            continue

        evidence = [f"{len(members)} horizontally aligned navigation elements"]
        characteristics = {
            "element_count": len(members),
            "navigation_count": sum(1 for m in members if m.type == ComponentType.NAVIGATION),
        }
        mean_y = stats.mean([m.position.y for m in members])
        if mean_y < scene.image.height * config.nav_top_fraction:
            evidence.append("Positioned in top region of page")
            return Detection(config.nav_top_confidence, evidence, characteristics)
        return Detection(config.nav_confidence, evidence, characteristics)

    return Detection()
