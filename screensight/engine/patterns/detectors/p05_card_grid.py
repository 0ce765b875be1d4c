"""P05 — Card grid: four or more same-sized cards, scored higher on a detected grid."""

from __future__ import annotations

from screensight.engine.config import EngineConfig
from screensight.engine.patterns.registry import Detection, PatternInput, pattern
from screensight.models.scene import ComponentType
from screensight.utils import stats

_CARD_TYPES = {ComponentType.CARD, ComponentType.RECTANGLE}


@pattern(
    id="P05",
    name="card_grid",
    description="Grid of cards",
    characteristics={"uniform_size": True, "grid_alignment": True},
)
def card_grid(scene: PatternInput, config: EngineConfig) -> Detection:
    cards = [c for c in scene.components if c.type in _CARD_TYPES]
    if len(cards) < config.card_min_count:
        return Detection()

    uniformity = stats.uniformity([c.position.area for c in cards])
    if uniformity <= config.card_uniformity_threshold:
        return Detection()

    evidence = [f"{len(cards)} cards with {round(uniformity * 100)}% size uniformity"]
    characteristics = {"card_count": len(cards), "size_uniformity": uniformity}
    if scene.layout.grid.detected:
        evidence.append("Grid layout detected")
        return Detection(config.card_grid_confidence, evidence, characteristics)
    return Detection(config.card_confidence, evidence, characteristics)
