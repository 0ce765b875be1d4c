"""P10 — Masonry: equal-width tiles of varying height."""

from __future__ import annotations

from screensight.engine.config import EngineConfig
from screensight.engine.patterns.registry import Detection, PatternInput, pattern
from screensight.models.scene import ComponentType
from screensight.utils import stats

_TILE_TYPES = {ComponentType.RECTANGLE, ComponentType.CARD}


@pattern(
    id="P10",
    name="masonry",
    description="Masonry/Pinterest-style layout",
    characteristics={"variable_height": True, "alignment": "top"},
)
def masonry(scene: PatternInput, config: EngineConfig) -> Detection:
    tiles = [c for c in scene.components if c.type in _TILE_TYPES]
    if len(tiles) < config.masonry_min_elements:
        return Detection()

    width_uniformity = stats.uniformity([t.position.width for t in tiles])
    height_variability = stats.spread([t.position.height for t in tiles])
    if width_uniformity <= config.masonry_width_uniformity or height_variability <= config.masonry_height_variability:
        return Detection()

    return Detection(
        config.masonry_confidence,
        [f"{len(tiles)} elements with uniform widths but variable heights"],
        {"tile_count": len(tiles), "height_variability": round(height_variability, 3)},
    )
