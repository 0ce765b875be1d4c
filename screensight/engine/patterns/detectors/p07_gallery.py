"""P07 — Image gallery: many images sharing an aspect ratio."""

from __future__ import annotations

from screensight.engine.config import EngineConfig
from screensight.engine.patterns.registry import Detection, PatternInput, pattern
from screensight.models.scene import ComponentType
from screensight.utils import stats

_IMAGE_TYPES = {ComponentType.IMAGE, ComponentType.RECTANGLE}


@pattern(
    id="P07",
    name="gallery",
    description="Image gallery",
    characteristics={"uniform_aspect_ratio": True, "grid_layout": True},
)
def gallery(scene: PatternInput, config: EngineConfig) -> Detection:
    images = [c for c in scene.components if c.type in _IMAGE_TYPES]
    if len(images) < config.gallery_min_images:
        return Detection()

    ratios = [c.aspect_ratio for c in images if c.aspect_ratio]
    if len(ratios) < len(images) * config.gallery_ratio_coverage:
        return Detection()

    # Absolute variance: aspect ratios already live on a ~1 scale.
    uniformity = stats.score(1 - stats.variance(ratios))
    if uniformity <= config.gallery_uniformity_threshold:
        return Detection()

    return Detection(
        config.gallery_confidence,
        [f"{len(images)} images with uniform aspect ratios"],
        {"image_count": len(images), "mean_aspect_ratio": round(stats.mean(ratios), 3)},
    )
