"""P03 — Hero section: a tall block near the top with a headline and call to action.

Additive score over the top region (``hero_region_fraction`` of image height):
large-font text, buttons, and a block wider than ``hero_span_fraction`` of the
image height. The span is measured against image height, not width.
"""

from __future__ import annotations

from screensight.engine.config import EngineConfig
from screensight.engine.patterns.registry import Detection, PatternInput, pattern
from screensight.models.scene import ComponentType
from screensight.utils import stats


@pattern(
    id="P03",
    name="hero_section",
    description="Hero section with large content",
    characteristics={"position": "top", "size": "large", "call_to_action": True},
)
def hero_section(scene: PatternInput, config: EngineConfig) -> Detection:
    region = scene.image.height * config.hero_region_fraction
    blocks = [
        c for c in scene.components
        if c.position.y < region and c.position.height > config.hero_min_height
    ]
    if not blocks:
        return Detection()

    headlines = [t for t in scene.text_elements if t.position.y < region and t.is_large]
    ctas = [c for c in scene.components if c.type == ComponentType.BUTTON and c.position.y < region]

    confidence = 0.0
    evidence: list[str] = []
    if headlines:
        evidence.append(f"{len(headlines)} large text elements in top region")
        confidence += config.hero_large_text_weight
    if ctas:
        evidence.append(f"{len(ctas)} call-to-action buttons")
        confidence += config.hero_cta_weight
    if any(b.position.width > scene.image.height * config.hero_span_fraction for b in blocks):
        evidence.append("Large spanning element detected")
        confidence += config.hero_span_weight

    return Detection(
        stats.score(confidence),
        evidence,
        {"block_count": len(blocks), "headline_count": len(headlines), "cta_count": len(ctas)},
    )
