"""P08 — Article: long text blocks under a heading."""

from __future__ import annotations

from screensight.engine.config import EngineConfig
from screensight.engine.patterns.registry import Detection, PatternInput, pattern
from screensight.models.scene import TextType
from screensight.utils import stats


@pattern(
    id="P08",
    name="article",
    description="Article/blog post layout",
    characteristics={"title": True, "body": "long", "hierarchy": True},
)
def article(scene: PatternInput, config: EngineConfig) -> Detection:
    texts = scene.text_elements
    long_texts = [t for t in texts if len(t.text) > config.article_long_text_length]
    if len(long_texts) < config.article_min_long_texts:
        return Detection()

    headers = [t for t in texts if t.type == TextType.HEADER]
    confidence = 0.0
    evidence: list[str] = []

    if headers:
        evidence.append(f"{len(headers)} header elements")
        confidence += config.article_header_weight
    if len(long_texts) >= 3:
        evidence.append(f"{len(long_texts)} long text blocks")
        confidence += config.article_body_weight

    lead = min(texts, key=lambda t: t.position.y)
    if lead.type == TextType.HEADER:
        evidence.append("Header at top of content")
        confidence += config.article_lead_weight

    return Detection(
        stats.score(confidence),
        evidence,
        {"paragraph_count": len(long_texts), "header_count": len(headers)},
    )
