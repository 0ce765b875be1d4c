"""P02 — Breadcrumb trail: text fragments containing a path separator."""

from __future__ import annotations

import re

from screensight.engine.config import EngineConfig
from screensight.engine.patterns.registry import Detection, PatternInput, pattern
from screensight.utils import stats

_SEPARATOR_RE = re.compile(r"[>/\\›»]")


@pattern(
    id="P02",
    name="breadcrumb",
    description="Breadcrumb navigation",
    characteristics={"alignment": "horizontal", "separators": True},
)
def breadcrumb(scene: PatternInput, config: EngineConfig) -> Detection:
    trails = [t for t in scene.text_elements if _SEPARATOR_RE.search(t.text)]
    if not trails:
        return Detection()

    evidence = ["Found text with breadcrumb separators"]
    characteristics = {"segment_count": max(len(_SEPARATOR_RE.split(t.text)) for t in trails)}
    if stats.mean([t.position.y for t in trails]) < config.breadcrumb_top_y:
        evidence.append("Positioned in header region")
        return Detection(config.breadcrumb_top_confidence, evidence, characteristics)
    return Detection(config.breadcrumb_confidence, evidence, characteristics)
