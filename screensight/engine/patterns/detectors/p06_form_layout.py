"""P06 — Form: several inputs, labels for at least half of them, and a submit button."""

from __future__ import annotations

import re

from screensight.engine.config import EngineConfig
from screensight.engine.patterns.registry import Detection, PatternInput, pattern
from screensight.models.scene import ComponentType
from screensight.utils import stats

SUBMIT_RE = re.compile(r"submit|send|save|register|login|sign", re.IGNORECASE)


@pattern(
    id="P06",
    name="form_layout",
    description="Form with inputs and labels",
    characteristics={"labels": True, "submit_button": True, "vertical_flow": True},
)
def form_layout(scene: PatternInput, config: EngineConfig) -> Detection:
    inputs = [c for c in scene.components if c.type == ComponentType.INPUT]
    if len(inputs) < config.form_min_inputs:
        return Detection()

    labels = [t for t in scene.text_elements if t.is_label]
    buttons = [c for c in scene.components if c.type == ComponentType.BUTTON]

    confidence = config.form_input_weight
    evidence = [f"{len(inputs)} input fields detected"]
    if len(labels) >= len(inputs) * config.form_label_coverage:
        evidence.append(f"{len(labels)} labels for form fields")
        confidence += config.form_label_weight
    has_submit = any(SUBMIT_RE.search(b.text) for b in buttons)
    if has_submit:
        evidence.append("Submit button detected")
        confidence += config.form_submit_weight

    return Detection(
        stats.score(confidence),
        evidence,
        {"input_count": len(inputs), "label_count": len(labels), "has_submit": has_submit},
    )
