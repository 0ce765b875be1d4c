"""Design-system compliance — how consistently a screen reuses a small vocabulary.

Four sub-scores in [0, 1], combined as a weighted mean:

* colour: share of the image covered by the top palette colours, boosted ×1.2;
* spacing: share of close center distances (< 200 px, 10 px buckets) that fall
  in the three most common buckets;
* typography: ``1 − (distinct sizes − 3) / text count`` over 2 px size buckets;
* component: +0.3 for repeated buttons, +0.3 for repeated inputs, +0.4 for
  three or more cards.

Too few elements to judge gives the neutral 0.5. The palette comes from
upstream pixel analysis, like the colour count used for complexity.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

from screensight.engine.config import EngineConfig
from screensight.engine.spatial import PairwiseIndex
from screensight.models.patterns import ComplianceScore, DesignSystemCompliance
from screensight.models.scene import Component, ComponentType, TextElement
from screensight.utils import stats


def _bucket(value: float, size: int) -> int:
    return int(math.floor(value / size + 0.5)) * size


def design_system_compliance(
    components: Sequence[Component],
    text_elements: Sequence[TextElement],
    config: EngineConfig,
    *,
    palette_usage: Sequence[float] = (),
) -> DesignSystemCompliance:
    color = color_consistency(palette_usage, config)
    spacing = spacing_consistency(components, config)
    typography = typography_consistency(text_elements, config)
    component = component_consistency(components, config)

    weighted = (
        (color.score, config.compliance_color_weight),
        (spacing.score, config.compliance_spacing_weight),
        (typography.score, config.compliance_typography_weight),
        (component.score, config.compliance_component_weight),
    )
    total_weight = sum(w for _, w in weighted)
    overall = sum(s * w for s, w in weighted) / total_weight if total_weight > 0 else 0.0
    return DesignSystemCompliance(
        color_consistency=color,
        spacing_consistency=spacing,
        typography_consistency=typography,
        component_consistency=component,
        overall_score=stats.score(overall),
    )


def color_consistency(palette_usage: Sequence[float], config: EngineConfig) -> ComplianceScore:
    """``palette_usage`` holds the percentage of the image each palette colour covers, most used first."""
    if len(palette_usage) < config.compliance_min_elements:
        return ComplianceScore(score=config.compliance_neutral_score, notes=["Limited color palette"])

    top_usage = sum(palette_usage[: config.compliance_palette_top])
    return ComplianceScore(
        score=stats.score(top_usage / 100 * config.compliance_palette_boost),
        notes=[
            f"Top {config.compliance_palette_top} colors account for {round(top_usage)}% of image",
            f"{len(palette_usage)} total colors detected",
        ],
    )


def spacing_consistency(components: Sequence[Component], config: EngineConfig) -> ComplianceScore:
    if len(components) < config.compliance_min_elements:
        return ComplianceScore(
            score=config.compliance_neutral_score, notes=["Insufficient components for analysis"],
        )

    index = PairwiseIndex([c.position for c in components])
    spacings = [
        _bucket(index.distance(i, j), config.compliance_spacing_bucket)
        for i, j in index.pairs()
        if index.distance(i, j) < config.compliance_spacing_max_distance
    ]
    if not spacings:
        return ComplianceScore(
            score=config.compliance_missing_score, notes=["No close component relationships found"],
        )

    ranked = sorted(Counter(spacings).items(), key=lambda kv: (-kv[1], kv[0]))
    top = ranked[: config.compliance_spacing_top]
    share = sum(count for _, count in top) / len(spacings)
    return ComplianceScore(
        score=stats.score(share),
        notes=[
            "Top spacing values: " + ", ".join(f"{value}px" for value, _ in top),
            f"{round(share * 100)}% of spacings use consistent values",
        ],
    )


def typography_consistency(text_elements: Sequence[TextElement], config: EngineConfig) -> ComplianceScore:
    if len(text_elements) < config.compliance_min_elements:
        return ComplianceScore(score=config.compliance_neutral_score, notes=["Limited text elements"])

    sizes = [
        t.font_info.estimated_size
        for t in text_elements
        if t.font_info is not None and t.font_info.estimated_size
    ]
    if not sizes:
        return ComplianceScore(
            score=config.compliance_missing_score, notes=["No font size information available"],
        )

    distinct = sorted({_bucket(s, config.compliance_font_bucket) for s in sizes}, reverse=True)
    # Up to compliance_font_free_sizes distinct sizes cost nothing; fewer never lift the score past 1.
    score = 1 - (len(distinct) - config.compliance_font_free_sizes) / len(text_elements)
    return ComplianceScore(
        score=stats.score(score),
        notes=[
            f"{len(distinct)} distinct font sizes detected",
            "Font sizes: " + ", ".join(f"{size}px" for size in distinct),
        ],
    )


def component_consistency(components: Sequence[Component], config: EngineConfig) -> ComplianceScore:
    if len(components) < config.compliance_min_elements:
        return ComplianceScore(
            score=config.compliance_neutral_score, notes=["Limited components for analysis"],
        )

    counts = Counter(c.type for c in components)
    buttons = counts[ComponentType.BUTTON]
    inputs = counts[ComponentType.INPUT]
    cards = counts[ComponentType.CARD]

    score = 0.0
    notes: list[str] = []
    if buttons >= config.compliance_button_min:
        score += config.compliance_button_weight
        notes.append(f"{buttons} buttons with consistent styling")
    if inputs >= config.compliance_input_min:
        score += config.compliance_input_weight
        notes.append(f"{inputs} input fields")
    if cards >= config.compliance_card_min:
        score += config.compliance_card_weight
        notes.append(f"{cards} cards in consistent layout")

    return ComplianceScore(score=stats.score(score), notes=notes or ["Mixed component types detected"])
