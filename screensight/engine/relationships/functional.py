"""Functional relationships — what a pair of components does together.

Three sources, merged and deduplicated per (pair, subtype) with the stronger
record kept:

* the rule table ``FUNCTIONAL_RULES``, scored
  ``0.4 + proximity bonus + 0.3 · text score`` and kept above
  ``functional_relationship_threshold``;
* the form detector (input→button, label→input, input↔input), scored by
  distance alone and not threshold-filtered;
* the navigation detector (greedy aligned groups of navigation/button components).
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from screensight.engine.config import EngineConfig
from screensight.engine.spatial import (
    PairwiseIndex,
    center_distance,
    horizontally_aligned,
    vertically_aligned,
)
from screensight.models.relationships import FunctionalSubtype, Relationship, RelationshipCategory
from screensight.models.scene import Component, ComponentType, TextElement
from screensight.utils import stats

WILDCARD = "*"

SUBMIT_RE = re.compile(r"submit|send|save|register|login|sign|continue", re.IGNORECASE)
NAVIGATE_RE = re.compile(r"\b(?:home|about|contact|menu|back|next|more|view|go|open)\b", re.IGNORECASE)


@dataclass(frozen=True)
class FunctionalRule:
    name: FunctionalSubtype
    primary: ComponentType | str
    secondary: ComponentType | str
    keywords: re.Pattern[str] | None = None

    def matches(self, a: Component, b: Component) -> bool:
        return _type_matches(self.primary, a) and _type_matches(self.secondary, b)

    def exact_match(self, a: Component, b: Component) -> bool:
        """Both types named outright; a wildcard side never counts."""
        return a.type == self.primary and b.type == self.secondary


def _type_matches(wanted: ComponentType | str, comp: Component) -> bool:
    return wanted == WILDCARD or comp.type == wanted


FUNCTIONAL_RULES: tuple[FunctionalRule, ...] = (
    # form
    FunctionalRule(FunctionalSubtype.FORM_SUBMISSION, ComponentType.INPUT, ComponentType.BUTTON, SUBMIT_RE),
    FunctionalRule(FunctionalSubtype.FORM_GROUP, ComponentType.INPUT, ComponentType.INPUT),
    FunctionalRule(FunctionalSubtype.FORM_LABELING, ComponentType.LABEL, ComponentType.INPUT),
    # navigation
    FunctionalRule(FunctionalSubtype.NAV_GROUP, ComponentType.NAVIGATION, ComponentType.NAVIGATION, NAVIGATE_RE),
    FunctionalRule(FunctionalSubtype.NAV_ACTION, ComponentType.BUTTON, ComponentType.NAVIGATION, NAVIGATE_RE),
    # content
    FunctionalRule(FunctionalSubtype.CONTENT_HIERARCHY, ComponentType.HEADER, ComponentType.PARAGRAPH),
    FunctionalRule(FunctionalSubtype.MEDIA_CAPTION, ComponentType.IMAGE, ComponentType.TEXT),
    FunctionalRule(FunctionalSubtype.CARD_GROUP, ComponentType.CARD, ComponentType.CARD),
    # layout
    FunctionalRule(FunctionalSubtype.CONTAINMENT, ComponentType.CONTAINER, WILDCARD),
    FunctionalRule(FunctionalSubtype.LAYOUT_COMPLEMENT, ComponentType.SIDEBAR, ComponentType.MAIN),
)

_NAV_TYPES = {ComponentType.NAVIGATION, ComponentType.BUTTON}


def text_score(rule: FunctionalRule, a: Component, b: Component) -> float:
    """1.0 when either component's text carries one of the rule's keywords, else 0."""
    if rule.keywords is None:
        return 0.0
    return 1.0 if rule.keywords.search(a.text) or rule.keywords.search(b.text) else 0.0


def rule_confidence(rule: FunctionalRule, a: Component, b: Component, d: float, config: EngineConfig) -> float:
    confidence = config.functional_type_weight if rule.exact_match(a, b) else 0.0
    if d < config.functional_near_distance:
        confidence += config.functional_near_bonus
    elif d < config.functional_mid_distance:
        confidence += config.functional_mid_bonus
    confidence += text_score(rule, a, b) * config.functional_text_weight
    return stats.score(confidence)


class _Collector:
    """Keeps one relationship per (unordered pair, subtype), the strongest seen."""

    def __init__(self, order: dict[str, int]) -> None:
        self._order = order
        self._best: dict[tuple[str, str, FunctionalSubtype], Relationship] = {}

    def add(
        self,
        first: str,
        second: str,
        subtype: FunctionalSubtype,
        strength: float,
        evidence: list[str],
        distance: float | None = None,
    ) -> None:
        if first == second:
            return
        a, b = sorted((first, second), key=lambda e: self._order.get(e, len(self._order)))
        key = (a, b, subtype)
        current = self._best.get(key)
        strength = stats.score(strength)
        if current is not None and current.strength >= strength:
            return
        self._best[key] = Relationship(
            component_a=a,
            component_b=b,
            category=RelationshipCategory.FUNCTIONAL,
            subtype=subtype,
            strength=strength,
            evidence=evidence,
            distance=None if distance is None else round(distance, 3),
        )

    def results(self) -> list[Relationship]:
        return sorted(self._best.values(), key=lambda r: r.strength, reverse=True)


def functional_relationships(
    components: Sequence[Component],
    text_elements: Sequence[TextElement],
    index: PairwiseIndex,
    config: EngineConfig,
    rules: Iterable[FunctionalRule] = FUNCTIONAL_RULES,
) -> list[Relationship]:
    order = {c.id: i for i, c in enumerate(components)}
    # Label fragments sort after every component
    for k, t in enumerate(text_elements):
        order.setdefault(f"label_{t.id}", len(components) + k)
    collector = _Collector(order)

    _rule_matches(components, index, config, tuple(rules), collector)
    _form_relationships(components, text_elements, index, config, collector)
    _navigation_relationships(components, index, config, collector)
    return collector.results()


def _rule_matches(
    components: Sequence[Component],
    index: PairwiseIndex,
    config: EngineConfig,
    rules: tuple[FunctionalRule, ...],
    collector: _Collector,
) -> None:
    for i, j in index.pairs():
        d = index.distance(i, j)
        for first, second in ((components[i], components[j]), (components[j], components[i])):
            for rule in rules:
                if not rule.matches(first, second):
                    continue
                confidence = rule_confidence(rule, first, second, d, config)
                if confidence > config.functional_relationship_threshold:
                    collector.add(
                        first.id, second.id, rule.name, confidence,
                        [f"Components match {rule.name.value} pattern"], d,
                    )


def _form_relationships(
    components: Sequence[Component],
    text_elements: Sequence[TextElement],
    index: PairwiseIndex,
    config: EngineConfig,
    collector: _Collector,
) -> None:
    inputs = [i for i, c in enumerate(components) if c.type == ComponentType.INPUT]
    buttons = [i for i, c in enumerate(components) if c.type == ComponentType.BUTTON]

    for i in inputs:
        for j in buttons:
            d = index.distance(i, j)
            if d >= config.submit_max_distance:
                continue
            is_submit = bool(SUBMIT_RE.search(components[j].text))
            base = config.submit_confidence if is_submit else config.action_confidence
            collector.add(
                components[i].id, components[j].id, FunctionalSubtype.FORM_SUBMISSION,
                base - d / config.submit_distance_scale,
                [f"Input field linked to {'submit' if is_submit else 'action'} button"], d,
            )

    for label in (t for t in text_elements if t.is_label):
        for i in inputs:
            d = center_distance(label.position, components[i].position)
            if d < config.label_max_distance:
                collector.add(
                    f"label_{label.id}", components[i].id, FunctionalSubtype.FORM_LABELING,
                    config.label_base_confidence - d / config.label_distance_scale,
                    ["Label positioned near input field"], d,
                )

    for n, i in enumerate(inputs):
        for j in inputs[n + 1:]:
            d = index.distance(i, j)
            if d < config.form_group_max_distance:
                collector.add(
                    components[i].id, components[j].id, FunctionalSubtype.FORM_GROUP,
                    config.form_group_base_confidence - d / config.form_group_distance_scale,
                    ["Adjacent input fields in form"], d,
                )


def navigation_groups(
    components: Sequence[Component], index: PairwiseIndex, config: EngineConfig,
) -> list[list[int]]:
    """Greedy groups of navigation/button indices near and aligned with their seed."""
    nav = [i for i, c in enumerate(components) if c.type in _NAV_TYPES]
    tol = config.alignment_tolerance
    used: set[int] = set()
    groups: list[list[int]] = []
    for seed in nav:
        if seed in used:
            continue
        used.add(seed)
        group = [seed]
        seed_pos = components[seed].position
        for other in nav:
            if other in used:
                continue
            pos = components[other].position
            aligned = horizontally_aligned(seed_pos, pos, tol) or vertically_aligned(seed_pos, pos, tol)
            if index.distance(seed, other) < config.nav_group_max_distance and aligned:
                group.append(other)
                used.add(other)
        if len(group) > 1:
            groups.append(group)
    return groups


def _navigation_relationships(
    components: Sequence[Component],
    index: PairwiseIndex,
    config: EngineConfig,
    collector: _Collector,
) -> None:
    for group in navigation_groups(components, index, config):
        for n, i in enumerate(group):
            for j in group[n + 1:]:
                collector.add(
                    components[i].id, components[j].id, FunctionalSubtype.NAVIGATION_GROUP,
                    config.nav_group_confidence, ["Part of navigation group"], index.distance(i, j),
                )
