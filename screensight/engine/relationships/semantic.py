"""Semantic relationships between recognized text and components.

Text endpoints are prefixed (``header_<id>``, ``text_<id>``) so they never
collide with component ids.
"""

from __future__ import annotations

from collections.abc import Sequence

from screensight.engine.config import EngineConfig
from screensight.engine.spatial import PairwiseIndex
from screensight.models.relationships import Relationship, RelationshipCategory, SemanticSubtype
from screensight.models.scene import Component, ComponentType, TextElement, TextType
from screensight.utils import stats

_CONTENT_TYPES = {ComponentType.PARAGRAPH, ComponentType.TEXT, ComponentType.CARD}


def semantic_relationships(
    components: Sequence[Component], text_elements: Sequence[TextElement], config: EngineConfig,
) -> list[Relationship]:
    n = len(components)
    # One index over both kinds; text k sits at n + k.
    index = PairwiseIndex([c.position for c in components] + [t.position for t in text_elements])
    found: list[Relationship] = []

    for k, header in enumerate(text_elements):
        if header.type != TextType.HEADER:
            continue
        for i in index.within(n + k, config.header_content_max_distance):
            if i >= n or components[i].type not in _CONTENT_TYPES:
                continue
            content = components[i]
            if header.position.y >= content.position.y:
                continue
            d = index.distance(n + k, i)
            found.append(Relationship(
                component_a=f"header_{header.id}",
                component_b=content.id,
                category=RelationshipCategory.SEMANTIC,
                subtype=SemanticSubtype.HEADER_CONTENT,
                strength=stats.score(
                    config.header_content_base_confidence - d / config.header_content_distance_scale
                ),
                evidence=["Header positioned above content"],
                distance=round(d, 3),
            ))

    captions = {
        n + k for k, t in enumerate(text_elements)
        if config.caption_min_length < len(t.text) < config.caption_max_length
    }
    for i, image in enumerate(components):
        if image.type != ComponentType.IMAGE:
            continue
        for k in index.within(i, config.caption_max_distance):
            if k not in captions:
                continue
            d = index.distance(i, k)
            found.append(Relationship(
                component_a=image.id,
                component_b=f"text_{text_elements[k - n].id}",
                category=RelationshipCategory.SEMANTIC,
                subtype=SemanticSubtype.IMAGE_CAPTION,
                strength=stats.score(config.caption_base_confidence - d / config.caption_distance_scale),
                evidence=["Text positioned near image, likely caption"],
                distance=round(d, 3),
            ))

    return sorted(found, key=lambda r: r.strength, reverse=True)
