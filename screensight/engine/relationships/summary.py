"""Relationship graph and summary."""

from __future__ import annotations

from collections.abc import Sequence

from screensight.engine.config import EngineConfig
from screensight.models.relationships import (
    GraphEdge,
    GraphNode,
    Relationship,
    RelationshipCategory,
    RelationshipGraph,
    RelationshipSummary,
)
from screensight.models.scene import Component


def build_graph(
    components: Sequence[Component],
    relationships: Sequence[Relationship] = (),
) -> RelationshipGraph:
    """Nodes are components. Edges are the given relationships whose endpoints are both components.

    Density is edges / possible pairs and can exceed 1 when a pair carries
    relationships of several subtypes.
    """
    nodes = [GraphNode(id=c.id, type=c.type.value, position=c.position) for c in components]
    ids = {c.id for c in components}
    edges = [
        GraphEdge(
            source=r.component_a,
            target=r.component_b,
            category=r.category,
            subtype=r.subtype.value,
            strength=r.strength,
        )
        for r in relationships
        if r.component_a in ids and r.component_b in ids
    ]
    n = len(nodes)
    possible = n * (n - 1) / 2
    return RelationshipGraph(nodes=nodes, edges=edges, density=len(edges) / possible if possible else 0.0)


def summarize(
    relationships: Sequence[Relationship], graph: RelationshipGraph, config: EngineConfig,
) -> RelationshipSummary:
    by_category = {category.value: 0 for category in RelationshipCategory}
    for r in relationships:
        by_category[r.category.value] += 1
    strong = [r for r in relationships if r.strength > config.strong_relationship_threshold]
    strong.sort(key=lambda r: r.strength, reverse=True)
    return RelationshipSummary(
        total_relationships=len(relationships),
        by_category=by_category,
        strongest=strong[: config.summary_top_count],
        density=graph.density,
    )
