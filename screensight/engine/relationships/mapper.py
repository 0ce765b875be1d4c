"""Relationship mapper — runs every relationship analysis over one screen."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from screensight.engine.config import EngineConfig
from screensight.engine.relationships.flows import interaction_flows
from screensight.engine.relationships.functional import functional_relationships
from screensight.engine.relationships.grouping import component_groups
from screensight.engine.relationships.hierarchical import hierarchical_relationships, max_depth
from screensight.engine.relationships.layout import layout_relationships
from screensight.engine.relationships.semantic import semantic_relationships
from screensight.engine.relationships.spatial import spatial_patterns, spatial_relationships
from screensight.engine.relationships.summary import build_graph, summarize
from screensight.engine.spatial import PairwiseIndex
from screensight.models.layout import LayoutReport
from screensight.models.relationships import RelationshipReport
from screensight.models.scene import Component, TextElement

logger = logging.getLogger(__name__)


class RelationshipMapper:
    """Maps spatial, functional, hierarchical, semantic and layout relationships.

    Layout relationships need a LayoutReport and are empty without one. Graph
    edges are only materialised on request, so graph density is 0 by default.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def map(
        self,
        components: Sequence[Component],
        text_elements: Sequence[TextElement] = (),
        layout: LayoutReport | None = None,
        *,
        materialize_edges: bool = False,
    ) -> RelationshipReport:
        cfg = self.config
        components = list(components)
        text_elements = list(text_elements)
        index = PairwiseIndex([c.position for c in components])

        spatial = spatial_relationships(components, index, cfg)
        functional = functional_relationships(components, text_elements, index, cfg)
        hierarchical = hierarchical_relationships(components, index, cfg)
        semantic = semantic_relationships(components, text_elements, cfg)
        layout_rels = layout_relationships(components, layout, cfg) if layout is not None else []

        everything = [*spatial, *functional, *hierarchical, *semantic, *layout_rels]
        graph = build_graph(components, everything if materialize_edges else ())

        logger.debug(
            "Relationships: %d spatial, %d functional, %d hierarchical, %d semantic, %d layout",
            len(spatial), len(functional), len(hierarchical), len(semantic), len(layout_rels),
        )
        return RelationshipReport(
            spatial=spatial,
            functional=functional,
            hierarchical=hierarchical,
            semantic=semantic,
            layout=layout_rels,
            spatial_patterns=spatial_patterns(spatial),
            max_hierarchy_depth=max_depth(hierarchical),
            groups=component_groups(components, index, cfg),
            flows=interaction_flows(components, index, cfg),
            graph=graph,
            summary=summarize(everything, graph, cfg),
        )
