"""Semantic analyzer — runs layout, pattern and relationship stages in order and merges the reports."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from typing import TypeVar

from screensight.engine.config import EngineConfig
from screensight.engine.errors import AnalysisStageError
from screensight.engine.layout.analyzer import LayoutAnalyzer
from screensight.engine.patterns.matcher import PatternMatcher
from screensight.engine.relationships.mapper import RelationshipMapper
from screensight.models.geometry import ImageDimensions
from screensight.models.layout import LayoutReport
from screensight.models.patterns import PatternReport
from screensight.models.relationships import RelationshipReport
from screensight.models.scene import Component, TextElement
from screensight.models.semantic import SemanticResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

STAGES = ("layout", "patterns", "relationships")


class SemanticAnalyzer:
    """Orchestrates the three analysis stages.

    With ``strict`` (the default) the first unexpected failure is raised as an
    ``AnalysisStageError`` naming the stage. Otherwise the failed stage
    contributes its empty report, the failure lands in ``SemanticResult.errors``
    and the remaining stages still run.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        strict: bool = True,
        materialize_edges: bool = False,
    ) -> None:
        self.config = config or EngineConfig()
        self.strict = strict
        self.materialize_edges = materialize_edges
        self.layout_analyzer = LayoutAnalyzer(self.config)
        self.pattern_matcher = PatternMatcher(self.config, strict=strict)
        self.relationship_mapper = RelationshipMapper(self.config)

    def analyze(
        self,
        components: Sequence[Component],
        text_elements: Sequence[TextElement] = (),
        image: ImageDimensions | None = None,
        *,
        color_count: int = 0,
        edge_density: float = 0.0,
        palette_usage: Sequence[float] = (),
    ) -> SemanticResult:
        start = time.perf_counter()
        image = image or ImageDimensions()
        components = list(components)
        text_elements = list(text_elements)
        errors: dict[str, str] = {}
        timings: dict[str, float] = {}

        logger.info(
            "Analysis: %d components, %d text elements, %dx%d",
            len(components), len(text_elements), image.width, image.height,
        )

        layout = self._run_stage(
            "layout",
            lambda: self.layout_analyzer.analyze(components, image),
            LayoutReport,
            errors,
            timings,
        )
        patterns = self._run_stage(
            "patterns",
            lambda: self.pattern_matcher.match(
                components, text_elements, layout, image,
                color_count=color_count, edge_density=edge_density, palette_usage=palette_usage,
            ),
            PatternReport,
            errors,
            timings,
        )
        for name, message in patterns.errors.items():
            errors[f"pattern:{name}"] = message
        relationships = self._run_stage(
            "relationships",
            lambda: self.relationship_mapper.map(
                components, text_elements, layout, materialize_edges=self.materialize_edges,
            ),
            RelationshipReport,
            errors,
            timings,
        )

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Analysis complete: layout=%s, %d patterns, %d relationships in %.0fms",
            layout.layout_type.value,
            len(patterns.patterns),
            relationships.summary.total_relationships,
            total,
        )
        return SemanticResult(
            image=image,
            component_count=len(components),
            text_element_count=len(text_elements),
            layout=layout,
            patterns=patterns,
            relationships=relationships,
            errors=errors,
            processing_time_ms=total,
            stage_timings_ms=timings,
        )

    def _run_stage(
        self,
        stage: str,
        fn: Callable[[], T],
        empty: Callable[[], T],
        errors: dict[str, str],
        timings: dict[str, float],
    ) -> T:
        t0 = time.perf_counter()
        try:
            result = fn()
        except AnalysisStageError:
            raise
        except Exception as e:
            if self.strict:
                raise AnalysisStageError(stage, str(e)) from e
            errors[stage] = str(e)
            logger.warning("  %s FAILED: %s", stage, e)
            result = empty()
        elapsed = (time.perf_counter() - t0) * 1000
        timings[stage] = elapsed
        logger.debug("  %s completed in %.1fms", stage, elapsed)
        return result


def analyze_screen(
    components: Sequence[Component],
    text_elements: Sequence[TextElement] = (),
    image: ImageDimensions | None = None,
    *,
    config: EngineConfig | None = None,
    strict: bool = True,
    color_count: int = 0,
    edge_density: float = 0.0,
    palette_usage: Sequence[float] = (),
) -> SemanticResult:
    """One-shot analysis with a fresh analyzer."""
    return SemanticAnalyzer(config, strict=strict).analyze(
        components, text_elements, image,
        color_count=color_count, edge_density=edge_density, palette_usage=palette_usage,
    )
