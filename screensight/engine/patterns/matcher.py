"""Pattern matcher — runs every registered detector over one screen."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from screensight.engine.config import EngineConfig
from screensight.engine.errors import AnalysisStageError
from screensight.engine.patterns.advanced import detect_advanced_layouts
from screensight.engine.patterns.compliance import design_system_compliance
from screensight.engine.patterns.complexity import layout_complexity
from screensight.engine.patterns.registry import (
    PatternInput,
    PatternRegistry,
    PatternSpec,
    get_registry,
    load_detectors,
)
from screensight.models.geometry import ImageDimensions
from screensight.models.layout import LayoutReport
from screensight.models.patterns import Pattern, PatternReport
from screensight.models.scene import Component, TextElement
from screensight.utils import stats

logger = logging.getLogger(__name__)


class PatternMatcher:
    """Scores every catalog pattern and keeps those above ``min_pattern_confidence``.

    The catalog is resolved once, at construction. A detector that raises is
    recorded in ``PatternReport.errors`` and the rest of the catalog still runs,
    unless ``strict`` is set.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        registry: PatternRegistry | None = None,
        strict: bool = False,
    ) -> None:
        self.config = config or EngineConfig()
        self.strict = strict
        if registry is None:
            load_detectors()
            registry = get_registry()
        self.catalog: dict[str, PatternSpec] = registry.catalog()

    def match(
        self,
        components: Sequence[Component],
        text_elements: Sequence[TextElement],
        layout: LayoutReport,
        image: ImageDimensions | None = None,
        *,
        color_count: int = 0,
        edge_density: float = 0.0,
        palette_usage: Sequence[float] = (),
    ) -> PatternReport:
        scene = PatternInput(
            components=tuple(components),
            text_elements=tuple(text_elements),
            layout=layout,
            image=image or ImageDimensions(),
        )

        accepted: list[Pattern] = []
        errors: dict[str, str] = {}
        for name, spec in self.catalog.items():
            try:
                detection = spec.fn(scene, self.config)
            except Exception as e:
                if self.strict:
                    raise AnalysisStageError(f"pattern:{name}", str(e)) from e
                errors[name] = str(e)
                logger.warning("  pattern %s FAILED: %s", name, e)
                continue

            confidence = stats.score(detection.confidence)
            if confidence > self.config.min_pattern_confidence:
                accepted.append(Pattern(
                    name=name,
                    description=spec.description,
                    confidence=confidence,
                    evidence=tuple(detection.evidence),
                    characteristics={**spec.characteristics, **detection.characteristics},
                ))

        logger.debug("Patterns: %d/%d accepted", len(accepted), len(self.catalog))
        return PatternReport(
            patterns=accepted,
            pattern_confidence=stats.mean([p.confidence for p in accepted]),
            complexity=layout_complexity(
                len(scene.components),
                layout.layout_type,
                self.config,
                color_count=color_count,
                edge_density=edge_density,
            ),
            design_system_compliance=design_system_compliance(
                scene.components, scene.text_elements, self.config, palette_usage=palette_usage,
            ),
            advanced_layouts=detect_advanced_layouts(scene.components, layout, self.config),
            errors=errors,
        )
