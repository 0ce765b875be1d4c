"""Pattern registry — every detector is a standalone function registered via decorator.

Usage:
    @pattern(id="P05", name="card_grid", description="Grid of cards",
             characteristics={"uniform_size": True})
    def card_grid(scene: PatternInput, config: EngineConfig) -> Detection:
        cards = [c for c in scene.components if c.type == ComponentType.CARD]
        ...
        return Detection(confidence=0.9, evidence=["4 cards"])

Adding a new detector = creating one module under ``detectors/`` with the
decorator. The matcher picks it up without any other change.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from screensight.models.geometry import ImageDimensions
from screensight.models.layout import LayoutReport
from screensight.models.scene import Component, TextElement

if TYPE_CHECKING:
    from screensight.engine.config import EngineConfig

logger = logging.getLogger(__name__)

DETECTOR_PACKAGE = "screensight.engine.patterns.detectors"


@dataclass(frozen=True)
class PatternInput:
    """Everything a detector may look at. Detectors must not mutate it."""

    components: tuple[Component, ...] = ()
    text_elements: tuple[TextElement, ...] = ()
    layout: LayoutReport = field(default_factory=LayoutReport)
    image: ImageDimensions = field(default_factory=ImageDimensions)


@dataclass
class Detection:
    confidence: float = 0.0
    evidence: list[str] = field(default_factory=list)
    characteristics: dict[str, Any] = field(default_factory=dict)


Detector = Callable[[PatternInput, "EngineConfig"], Detection]


@dataclass
class PatternSpec:
    id: str
    name: str
    fn: Detector
    description: str = ""
    characteristics: dict[str, Any] = field(default_factory=dict)


class PatternRegistry:
    """Registry of named pattern detectors, ordered by id."""

    def __init__(self) -> None:
        self._patterns: dict[str, PatternSpec] = {}

    def register(self, spec: PatternSpec) -> None:
        if spec.name in self._patterns:
            raise ValueError(f"Duplicate pattern name: {spec.name}")
        if any(s.id == spec.id for s in self._patterns.values()):
            raise ValueError(f"Duplicate pattern ID: {spec.id}")
        self._patterns[spec.name] = spec
        logger.debug("Registered pattern %s (%s)", spec.name, spec.id)

    def get(self, name: str) -> PatternSpec:
        return self._patterns[name]

    def all(self) -> list[PatternSpec]:
        return sorted(self._patterns.values(), key=lambda s: s.id)

    def catalog(self) -> dict[str, PatternSpec]:
        """Ordered ``name -> spec`` mapping, the form the matcher iterates."""
        return {s.name: s for s in self.all()}

    def __contains__(self, name: object) -> bool:
        return name in self._patterns

    @property
    def count(self) -> int:
        return len(self._patterns)


# Module-level singleton
_registry = PatternRegistry()


def get_registry() -> PatternRegistry:
    return _registry


def pattern(
    *,
    id: str,
    name: str,
    description: str = "",
    characteristics: dict[str, Any] | None = None,
    registry: PatternRegistry | None = None,
):
    """Decorator to register a detector function."""

    def decorator(fn: Detector) -> Detector:
        spec = PatternSpec(
            id=id,
            name=name,
            fn=fn,
            description=description,
            characteristics=characteristics or {},
        )
        (registry or _registry).register(spec)
        return fn

    return decorator


def load_detectors() -> None:
    """Import every module in the detectors package so @pattern decorators fire.

    Modules are cached after the first import, so repeated calls register nothing new.
    """
    package = importlib.import_module(DETECTOR_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{DETECTOR_PACKAGE}.{module_name}")
