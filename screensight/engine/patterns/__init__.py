"""UI pattern recognition: detector registry, matcher, complexity and layout-model hints."""

from screensight.engine.patterns.matcher import PatternMatcher
from screensight.engine.patterns.registry import (
    Detection,
    PatternInput,
    PatternRegistry,
    PatternSpec,
    get_registry,
    load_detectors,
    pattern,
)

__all__ = [
    "Detection",
    "PatternInput",
    "PatternMatcher",
    "PatternRegistry",
    "PatternSpec",
    "get_registry",
    "load_detectors",
    "pattern",
]
