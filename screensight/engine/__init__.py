"""ScreenSight semantic engine."""

from screensight.engine.analyzer import SemanticAnalyzer, analyze_screen
from screensight.engine.config import EngineConfig
from screensight.engine.errors import AnalysisStageError
from screensight.engine.layout import LayoutAnalyzer
from screensight.engine.patterns import PatternMatcher, pattern
from screensight.engine.relationships import RelationshipMapper

__all__ = [
    "AnalysisStageError",
    "EngineConfig",
    "LayoutAnalyzer",
    "PatternMatcher",
    "RelationshipMapper",
    "SemanticAnalyzer",
    "analyze_screen",
    "pattern",
]
