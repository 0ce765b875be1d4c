"""ScreenSight — semantic layout, pattern and relationship analysis for UI screenshots."""

from screensight.engine import (
    AnalysisStageError,
    EngineConfig,
    SemanticAnalyzer,
    analyze_screen,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisStageError",
    "EngineConfig",
    "SemanticAnalyzer",
    "analyze_screen",
]
