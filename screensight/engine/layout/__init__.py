"""Layout analyses: geometry grouping, alignment, spacing and their combination."""

from screensight.engine.layout.alignment import AlignmentAnalyzer
from screensight.engine.layout.analyzer import LayoutAnalyzer
from screensight.engine.layout.grouping import GeometryGrouper
from screensight.engine.layout.spacing import SpacingAnalyzer

__all__ = ["AlignmentAnalyzer", "GeometryGrouper", "LayoutAnalyzer", "SpacingAnalyzer"]
