"""Relationship mapping between components and recognized text."""

from screensight.engine.relationships.functional import FUNCTIONAL_RULES, FunctionalRule
from screensight.engine.relationships.mapper import RelationshipMapper

__all__ = ["FUNCTIONAL_RULES", "FunctionalRule", "RelationshipMapper"]
