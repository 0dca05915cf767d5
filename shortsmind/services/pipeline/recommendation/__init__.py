"""
Concept recommendation
"""

from .coordinator import RecommendationCoordinator
from .schemas import get_concept_batch_schema

__all__ = ["RecommendationCoordinator", "get_concept_batch_schema"]
