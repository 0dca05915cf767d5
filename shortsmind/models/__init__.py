"""
Pydantic models for concepts, requests and the saved library
"""

from .concepts import (
    ContentCategory,
    VisualMode,
    Scene,
    Concept,
    RecommendationRequest,
    RecommendationResponse,
    GeneratedImage,
)
from .library import SaveResult, SavedConcept

__all__ = [
    "ContentCategory",
    "VisualMode",
    "Scene",
    "Concept",
    "RecommendationRequest",
    "RecommendationResponse",
    "GeneratedImage",
    "SaveResult",
    "SavedConcept",
]
