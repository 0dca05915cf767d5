"""
Schemas for generated concepts

Wire format uses camelCase (as returned by the recommendation model and as
stored in the library slot); Python attributes are snake_case.
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator


class ContentCategory(str, Enum):
    """Kind of short the user wants to make"""
    QUOTES = "QUOTES"
    SELF_IMPROVEMENT = "SELF_IMPROVEMENT"


class VisualMode(str, Enum):
    """Visual style for scenes and the preview background"""
    REALISTIC = "REALISTIC"
    ANIMATION = "ANIMATION"
    OIL_PAINTING = "OIL_PAINTING"
    ORIENTAL_PAINTING = "ORIENTAL_PAINTING"


class Scene(BaseModel):
    """One visual beat within a concept's script"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    scene_number: StrictInt = Field(alias="sceneNumber", gt=0)
    description: StrictStr
    prompt: StrictStr


class Concept(BaseModel):
    """A generated short-video idea. Immutable once returned."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StrictStr = Field(min_length=1)
    title: StrictStr
    hook: StrictStr
    detailed_script: StrictStr = Field(alias="detailedScript")
    visual_scenes: Tuple[Scene, ...] = Field(alias="visualScenes")
    visual_style: StrictStr = Field(alias="visualStyle")
    target_audience: StrictStr = Field(alias="targetAudience")
    personalized_reason: StrictStr = Field(alias="personalizedReason")

    @field_validator("visual_scenes")
    @classmethod
    def _order_scenes(cls, scenes: Tuple[Scene, ...]) -> Tuple[Scene, ...]:
        numbers = [scene.scene_number for scene in scenes]
        if len(set(numbers)) != len(numbers):
            raise ValueError(f"duplicate sceneNumber in {numbers}")
        return tuple(sorted(scenes, key=lambda scene: scene.scene_number))

    @property
    def image_prompt(self) -> str:
        """Prompt for the preview background: first scene, else the title."""
        if self.visual_scenes and self.visual_scenes[0].prompt.strip():
            return self.visual_scenes[0].prompt
        return self.title

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class RecommendationResponse(BaseModel):
    """A validated batch of concepts"""
    model_config = ConfigDict(frozen=True)

    concepts: List[Concept] = Field(min_length=1)

    @field_validator("concepts")
    @classmethod
    def _unique_ids(cls, concepts: List[Concept]) -> List[Concept]:
        seen = set()
        for concept in concepts:
            if concept.id in seen:
                raise ValueError(f"duplicate concept id '{concept.id}' in batch")
            seen.add(concept.id)
        return concepts


class RecommendationRequest(BaseModel):
    """User input for one recommendation batch"""
    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    category: ContentCategory
    keywords: str = ""
    visual_style: VisualMode = Field(alias="visualStyle")
    featured_figure: Optional[str] = Field(default=None, alias="featuredFigure")

    @property
    def has_keywords(self) -> bool:
        return bool(self.keywords)

    @property
    def has_figure(self) -> bool:
        return bool(self.featured_figure)


class GeneratedImage(BaseModel):
    """Preview background tied to the concept it was generated for"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str
    concept_id: str = Field(alias="conceptId")
