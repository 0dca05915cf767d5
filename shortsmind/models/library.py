"""
Schemas for the saved-concept library
"""

from enum import Enum

from pydantic import Field, StrictInt

from .concepts import Concept, ContentCategory


class SaveResult(str, Enum):
    """Outcome of LibraryStore.save; ALREADY_EXISTS is not an error"""
    SAVED = "saved"
    ALREADY_EXISTS = "already_exists"


class SavedConcept(Concept):
    """A concept the user saved, with save time (epoch ms) and category"""

    saved_at: StrictInt = Field(alias="savedAt", ge=0)
    category: ContentCategory

    @classmethod
    def from_concept(cls, concept: Concept, category: ContentCategory, saved_at: int) -> "SavedConcept":
        return cls.model_validate({
            **concept.model_dump(by_alias=True),
            "savedAt": saved_at,
            "category": ContentCategory(category),
        })

    def to_concept(self) -> Concept:
        return Concept.model_validate(self.model_dump(by_alias=True, exclude={"saved_at", "category"}))
