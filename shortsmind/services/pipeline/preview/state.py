"""
Selection state for the concept preview.

The state is an immutable value: controller operations take a state and
return a new one. Every async enrichment result carries the SelectionToken
of the selection that dispatched it, and is applied only while that token
is still current.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import NamedTuple, Optional

from shortsmind.models import Concept, GeneratedImage, VisualMode


class SelectionPhase(str, Enum):
    IDLE = "idle"
    SELECTING = "selecting"  # image request in flight
    PREVIEWING = "previewing"  # image resolved or failed


class SelectionToken(NamedTuple):
    """Identity of one selection episode."""
    episode: int
    concept_id: Optional[str]


@dataclass(frozen=True)
class SelectionState:
    phase: SelectionPhase = SelectionPhase.IDLE
    concept: Optional[Concept] = None
    episode: int = 0
    preview_image: Optional[GeneratedImage] = None
    image_loading: bool = False
    image_error: Optional[str] = None

    @property
    def token(self) -> SelectionToken:
        return SelectionToken(self.episode, self.concept.id if self.concept else None)

    @property
    def has_selection(self) -> bool:
        return self.concept is not None

    def evolve(self, **changes) -> "SelectionState":
        return replace(self, **changes)


@dataclass(frozen=True)
class EnrichmentTicket:
    """Work order for the preview image of one selection."""
    token: SelectionToken
    prompt: str
    visual_style: VisualMode


@dataclass(frozen=True)
class ImageOutcome:
    """Result of an image request; image is None when it failed."""
    token: SelectionToken
    image: Optional[GeneratedImage] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.image is not None
