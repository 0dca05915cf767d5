"""
Concept preview: selection state and enrichment controller.
"""

from .state import (
    SelectionPhase,
    SelectionToken,
    SelectionState,
    EnrichmentTicket,
    ImageOutcome,
)
from .controller import SelectionController

__all__ = [
    "SelectionPhase",
    "SelectionToken",
    "SelectionState",
    "EnrichmentTicket",
    "ImageOutcome",
    "SelectionController",
]
