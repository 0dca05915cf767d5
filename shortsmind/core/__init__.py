"""
Core Module - Cross-cutting concerns and shared infrastructure

Organization:
    - logging.py: Structured logging configuration and utilities
    - exceptions.py: Error taxonomy shared by every component
    - constants.py: Script markers, figure suggestions, style phrases
    - voice_catalog.py: Category -> narration voice table

Usage:
    from shortsmind.core import get_logger, ValidationError
"""

# Logging
from .logging import (
    setup_logging,
    get_logger,
    set_session_id,
    set_concept_id,
    clear_context,
    LogTimer,
)

# Exceptions
from .exceptions import (
    ShortsMindError,
    ValidationError,
    SchemaError,
    NetworkError,
    DecodeError,
    StorageError,
)

# Constants
from .constants import (
    CAPTION_MARKER,
    NARRATION_MARKER,
    FigureSuggestion,
    CATEGORY_LABELS,
    get_figure_suggestions,
    get_visual_style_description,
)

# Voice catalog
from .voice_catalog import (
    CATEGORY_VOICES,
    GEMINI_TTS_VOICES,
    get_voice_for_category,
    get_voice_description,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "set_session_id",
    "set_concept_id",
    "clear_context",
    "LogTimer",
    # Exceptions
    "ShortsMindError",
    "ValidationError",
    "SchemaError",
    "NetworkError",
    "DecodeError",
    "StorageError",
    # Constants
    "CAPTION_MARKER",
    "NARRATION_MARKER",
    "FigureSuggestion",
    "CATEGORY_LABELS",
    "get_figure_suggestions",
    "get_visual_style_description",
    # Voice catalog
    "CATEGORY_VOICES",
    "GEMINI_TTS_VOICES",
    "get_voice_for_category",
    "get_voice_description",
]
