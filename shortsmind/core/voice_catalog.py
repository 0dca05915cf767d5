"""
Central voice catalog for hook narration previews.

This module is the single source of truth for:
- Content category -> Gemini TTS prebuilt voice
- Voice descriptions shown next to the preview button
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from shortsmind.models.concepts import ContentCategory

# Gemini TTS prebuilt voices used by the preview (subset of the full catalog)
GEMINI_TTS_VOICES: Mapping[str, str] = MappingProxyType({
    "Kore": "Firm",
    "Puck": "Upbeat",
    "Charon": "Informative",
    "Zephyr": "Bright",
    "Sulafat": "Warm",
})

# One fixed narration voice per category
CATEGORY_VOICES: Mapping[ContentCategory, str] = MappingProxyType({
    ContentCategory.QUOTES: "Kore",
    ContentCategory.SELF_IMPROVEMENT: "Puck",
})


def get_voice_for_category(category: ContentCategory) -> str:
    """Return the narration voice for a category; raises KeyError for unknown ones."""
    return CATEGORY_VOICES[ContentCategory(category)]


def get_voice_description(voice_id: str) -> str:
    """Return a short tone description for a voice, or the id itself."""
    return GEMINI_TTS_VOICES.get(voice_id, voice_id)

