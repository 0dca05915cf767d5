import pytest

from shortsmind.core.voice_catalog import (
    CATEGORY_VOICES,
    GEMINI_TTS_VOICES,
    get_voice_description,
    get_voice_for_category,
)
from shortsmind.models import ContentCategory


def test_category_voice_table():
    assert get_voice_for_category(ContentCategory.QUOTES) == "Kore"
    assert get_voice_for_category(ContentCategory.SELF_IMPROVEMENT) == "Puck"


def test_category_voice_accepts_raw_value():
    assert get_voice_for_category("SELF_IMPROVEMENT") == "Puck"


def test_unknown_category_rejected():
    with pytest.raises(ValueError):
        get_voice_for_category("POETRY")


def test_tables_are_immutable():
    with pytest.raises(TypeError):
        CATEGORY_VOICES[ContentCategory.QUOTES] = "Puck"
    with pytest.raises(TypeError):
        GEMINI_TTS_VOICES["Kore"] = "Soft"


def test_every_category_voice_is_described():
    for voice in CATEGORY_VOICES.values():
        assert voice in GEMINI_TTS_VOICES


def test_voice_description_falls_back_to_id():
    assert get_voice_description("Kore") == "Firm"
    assert get_voice_description("Unknown") == "Unknown"
