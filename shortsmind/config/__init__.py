"""
Application configuration and settings
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from .models import (
    ModelConfig,
    GenerationModels,
    DEFAULT_GENERATION_MODELS,
    DEFAULT_TEXT_MODEL,
    DEFAULT_IMAGE_MODEL,
    DEFAULT_TTS_MODEL,
    load_generation_models,
)
from .paths import DEFAULT_DATA_DIR, get_data_dir
from .constants import PREVIEW_SAMPLE_RATE, PREVIEW_CHANNELS, LIBRARY_SLOT

__all__ = [
    "ModelConfig",
    "GenerationModels",
    "DEFAULT_GENERATION_MODELS",
    "DEFAULT_TEXT_MODEL",
    "DEFAULT_IMAGE_MODEL",
    "DEFAULT_TTS_MODEL",
    "load_generation_models",
    "DEFAULT_DATA_DIR",
    "get_data_dir",
    "PREVIEW_SAMPLE_RATE",
    "PREVIEW_CHANNELS",
    "LIBRARY_SLOT",
]
