"""
Model Configuration for Generation Steps

Each generation step (recommendation, preview image, hook narration) has its
own model configuration so models can be swapped without touching the
services.

Environment overrides:
    SHORTSMIND_TEXT_MODEL  : recommendation model (default gemini-2.5-flash)
    SHORTSMIND_IMAGE_MODEL : preview image model (default gemini-2.5-flash-image)
    SHORTSMIND_TTS_MODEL   : narration model (default gemini-2.5-flash-preview-tts)
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ModelConfig:
    """Configuration for a single generation model"""
    model_name: str
    temperature: float = 1.0
    description: str = ""


@dataclass(frozen=True)
class GenerationModels:
    """Models used by each generation step"""
    recommendation: ModelConfig
    image: ModelConfig
    speech: ModelConfig


DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"
DEFAULT_TTS_MODEL = "gemini-2.5-flash-preview-tts"


def load_generation_models() -> GenerationModels:
    """Build the model table from the environment."""
    return GenerationModels(
        recommendation=ModelConfig(
            model_name=os.getenv("SHORTSMIND_TEXT_MODEL", DEFAULT_TEXT_MODEL),
            temperature=0.9,
            description="Concept batch generation (structured JSON)",
        ),
        image=ModelConfig(
            model_name=os.getenv("SHORTSMIND_IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
            description="Vertical preview background",
        ),
        speech=ModelConfig(
            model_name=os.getenv("SHORTSMIND_TTS_MODEL", DEFAULT_TTS_MODEL),
            description="Hook narration (PCM16 mono 24 kHz)",
        ),
    )


DEFAULT_GENERATION_MODELS = load_generation_models()
