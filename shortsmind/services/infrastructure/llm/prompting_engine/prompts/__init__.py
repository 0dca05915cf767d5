"""
Prompt Registry - Clean exports and registry pattern.

Structure:
    prompts/
    ├── __init__.py        # This file - exports and registry
    ├── base.py            # PromptTemplate class
    └── recommendation.py  # Concept batch and preview image prompts

Usage:
    from shortsmind.services.infrastructure.llm.prompting_engine.prompts import format_prompt

    prompt = format_prompt("PREVIEW_IMAGE", prompt="...", style_description="...")
"""

from typing import Dict

from .base import PromptTemplate

from .recommendation import (
    RECOMMENDATION_SYSTEM,
    RECOMMEND_CONCEPTS,
    CATEGORY_GUIDANCE,
    PREVIEW_IMAGE,
)


_REGISTRY: Dict[str, PromptTemplate] = {
    "RECOMMENDATION_SYSTEM": RECOMMENDATION_SYSTEM,
    "RECOMMEND_CONCEPTS": RECOMMEND_CONCEPTS,
    "PREVIEW_IMAGE": PREVIEW_IMAGE,
}


def get_prompt(name: str) -> PromptTemplate:
    """Get a prompt template by name."""
    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY.keys()))
        raise KeyError(f"Unknown prompt: '{name}'. Available: {available}")
    return _REGISTRY[name]


def format_prompt(name: str, **kwargs) -> str:
    """Get and format a prompt in one call."""
    return get_prompt(name).format(**kwargs)


__all__ = [
    "PromptTemplate",
    "get_prompt",
    "format_prompt",
    "RECOMMENDATION_SYSTEM",
    "RECOMMEND_CONCEPTS",
    "CATEGORY_GUIDANCE",
    "PREVIEW_IMAGE",
]
