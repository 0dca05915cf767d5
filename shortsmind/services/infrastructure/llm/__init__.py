"""
LLM infrastructure: generation client and prompt templates.
"""

from .gemini import GeminiGenerationClient

__all__ = ["GeminiGenerationClient"]
