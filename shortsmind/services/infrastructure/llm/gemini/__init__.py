"""
Gemini generation service client
"""

from .client import GeminiGenerationClient
from .payload import find_inline_payload, to_data_url

__all__ = ["GeminiGenerationClient", "find_inline_payload", "to_data_url"]
