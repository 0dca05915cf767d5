"""
Prompting engine - prompt templates for the generation services.
"""

from .prompts import PromptTemplate, get_prompt, format_prompt

__all__ = ["PromptTemplate", "get_prompt", "format_prompt"]
