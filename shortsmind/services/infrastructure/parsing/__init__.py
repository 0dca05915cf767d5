"""
Parsing Module

Provides utilities for recovering JSON from model replies.

Usage:
    from shortsmind.services.infrastructure.parsing import parse_json_payload
"""

from .json_parser import (
    parse_json_payload,
    extract_largest_balanced_json,
    strip_markdown_fences,
)

__all__ = [
    "parse_json_payload",
    "extract_largest_balanced_json",
    "strip_markdown_fences",
]
