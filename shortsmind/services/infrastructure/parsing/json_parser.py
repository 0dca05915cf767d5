"""
JSON parsing utilities for model replies.

The recommendation model is asked for structured JSON, but replies still
arrive wrapped in markdown fences or surrounded by prose now and then.
These helpers recover the payload, or raise SchemaError when nothing
usable is present.
"""

import json
from typing import Any, List, Optional

from shortsmind.core.exceptions import SchemaError


def strip_markdown_fences(text: str) -> str:
    """Remove ``` fence lines, keeping the fenced content."""
    normalized = text.strip()
    if not normalized.startswith("```"):
        return normalized
    lines = [line for line in normalized.split("\n") if not line.strip().startswith("```")]
    return "\n".join(lines).strip()


def extract_largest_balanced_json(text: str) -> Optional[str]:
    """Extract the largest balanced JSON object/array from text.

    Scans for balanced braces/brackets while respecting string literals and escapes.

    Args:
        text: Source text potentially containing JSON.

    Returns:
        The largest balanced JSON substring, or None if not found.
    """
    if not text:
        return None

    in_string = False
    escape = False
    stack: List[str] = []
    start_idx: Optional[int] = None
    best: Optional[str] = None

    for i, ch in enumerate(text):
        if in_string:
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == "\"":
                in_string = False
            continue

        if ch == "\"":
            in_string = True
            continue

        if ch in "{[":
            if not stack:
                start_idx = i
            stack.append(ch)
            continue

        if ch in "}]":
            if not stack:
                continue
            if (stack[-1], ch) in (("{", "}"), ("[", "]")):
                stack.pop()
                if not stack and start_idx is not None:
                    candidate = text[start_idx:i + 1]
                    start_idx = None
                    if best is None or len(candidate) > len(best):
                        best = candidate
            else:
                # Mismatched closing; reset state.
                stack.clear()
                start_idx = None

    return best


def parse_json_payload(text: Optional[str]) -> Any:
    """Parse a JSON value from a model reply.

    Tries the reply as-is (after fence stripping), then the largest balanced
    object or array inside it.

    Raises:
        SchemaError: if the reply is empty or holds no parseable JSON.
    """
    if not text or not text.strip():
        raise SchemaError("Model reply was empty")

    cleaned = strip_markdown_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError:
        pass

    candidate = extract_largest_balanced_json(cleaned)
    if candidate:
        try:
            return json.loads(candidate)
        except json.JSONDecodeError as exc:
            raise SchemaError(f"Model reply is not valid JSON: {exc}") from exc

    raise SchemaError("Model reply contains no JSON payload")
