"""Inline payload helpers for Gemini responses."""

from __future__ import annotations

import base64
import binascii
from typing import Any, Optional, Tuple

from shortsmind.core.exceptions import DecodeError


def find_inline_payload(response: Any) -> Optional[Tuple[bytes, Optional[str]]]:
    """Return (bytes, mime_type) of the first inline data part, or None."""
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return None

    for candidate in candidates:
        content = getattr(candidate, "content", None)
        parts = getattr(content, "parts", None) if content else None
        if not parts:
            continue
        for part in parts:
            inline_data = getattr(part, "inline_data", None)
            if not inline_data:
                continue
            mime_type = getattr(inline_data, "mime_type", None)
            data = getattr(inline_data, "data", None)
            if isinstance(data, bytes) and data:
                return data, mime_type
            if isinstance(data, str) and data:
                try:
                    return base64.b64decode(data, validate=True), mime_type
                except (binascii.Error, ValueError) as exc:
                    raise DecodeError("Unable to decode base64 inline payload") from exc

    return None


def to_data_url(data: bytes, mime_type: Optional[str]) -> str:
    """Encode raw bytes as a data: URL."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type or 'image/png'};base64,{encoded}"
