"""
Caption extraction and script line classification.
"""

from .extractor import (
    ScriptLine,
    ScriptLineKind,
    extract_captions,
    classify_script_line,
    annotate_script,
)

__all__ = [
    "ScriptLine",
    "ScriptLineKind",
    "extract_captions",
    "classify_script_line",
    "annotate_script",
]
