"""
Caption extraction from generated scripts.

Scripts carry one directive per line; on-screen caption lines are tagged
with the caption marker, spoken lines with the narration marker:

    [나레이션] 오늘은 세네카의 말을 소개합니다.
    [자막] "인생은 충분히 길다"
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List

from shortsmind.core.constants import CAPTION_MARKER, NARRATION_MARKER

_EDGE_QUOTES = re.compile(r'^"|"$')


class ScriptLineKind(str, Enum):
    CAPTION = "caption"
    NARRATION = "narration"
    OTHER = "other"


@dataclass(frozen=True)
class ScriptLine:
    text: str
    kind: ScriptLineKind


def _caption_text(line: str) -> str:
    # Text between the first marker and the next one (if any)
    text = line.split(CAPTION_MARKER)[1].strip()
    return _EDGE_QUOTES.sub("", text)


def extract_captions(script: str) -> str:
    """Return caption texts from a script, one per line.

    Returns an empty string when the script has no non-empty caption.
    """
    captions = [
        _caption_text(line)
        for line in script.split("\n")
        if CAPTION_MARKER in line
    ]
    return "\n".join(caption for caption in captions if caption)


def classify_script_line(line: str) -> ScriptLineKind:
    """Caption wins over narration when a line carries both markers."""
    if CAPTION_MARKER in line:
        return ScriptLineKind.CAPTION
    if NARRATION_MARKER in line:
        return ScriptLineKind.NARRATION
    return ScriptLineKind.OTHER


def annotate_script(script: str) -> List[ScriptLine]:
    return [ScriptLine(text=line, kind=classify_script_line(line)) for line in script.split("\n")]
