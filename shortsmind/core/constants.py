"""
Shared constants used across the application.

Static lookup tables for the recommendation form and the prompts.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple, Tuple

from shortsmind.models.concepts import ContentCategory, VisualMode


class FigureSuggestion(NamedTuple):
    """A featured-figure shortcut shown under the figure input."""
    name: str
    description: str


# Script directive tags embedded in detailedScript
CAPTION_MARKER = "[자막]"
NARRATION_MARKER = "[나레이션]"

WESTERN_FIGURES: Tuple[FigureSuggestion, ...] = (
    FigureSuggestion("소크라테스", "질문과 깨달음"),
    FigureSuggestion("니체", "초인과 극복"),
    FigureSuggestion("세네카", "스토아 철학"),
    FigureSuggestion("아우렐리우스", "명상록"),
    FigureSuggestion("쇼펜하우어", "현실적인 위로"),
    FigureSuggestion("데카르트", "이성과 존재"),
)

EASTERN_FIGURES: Tuple[FigureSuggestion, ...] = (
    FigureSuggestion("공자", "예절과 배움"),
    FigureSuggestion("노자", "무위자연과 비움"),
    FigureSuggestion("장자", "자유로운 영혼"),
    FigureSuggestion("맹자", "인의와 본성"),
    FigureSuggestion("부처", "마음의 평화"),
    FigureSuggestion("이황", "수양과 덕목"),
)

# Only QUOTES features a figure; other categories get no suggestions
FIGURE_SUGGESTIONS: Mapping[ContentCategory, Mapping[str, Tuple[FigureSuggestion, ...]]] = MappingProxyType({
    ContentCategory.QUOTES: MappingProxyType({
        "western": WESTERN_FIGURES,
        "eastern": EASTERN_FIGURES,
    }),
    ContentCategory.SELF_IMPROVEMENT: MappingProxyType({}),
})

CATEGORY_LABELS: Mapping[ContentCategory, str] = MappingProxyType({
    ContentCategory.QUOTES: "명언/지혜",
    ContentCategory.SELF_IMPROVEMENT: "자기계발",
})

# Style phrases appended to image prompts and used in the recommendation prompt
VISUAL_STYLE_DESCRIPTIONS: Mapping[VisualMode, str] = MappingProxyType({
    VisualMode.REALISTIC: "cinematic photorealistic photography, natural lighting, shallow depth of field",
    VisualMode.ANIMATION: "high quality 2D animation still, clean line art, vibrant soft colors",
    VisualMode.OIL_PAINTING: "classical oil painting on canvas, visible brush strokes, rich warm palette",
    VisualMode.ORIENTAL_PAINTING: "traditional East Asian ink wash painting, hanji paper texture, muted tones",
})


def get_figure_suggestions(category: ContentCategory) -> Dict[str, List[FigureSuggestion]]:
    """Return figure suggestion groups for a category (empty when none apply)."""
    groups = FIGURE_SUGGESTIONS.get(ContentCategory(category), {})
    return {group: list(figures) for group, figures in groups.items()}


def get_visual_style_description(visual_style: VisualMode) -> str:
    """Return the prompt phrase for a visual style."""
    return VISUAL_STYLE_DESCRIPTIONS[VisualMode(visual_style)]
