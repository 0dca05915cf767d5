import pytest

from shortsmind.core.constants import (
    CAPTION_MARKER,
    NARRATION_MARKER,
    VISUAL_STYLE_DESCRIPTIONS,
    FigureSuggestion,
    get_figure_suggestions,
    get_visual_style_description,
)
from shortsmind.models import ContentCategory, VisualMode


def test_markers():
    assert CAPTION_MARKER == "[자막]"
    assert NARRATION_MARKER == "[나레이션]"


def test_quotes_has_western_and_eastern_figures():
    groups = get_figure_suggestions(ContentCategory.QUOTES)

    assert set(groups) == {"western", "eastern"}
    assert len(groups["western"]) == 6
    assert len(groups["eastern"]) == 6
    assert FigureSuggestion("세네카", "스토아 철학") in groups["western"]
    assert groups["eastern"][0].name == "공자"


def test_self_improvement_has_no_figures():
    assert get_figure_suggestions(ContentCategory.SELF_IMPROVEMENT) == {}


def test_suggestions_are_copies():
    groups = get_figure_suggestions(ContentCategory.QUOTES)
    groups["western"].clear()
    assert len(get_figure_suggestions(ContentCategory.QUOTES)["western"]) == 6


def test_every_visual_style_described():
    assert set(VISUAL_STYLE_DESCRIPTIONS) == set(VisualMode)
    assert "ink wash" in get_visual_style_description("ORIENTAL_PAINTING")


def test_unknown_visual_style_rejected():
    with pytest.raises(ValueError):
        get_visual_style_description("WATERCOLOR")
