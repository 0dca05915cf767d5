import pytest

from shortsmind.services.infrastructure.llm.prompting_engine import (
    PromptTemplate,
    format_prompt,
    get_prompt,
)


def test_template_format():
    assert PromptTemplate(template="Hello {name}!").format(name="World") == "Hello World!"


def test_template_with_literal_braces_falls_back_to_replace():
    template = PromptTemplate(template='Return {"id": "..."} for {topic}')
    assert template.format(topic="니체") == 'Return {"id": "..."} for 니체'


def test_recommendation_placeholders_are_all_filled():
    template = get_prompt("RECOMMEND_CONCEPTS")
    assert template.placeholders == {
        "category_label",
        "category_guidance",
        "featured_figure",
        "keywords",
        "visual_style",
        "visual_style_description",
        "caption_marker",
        "narration_marker",
    }


def test_placeholders_empty_for_unbalanced_template():
    assert PromptTemplate(template="{ broken").placeholders == frozenset()


def test_registry():
    assert get_prompt("RECOMMEND_CONCEPTS").description
    with pytest.raises(KeyError):
        get_prompt("MISSING")


def test_preview_image_prompt():
    prompt = format_prompt("PREVIEW_IMAGE", prompt="a lone tree", style_description="oil painting")
    assert "a lone tree" in prompt
    assert "oil painting" in prompt
    assert "9:16" in prompt
