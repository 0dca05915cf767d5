"""
Concept recommendation and preview image prompts.

Used by: pipeline/recommendation/coordinator.py, infrastructure/llm/gemini/client.py
"""

from .base import PromptTemplate


RECOMMENDATION_SYSTEM = PromptTemplate(
    template="""You are a planner for Korean YouTube Shorts channels that publish
wisdom quotes and self-improvement stories. You write concise, emotionally
resonant concepts that work as 40-60 second vertical videos.
All user-facing text (title, hook, script, reasons) must be written in Korean.
Image prompts must be written in English.""",
    description="System instruction for concept recommendation"
)


RECOMMEND_CONCEPTS = PromptTemplate(
    template="""Propose 3 distinct short-form video concepts.

CATEGORY: {category_label}
{category_guidance}

FEATURED FIGURE: {featured_figure}
KEYWORDS: {keywords}
VISUAL STYLE: {visual_style} ({visual_style_description})

For every concept provide:
- id: a short unique slug
- title: a catchy title
- hook: the first spoken sentence that stops the scroll
- detailedScript: the full script, one directive per line.
  Prefix on-screen caption lines with {caption_marker} and spoken lines with {narration_marker}.
  Put caption text in double quotes, for example: {caption_marker} "오늘의 한 문장"
- visualScenes: 3 to 5 scenes, each with sceneNumber (1, 2, 3, ...),
  a Korean description and an English image prompt in the visual style above
- visualStyle: "{visual_style}"
- targetAudience: who this video is for
- personalizedReason: why this concept fits the keywords

Respond with ONLY valid JSON: an object with a "concepts" array.""",
    description="Structured concept batch for one recommendation request"
)


CATEGORY_GUIDANCE = {
    "QUOTES": "Build each concept around a real quote or teaching of the featured figure "
              "(or a fitting thinker when none is given) and explain it for modern life.",
    "SELF_IMPROVEMENT": "Build each concept around a practical habit, mindset or routine "
                        "tied to the keywords, ending with one concrete action.",
}


PREVIEW_IMAGE = PromptTemplate(
    template="""Vertical 9:16 background image for a short video.
Scene: {prompt}
Style: {style_description}
No text, no letters, no watermarks. Leave calm space in the lower third for captions.""",
    description="Background image for the concept preview"
)
