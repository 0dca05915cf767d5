"""
Recommendation Schemas

Structured output schema for the concept batch, in google-genai
types.Schema format. Used with response_mime_type="application/json".
"""

from google.genai import types


def _string(description: str) -> types.Schema:
    return types.Schema(type=types.Type.STRING, description=description)


def get_concept_batch_schema() -> types.Schema:
    """Schema for {"concepts": [Concept, ...]}."""
    scene = types.Schema(
        type=types.Type.OBJECT,
        required=["sceneNumber", "description", "prompt"],
        properties={
            "sceneNumber": types.Schema(
                type=types.Type.INTEGER,
                description="1-based scene position, unique within the concept",
            ),
            "description": _string("What the viewer sees, in Korean"),
            "prompt": _string("English image generation prompt in the requested visual style"),
        },
    )

    concept = types.Schema(
        type=types.Type.OBJECT,
        required=[
            "id",
            "title",
            "hook",
            "detailedScript",
            "visualScenes",
            "visualStyle",
            "targetAudience",
            "personalizedReason",
        ],
        properties={
            "id": _string("Short unique slug for this concept"),
            "title": _string("Catchy video title"),
            "hook": _string("First spoken sentence"),
            "detailedScript": _string(
                "Full script, one directive per line, caption lines tagged [자막], "
                "narration lines tagged [나레이션]"
            ),
            "visualScenes": types.Schema(
                type=types.Type.ARRAY,
                description="Scenes in playback order",
                items=scene,
            ),
            "visualStyle": _string("Visual style identifier"),
            "targetAudience": _string("Who the video is for"),
            "personalizedReason": _string("Why this fits the user's keywords"),
        },
    )

    return types.Schema(
        type=types.Type.OBJECT,
        required=["concepts"],
        properties={
            "concepts": types.Schema(
                type=types.Type.ARRAY,
                description="Distinct short-form video concepts",
                items=concept,
            ),
        },
    )
