"""
Recommendation request coordinator

Validates the user's idea, issues exactly one structured-JSON request for a
concept batch and returns the batch only if every concept and scene is
well-formed. No retries and no partial batches.
"""

from typing import Any, List, Optional

from pydantic import ValidationError as PydanticValidationError

from shortsmind.core import LogTimer, get_logger
from shortsmind.core.constants import CATEGORY_LABELS, CAPTION_MARKER, NARRATION_MARKER, get_visual_style_description
from shortsmind.core.exceptions import SchemaError, ValidationError
from shortsmind.models import (
    Concept,
    ContentCategory,
    RecommendationRequest,
    RecommendationResponse,
    VisualMode,
)
from shortsmind.services.infrastructure.llm.prompting_engine.prompts import (
    CATEGORY_GUIDANCE,
    RECOMMEND_CONCEPTS,
    RECOMMENDATION_SYSTEM,
)
from shortsmind.services.infrastructure.parsing import parse_json_payload
from shortsmind.services.use_cases.base import UseCase

from .schemas import get_concept_batch_schema

logger = get_logger(__name__, component="recommendation")


class RecommendationCoordinator(UseCase[RecommendationRequest, List[Concept]]):
    """Turns a RecommendationRequest into a validated list of Concepts."""

    def __init__(self, text_client):
        self.text_client = text_client

    @staticmethod
    def build_request(
        category: Any,
        keywords: str,
        visual_style: Any,
        featured_figure: Optional[str] = None,
    ) -> RecommendationRequest:
        """Build a request from raw form values; bad enum values are a ValidationError."""
        try:
            return RecommendationRequest(
                category=category,
                keywords=keywords or "",
                visual_style=visual_style,
                featured_figure=featured_figure,
            )
        except PydanticValidationError as exc:
            fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err.get("loc"))
            raise ValidationError(f"Invalid recommendation input: {fields}") from exc

    @staticmethod
    def validate(request: RecommendationRequest) -> None:
        """Check category-specific preconditions. Issues no request."""
        if request.category == ContentCategory.SELF_IMPROVEMENT and not request.has_keywords:
            raise ValidationError("Self-improvement concepts need at least one keyword")
        if request.category == ContentCategory.QUOTES and not (request.has_figure or request.has_keywords):
            raise ValidationError("Quote concepts need a featured figure or keywords")

    def build_prompt(self, request: RecommendationRequest) -> str:
        return RECOMMEND_CONCEPTS.format(
            category_label=CATEGORY_LABELS[request.category],
            category_guidance=CATEGORY_GUIDANCE[request.category.value],
            featured_figure=request.featured_figure or "(none)",
            keywords=request.keywords or "(none)",
            visual_style=request.visual_style.value,
            visual_style_description=get_visual_style_description(request.visual_style),
            caption_marker=CAPTION_MARKER,
            narration_marker=NARRATION_MARKER,
        )

    @staticmethod
    def parse_concepts(reply: str) -> List[Concept]:
        """Validate a raw model reply into a concept batch.

        Accepts a top-level array or an object with a "concepts" array.
        """
        payload = parse_json_payload(reply)
        if isinstance(payload, list):
            payload = {"concepts": payload}
        if not isinstance(payload, dict) or "concepts" not in payload:
            raise SchemaError("Reply must be a concept array or an object with 'concepts'")

        try:
            return list(RecommendationResponse.model_validate(payload).concepts)
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            raise SchemaError(f"Invalid concept batch at {location or 'root'}: {first.get('msg')}") from exc

    async def execute(self, request: RecommendationRequest) -> List[Concept]:
        self.validate(request)
        prompt = self.build_prompt(request)

        with LogTimer(logger, f"recommend ({request.category.value})"):
            reply = await self.text_client.generate_json(
                prompt,
                response_schema=get_concept_batch_schema(),
                system_instruction=RECOMMENDATION_SYSTEM.format(),
            )

        concepts = self.parse_concepts(reply)
        logger.info(
            f"Received {len(concepts)} concepts",
            extra={"category": request.category.value, "visual_style": request.visual_style.value},
        )
        return concepts

    async def recommend(
        self,
        category: ContentCategory,
        keywords: str,
        visual_style: VisualMode,
        featured_figure: Optional[str] = None,
    ) -> List[Concept]:
        request = self.build_request(category, keywords, visual_style, featured_figure)
        return await self.execute(request)
