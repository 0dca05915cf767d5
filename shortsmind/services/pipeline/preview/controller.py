"""
Selection & enrichment controller

Owns the transitions IDLE -> SELECTING -> PREVIEWING. A new selection while
a request is in flight bumps the episode, which makes the older request's
result stale: apply_image drops any outcome whose token no longer matches.
"""

from typing import Tuple

from shortsmind.core import get_logger, set_concept_id
from shortsmind.core.voice_catalog import get_voice_description, get_voice_for_category
from shortsmind.models import Concept, ContentCategory, GeneratedImage, VisualMode

from ..audio import AudioPreviewPipeline
from .state import (
    EnrichmentTicket,
    ImageOutcome,
    SelectionPhase,
    SelectionState,
)

logger = get_logger(__name__, component="preview_controller")


class SelectionController:
    """Stateless controller; the caller holds the SelectionState."""

    def __init__(self, image_client, audio_pipeline: AudioPreviewPipeline):
        self.image_client = image_client
        self.audio_pipeline = audio_pipeline

    def select(
        self,
        state: SelectionState,
        concept: Concept,
        visual_style: VisualMode,
    ) -> Tuple[SelectionState, EnrichmentTicket]:
        """Make concept current and return the ticket for its image request."""
        new_state = SelectionState(
            phase=SelectionPhase.SELECTING,
            concept=concept,
            episode=state.episode + 1,
            preview_image=None,
            image_loading=True,
            image_error=None,
        )
        ticket = EnrichmentTicket(
            token=new_state.token,
            prompt=concept.image_prompt,
            visual_style=VisualMode(visual_style),
        )
        logger.debug(f"Selected '{concept.id}' (episode {new_state.episode})")
        return new_state, ticket

    async def fetch_image(self, ticket: EnrichmentTicket) -> ImageOutcome:
        """Run the image request for a ticket. Never raises."""
        set_concept_id(ticket.token.concept_id)
        try:
            url = await self.image_client.generate_image(ticket.prompt, ticket.visual_style)
        except Exception as exc:
            logger.error(f"Preview image failed: {exc}", exc_info=True)
            return ImageOutcome(token=ticket.token, error=str(exc))
        finally:
            set_concept_id(None)
        image = GeneratedImage(url=url, concept_id=ticket.token.concept_id)
        return ImageOutcome(token=ticket.token, image=image)

    def apply_image(self, state: SelectionState, outcome: ImageOutcome) -> SelectionState:
        """Apply an outcome to the state it was dispatched for; drop it otherwise."""
        if outcome.token != state.token:
            logger.debug(
                f"Discarding stale image for '{outcome.token.concept_id}' "
                f"(episode {outcome.token.episode}, current {state.episode})"
            )
            return state
        return state.evolve(
            phase=SelectionPhase.PREVIEWING,
            preview_image=outcome.image,
            image_loading=False,
            image_error=outcome.error,
        )

    def clear(self, state: SelectionState) -> SelectionState:
        """Drop the selection; in-flight results become stale."""
        return SelectionState(episode=state.episode + 1)

    async def trigger_audio_preview(self, concept: Concept, category: ContentCategory) -> None:
        """Narrate the concept's hook in the category's voice.

        Raises NetworkError / DecodeError for the caller to report.
        """
        voice_id = get_voice_for_category(category)
        logger.info(
            f"Hook narration for '{concept.id}' with voice {voice_id}",
            extra={"voice_tone": get_voice_description(voice_id)},
        )
        await self.audio_pipeline.synthesize_and_play(concept.hook, voice_id)
