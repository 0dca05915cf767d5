"""
Gemini generation client

Thin async wrapper over the google-genai SDK for the three generation
services the studio needs: structured concept JSON, a preview background
image and hook narration audio.

The SDK is synchronous, so every call runs in a worker thread via
asyncio.to_thread and the event loop stays responsive.

Environment Variables:
    GEMINI_API_KEY: API key for the Gemini API (read on first use)
"""

import asyncio
import base64
import os
from typing import Any, Optional

from shortsmind.config import DEFAULT_GENERATION_MODELS, GenerationModels
from shortsmind.core import LogTimer, get_logger
from shortsmind.core.constants import get_visual_style_description
from shortsmind.core.exceptions import DecodeError, NetworkError, SchemaError
from shortsmind.models import VisualMode
from shortsmind.services.infrastructure.llm.prompting_engine import format_prompt

from .payload import find_inline_payload, to_data_url

logger = get_logger(__name__, component="gemini_client")


class GeminiGenerationClient:
    """
    Client for the text, image and speech models.

    Usage:
        client = GeminiGenerationClient()
        text = await client.generate_json(prompt, response_schema=schema)
        url = await client.generate_image("a quiet forest", VisualMode.OIL_PAINTING)
        pcm_b64 = await client.synthesize_speech("안녕하세요", "Kore")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        models: Optional[GenerationModels] = None,
        client: Any = None,
    ):
        """
        Args:
            api_key: Optional API key. Falls back to GEMINI_API_KEY.
            models: Model table; defaults to the environment-configured one.
            client: Pre-built genai.Client (tests inject a fake here).
        """
        self._api_key = api_key
        self.models = models or DEFAULT_GENERATION_MODELS
        self._client = client

    def _get_client(self) -> Any:
        """Lazy-load the genai client."""
        if self._client is None:
            from google import genai

            api_key = self._api_key or os.getenv("GEMINI_API_KEY")
            if not api_key:
                raise NetworkError("GEMINI_API_KEY environment variable is required")
            self._client = genai.Client(api_key=api_key)
        return self._client

    async def _generate(self, model: str, contents: Any, config: Any) -> Any:
        client = self._get_client()
        try:
            return await asyncio.to_thread(
                client.models.generate_content,
                model=model,
                contents=contents,
                config=config,
            )
        except Exception as exc:
            raise NetworkError(f"Generation request to {model} failed: {exc}") from exc

    async def generate_json(
        self,
        prompt: str,
        response_schema: Any = None,
        system_instruction: Optional[str] = None,
    ) -> str:
        """Run the text model in JSON mode and return the raw reply text."""
        from google.genai import types

        config = types.GenerateContentConfig(
            temperature=self.models.recommendation.temperature,
            response_mime_type="application/json",
            response_schema=response_schema,
            system_instruction=system_instruction,
        )
        model = self.models.recommendation.model_name
        with LogTimer(logger, f"generate_json ({model})"):
            response = await self._generate(model, prompt, config)

        text = getattr(response, "text", None)
        if not text:
            raise SchemaError("Text model returned an empty reply")
        return text

    async def generate_image(self, prompt: str, visual_style: VisualMode) -> str:
        """Generate a vertical preview background and return it as a data: URL."""
        from google.genai import types

        full_prompt = format_prompt(
            "PREVIEW_IMAGE",
            prompt=prompt,
            style_description=get_visual_style_description(visual_style),
        )
        config = types.GenerateContentConfig(response_modalities=["IMAGE"])
        model = self.models.image.model_name
        with LogTimer(logger, f"generate_image ({model})"):
            response = await self._generate(model, full_prompt, config)

        payload = find_inline_payload(response)
        if payload is None:
            raise SchemaError("Image model reply carries no image")
        data, mime_type = payload
        return to_data_url(data, mime_type)

    async def synthesize_speech(self, text: str, voice_id: str) -> str:
        """Synthesize narration and return base64 text of raw PCM16 mono 24 kHz."""
        from google.genai import types

        config = types.GenerateContentConfig(
            response_modalities=["AUDIO"],
            speech_config=types.SpeechConfig(
                voice_config=types.VoiceConfig(
                    prebuilt_voice_config=types.PrebuiltVoiceConfig(
                        voice_name=voice_id,
                    )
                )
            ),
        )
        model = self.models.speech.model_name
        with LogTimer(logger, f"synthesize_speech ({model}, voice={voice_id})"):
            response = await self._generate(model, text, config)

        payload = find_inline_payload(response)
        if payload is None:
            raise DecodeError("Speech model reply carries no audio payload")
        data, _mime_type = payload
        logger.debug(f"Received {len(data)} bytes of PCM audio")
        return base64.b64encode(data).decode("ascii")
