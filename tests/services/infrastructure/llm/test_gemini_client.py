"""
Tests for GeminiGenerationClient with a fake SDK client (no network).
"""

import base64
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from shortsmind.config import GenerationModels, ModelConfig
from shortsmind.core.exceptions import DecodeError, NetworkError, SchemaError
from shortsmind.models import VisualMode
from shortsmind.services.infrastructure.llm.gemini import (
    GeminiGenerationClient,
    find_inline_payload,
    to_data_url,
)


def inline_response(data, mime_type):
    part = SimpleNamespace(inline_data=SimpleNamespace(data=data, mime_type=mime_type), text=None)
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


def text_part_response(text):
    part = SimpleNamespace(inline_data=None, text=text)
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))], text=text)


@pytest.fixture
def models():
    return GenerationModels(
        recommendation=ModelConfig(model_name="text-model", temperature=0.5),
        image=ModelConfig(model_name="image-model"),
        speech=ModelConfig(model_name="tts-model"),
    )


@pytest.fixture
def sdk():
    return MagicMock()


@pytest.fixture
def client(sdk, models):
    return GeminiGenerationClient(models=models, client=sdk)


class TestFindInlinePayload:

    def test_bytes_payload(self):
        assert find_inline_payload(inline_response(b"\x01\x02", "image/png")) == (b"\x01\x02", "image/png")

    def test_base64_string_payload(self):
        encoded = base64.b64encode(b"pcm").decode()
        assert find_inline_payload(inline_response(encoded, "audio/L16")) == (b"pcm", "audio/L16")

    def test_invalid_base64_string(self):
        with pytest.raises(DecodeError):
            find_inline_payload(inline_response("@@not base64@@", "audio/L16"))

    def test_skips_text_parts(self):
        text = SimpleNamespace(inline_data=None)
        image = SimpleNamespace(inline_data=SimpleNamespace(data=b"img", mime_type="image/jpeg"))
        response = SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[text, image]))])
        assert find_inline_payload(response) == (b"img", "image/jpeg")

    def test_none_without_candidates(self):
        assert find_inline_payload(SimpleNamespace(candidates=[])) is None
        assert find_inline_payload(text_part_response("hi")) is None


def test_to_data_url():
    assert to_data_url(b"abc", "image/jpeg") == "data:image/jpeg;base64,YWJj"
    assert to_data_url(b"abc", None).startswith("data:image/png;base64,")


class TestGenerateJson:

    @pytest.mark.asyncio
    async def test_returns_reply_text(self, client, sdk):
        sdk.models.generate_content.return_value = text_part_response('{"concepts": []}')

        reply = await client.generate_json("prompt", system_instruction="system")

        assert reply == '{"concepts": []}'
        kwargs = sdk.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "text-model"
        assert kwargs["contents"] == "prompt"
        assert kwargs["config"].response_mime_type == "application/json"
        assert kwargs["config"].temperature == 0.5

    @pytest.mark.asyncio
    async def test_sdk_failure_is_network_error(self, client, sdk):
        sdk.models.generate_content.side_effect = RuntimeError("503 unavailable")

        with pytest.raises(NetworkError) as exc_info:
            await client.generate_json("prompt")
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_empty_reply_is_schema_error(self, client, sdk):
        sdk.models.generate_content.return_value = SimpleNamespace(text="", candidates=[])
        with pytest.raises(SchemaError):
            await client.generate_json("prompt")


class TestGenerateImage:

    @pytest.mark.asyncio
    async def test_returns_data_url(self, client, sdk):
        sdk.models.generate_content.return_value = inline_response(b"png-bytes", "image/png")

        url = await client.generate_image("a quiet forest", VisualMode.ORIENTAL_PAINTING)

        assert url == "data:image/png;base64," + base64.b64encode(b"png-bytes").decode()
        kwargs = sdk.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "image-model"
        assert "a quiet forest" in kwargs["contents"]
        assert "ink wash" in kwargs["contents"]
        assert kwargs["config"].response_modalities == ["IMAGE"]

    @pytest.mark.asyncio
    async def test_reply_without_image_is_schema_error(self, client, sdk):
        sdk.models.generate_content.return_value = text_part_response("sorry, no image")
        with pytest.raises(SchemaError):
            await client.generate_image("prompt", VisualMode.REALISTIC)


class TestSynthesizeSpeech:

    @pytest.mark.asyncio
    async def test_returns_base64_pcm(self, client, sdk):
        sdk.models.generate_content.return_value = inline_response(b"\x00\x80\xff\x7f", "audio/L16;rate=24000")

        payload = await client.synthesize_speech("안녕하세요", "Kore")

        assert base64.b64decode(payload) == b"\x00\x80\xff\x7f"
        config = sdk.models.generate_content.call_args.kwargs["config"]
        assert config.response_modalities == ["AUDIO"]
        assert config.speech_config.voice_config.prebuilt_voice_config.voice_name == "Kore"

    @pytest.mark.asyncio
    async def test_reply_without_audio_is_decode_error(self, client, sdk):
        sdk.models.generate_content.return_value = text_part_response("no audio")
        with pytest.raises(DecodeError):
            await client.synthesize_speech("text", "Puck")

    @pytest.mark.asyncio
    async def test_transport_failure_is_network_error(self, client, sdk):
        sdk.models.generate_content.side_effect = ConnectionError("reset")
        with pytest.raises(NetworkError):
            await client.synthesize_speech("text", "Puck")


class TestLazyClient:

    def test_client_built_once_from_env_key(self, models):
        with patch("google.genai.Client") as client_cls:
            client = GeminiGenerationClient(models=models)
            first = client._get_client()
            second = client._get_client()

        client_cls.assert_called_once_with(api_key="mock-key")
        assert first is second

    def test_explicit_key_wins(self, models):
        with patch("google.genai.Client") as client_cls:
            GeminiGenerationClient(api_key="explicit", models=models)._get_client()
        client_cls.assert_called_once_with(api_key="explicit")

    def test_missing_key(self, models, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        with pytest.raises(NetworkError):
            GeminiGenerationClient(models=models)._get_client()
