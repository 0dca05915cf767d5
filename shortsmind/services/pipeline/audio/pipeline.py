"""
Audio preview pipeline

synthesize -> base64 decode -> PCM16 to float waveform -> play.
"""

from __future__ import annotations

from typing import Callable, Optional

from shortsmind.config import PREVIEW_CHANNELS, PREVIEW_SAMPLE_RATE
from shortsmind.core import get_logger

from .pcm import decode_base64, pcm_to_waveform
from .playback import AudioOutputContext

logger = get_logger(__name__, component="audio_pipeline")


class AudioPreviewPipeline:
    """Turns hook text into audible narration.

    The output context is created on first playback and reused for every
    later one.
    """

    def __init__(
        self,
        speech_client,
        output_factory: Callable[[], AudioOutputContext] = AudioOutputContext,
        sample_rate: int = PREVIEW_SAMPLE_RATE,
        channel_count: int = PREVIEW_CHANNELS,
    ):
        self.speech_client = speech_client
        self._output_factory = output_factory
        self._output: Optional[AudioOutputContext] = None
        self.sample_rate = sample_rate
        self.channel_count = channel_count

    def _get_output(self) -> AudioOutputContext:
        # No await between the check and the assignment
        if self._output is None:
            self._output = self._output_factory()
        return self._output

    async def synthesize_and_play(self, text: str, voice_id: str) -> None:
        """Fetch narration for text and start playing it.

        Raises NetworkError / DecodeError from synthesis and decoding.
        Returns once playback is scheduled, not when it finishes.
        """
        payload = await self.speech_client.synthesize_speech(text, voice_id)
        pcm = decode_base64(payload)
        waveform = pcm_to_waveform(pcm, self.sample_rate, self.channel_count)
        logger.info(
            f"Decoded narration: {waveform.frame_count} frames ({waveform.duration:.2f}s)",
            extra={"voice": voice_id},
        )
        self._get_output().play(waveform)
