"""Audio output via pydub."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional, Set

from shortsmind.core import get_logger

from .pcm import Waveform

logger = get_logger(__name__, component="audio_output")


def require_pydub() -> tuple[Any, Callable[[Any], None]]:
    try:
        from pydub import AudioSegment
        from pydub.playback import play
    except ImportError as exc:
        raise RuntimeError(
            "Missing dependency: pydub. Install with: pip install pydub"
        ) from exc
    return AudioSegment, play


class AudioOutputContext:
    """Shared output device for preview playback.

    play() is fire-and-forget: the blocking pydub playback runs on the
    loop's default executor and nothing waits for it. Overlapping calls
    play concurrently.
    """

    def __init__(self, player: Optional[Callable[[Any], None]] = None):
        self._audio_segment_cls, default_player = require_pydub()
        self._player = player or default_player
        self._pending: Set[asyncio.Future] = set()

    def to_segment(self, waveform: Waveform) -> Any:
        return self._audio_segment_cls(
            data=waveform.to_pcm16(),
            sample_width=2,
            frame_rate=waveform.sample_rate,
            channels=waveform.channel_count,
        )

    def play(self, waveform: Waveform) -> asyncio.Future:
        """Schedule playback and return the executor future without awaiting it."""
        segment = self.to_segment(waveform)
        loop = asyncio.get_running_loop()
        future = loop.run_in_executor(None, self._player, segment)
        self._pending.add(future)
        future.add_done_callback(self._on_done)
        logger.debug(f"Playing {waveform.duration:.2f}s preview")
        return future

    def _on_done(self, future: asyncio.Future) -> None:
        self._pending.discard(future)
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.warning(f"Preview playback failed: {exc}")

    @property
    def active_count(self) -> int:
        return len(self._pending)
