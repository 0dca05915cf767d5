"""PCM payload decoding helpers."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

import numpy as np

from shortsmind.core.exceptions import DecodeError

_SAMPLE_WIDTH = 2
_FULL_SCALE = 32768.0


@dataclass(frozen=True)
class Waveform:
    """Float samples shaped (channels, frames) in [-1.0, 1.0)."""
    samples: np.ndarray
    sample_rate: int
    channel_count: int

    @property
    def frame_count(self) -> int:
        return int(self.samples.shape[1])

    @property
    def duration(self) -> float:
        return self.frame_count / self.sample_rate

    def to_pcm16(self) -> bytes:
        """Re-interleave as signed 16-bit little-endian PCM."""
        scaled = np.round(self.samples.T * _FULL_SCALE)
        return np.clip(scaled, -32768, 32767).astype("<i2").tobytes()


def decode_base64(payload: str) -> bytes:
    """Strict standard base64 decode; raises DecodeError on malformed input."""
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Invalid base64 audio payload: {exc}") from exc


def pcm_to_waveform(data: bytes, sample_rate: int, channel_count: int) -> Waveform:
    """Convert interleaved PCM16 LE bytes to a normalized float waveform.

    Trailing bytes that do not form a whole frame are dropped.
    """
    if sample_rate <= 0:
        raise ValueError(f"sample_rate must be positive, got {sample_rate}")
    if channel_count <= 0:
        raise ValueError(f"channel_count must be positive, got {channel_count}")

    frames = len(data) // (_SAMPLE_WIDTH * channel_count)
    if frames == 0:
        empty = np.zeros((channel_count, 0), dtype=np.float32)
        return Waveform(samples=empty, sample_rate=sample_rate, channel_count=channel_count)

    usable = bytes(data[:frames * channel_count * _SAMPLE_WIDTH])
    interleaved = np.frombuffer(usable, dtype="<i2")
    samples = interleaved.reshape(frames, channel_count).T.astype(np.float32) / np.float32(_FULL_SCALE)
    return Waveform(samples=samples, sample_rate=sample_rate, channel_count=channel_count)
