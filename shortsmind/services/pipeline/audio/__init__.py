"""
Audio preview pipeline: base64 PCM decoding and playback.
"""

from .pcm import Waveform, decode_base64, pcm_to_waveform
from .playback import AudioOutputContext, require_pydub
from .pipeline import AudioPreviewPipeline

__all__ = [
    "Waveform",
    "decode_base64",
    "pcm_to_waveform",
    "AudioOutputContext",
    "require_pydub",
    "AudioPreviewPipeline",
]
