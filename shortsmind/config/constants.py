"""
Constants configuration

Audio format of the voice service and the library storage slot.
"""

# The voice service always returns PCM16 mono at 24 kHz
PREVIEW_SAMPLE_RATE = 24000
PREVIEW_CHANNELS = 1

# Key-value slot holding the whole saved library
LIBRARY_SLOT = "shortsmind_saved"

__all__ = [
    "PREVIEW_SAMPLE_RATE",
    "PREVIEW_CHANNELS",
    "LIBRARY_SLOT",
]
