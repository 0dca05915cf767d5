"""
Generation & preview pipeline

Modules:
- recommendation: concept batch request and validation
- preview: selection state and image/audio enrichment
- audio: base64 PCM decoding and playback
- captions: caption extraction from scripts
"""
