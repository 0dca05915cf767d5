"""
Services

Organization:
    - infrastructure/: Gemini client, prompts, JSON parsing, storage
    - pipeline/: recommendation, preview selection, audio, captions
    - use_cases/: the studio session that wires the pipeline together
"""
