"""
ShortsMind - short-video concept generation and preview.

Packages:
    - core: logging, exceptions and static catalogs
    - config: environment-driven settings and model configuration
    - models: pydantic schemas for concepts and the saved library
    - services: generation client, storage, preview pipeline and session
"""

__version__ = "0.1.0"
