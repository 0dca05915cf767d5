"""
Core Exceptions
Standardized base exceptions for the application.
"""


class ShortsMindError(Exception):
    """Base exception for all application errors."""
    pass


class ValidationError(ShortsMindError):
    """User input rejected before any request was issued."""
    pass


class SchemaError(ShortsMindError):
    """Upstream reply did not match the expected Concept/Scene shape."""
    pass


class NetworkError(ShortsMindError):
    """Transport or upstream service failure."""
    pass


class DecodeError(ShortsMindError):
    """Malformed base64 or PCM audio payload."""
    pass


class StorageError(ShortsMindError):
    """Durable storage could not be written."""
    pass
