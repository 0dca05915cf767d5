"""
Use Cases package - user-facing operations.

Modules:
- base: Base use case abstract class
- studio_session: StudioSession, the stateful entry point of the client
  (import from shortsmind.services.use_cases.studio_session)
"""

from .base import UseCase

__all__ = ["UseCase"]
