"""Storage layer - data persistence."""

from .kv_store import KeyValueStore, InMemoryKeyValueStore, FileKeyValueStore
from .library_repository import LibraryStore

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "FileKeyValueStore",
    "LibraryStore",
]
