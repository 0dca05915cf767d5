"""
Library repository - the user's saved concepts.

The whole library lives in one key-value slot as a JSON array (newest
first). It is read once at construction and rewritten in full on every
mutating call.
"""

from __future__ import annotations

import json
import threading
import time
from typing import Callable, List, Optional, Tuple

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from shortsmind.config import LIBRARY_SLOT
from shortsmind.core import get_logger
from shortsmind.core.exceptions import StorageError
from shortsmind.models import Concept, ContentCategory, SaveResult, SavedConcept

from .kv_store import KeyValueStore

logger = get_logger(__name__, component="library_store")

_SAVED_LIST = TypeAdapter(List[SavedConcept])


class LibraryStore:
    """
    Deduplicated, newest-first collection of saved concepts.

    Read-modify-write sequences are guarded by a re-entrant lock so
    save/remove/clear stay consistent if called from worker threads.
    """

    def __init__(
        self,
        kv_store: KeyValueStore,
        slot: str = LIBRARY_SLOT,
        clock: Callable[[], float] = time.time,
    ):
        self._kv_store = kv_store
        self._slot = slot
        self._clock = clock
        self._lock = threading.RLock()
        self._entries: List[SavedConcept] = self._load()

    def _load(self) -> List[SavedConcept]:
        try:
            raw = self._kv_store.get(self._slot)
        except StorageError as exc:
            logger.warning(f"Library slot unreadable, starting empty: {exc}")
            return []
        if raw is None or not raw.strip():
            return []

        try:
            payload = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            logger.warning(f"Library payload is not JSON, starting empty: {exc}")
            return []
        if not isinstance(payload, list):
            logger.warning(f"Library payload is {type(payload).__name__}, expected array; starting empty")
            return []

        try:
            entries = _SAVED_LIST.validate_python(payload)
        except PydanticValidationError as exc:
            logger.warning(
                "Library payload failed validation, starting empty",
                extra={"error_count": exc.error_count()},
            )
            return []

        unique: List[SavedConcept] = []
        seen = set()
        for entry in entries:
            if entry.id in seen:
                continue
            seen.add(entry.id)
            unique.append(entry)
        if len(unique) != len(entries):
            logger.warning(f"Collapsed {len(entries) - len(unique)} duplicate library entries")
        logger.info(f"Loaded {len(unique)} saved concepts")
        return unique

    def _persist(self) -> None:
        payload = json.dumps([entry.to_wire() for entry in self._entries], ensure_ascii=False)
        self._kv_store.set(self._slot, payload)

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def save(self, concept: Concept, category: ContentCategory) -> SaveResult:
        """Prepend a concept unless one with the same id is already saved."""
        with self._lock:
            if self.contains(concept.id):
                return SaveResult.ALREADY_EXISTS
            entry = SavedConcept.from_concept(concept, category, self._now_ms())
            self._entries.insert(0, entry)
            try:
                self._persist()
            except StorageError:
                self._entries.pop(0)
                raise
            logger.info(f"Saved concept '{concept.id}'", extra={"library_size": len(self._entries)})
            return SaveResult.SAVED

    def remove(self, concept_id: str) -> None:
        with self._lock:
            remaining = [entry for entry in self._entries if entry.id != concept_id]
            if len(remaining) == len(self._entries):
                return
            previous, self._entries = self._entries, remaining
            try:
                self._persist()
            except StorageError:
                self._entries = previous
                raise
            logger.info(f"Removed concept '{concept_id}'")

    def clear(self) -> None:
        with self._lock:
            previous, self._entries = self._entries, []
            try:
                self._persist()
            except StorageError:
                self._entries = previous
                raise
            logger.info("Cleared library")

    def list(self) -> Tuple[SavedConcept, ...]:
        """Saved concepts, newest first."""
        with self._lock:
            return tuple(self._entries)

    def contains(self, concept_id: str) -> bool:
        with self._lock:
            return any(entry.id == concept_id for entry in self._entries)

    def get(self, concept_id: str) -> Optional[SavedConcept]:
        with self._lock:
            for entry in self._entries:
                if entry.id == concept_id:
                    return entry
            return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
