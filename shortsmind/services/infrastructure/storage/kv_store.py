"""
Key-value store - durable string slots for client-side state.
"""

from __future__ import annotations

import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from shortsmind.config import get_data_dir
from shortsmind.core import get_logger
from shortsmind.core.exceptions import StorageError

logger = get_logger(__name__, component="kv_store")


class KeyValueStore(ABC):
    """Abstract string key-value store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store; nothing survives a restart."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._slots: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._slots.get(key)

    def set(self, key: str, value: str) -> None:
        self._slots[key] = value


class FileKeyValueStore(KeyValueStore):
    """File-based store: one <key>.json file per slot."""
    _SAFE_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = Path(base_dir or get_data_dir()).expanduser().resolve()

    def _build_target(self, key: str) -> Path:
        safe_key = str(key or "").strip()
        if not safe_key or not self._SAFE_KEY_PATTERN.fullmatch(safe_key):
            raise ValueError(f"Invalid storage key: {key!r}")

        target = (self.base_dir / f"{safe_key}.json").resolve()
        if target.parent != self.base_dir:
            raise ValueError(f"Invalid storage key: {key!r}")
        return target

    def get(self, key: str) -> Optional[str]:
        target = self._build_target(key)
        try:
            if not target.is_file():
                return None
            return target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Failed to read slot '{key}': {exc}") from exc

    def set(self, key: str, value: str) -> None:
        target = self._build_target(key)
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.base_dir, prefix=f".{target.stem}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_path, target)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as exc:
            raise StorageError(f"Failed to write slot '{key}': {exc}") from exc
        logger.debug(f"Wrote slot '{key}' ({len(value)} chars)")
