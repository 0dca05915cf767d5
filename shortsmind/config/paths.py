"""
Paths configuration

Directory paths for the client. SHORTSMIND_DATA_DIR is read on every call so
a changed environment applies to stores created afterwards. Directories are
created lazily by the components that write to them.
"""

import os
from pathlib import Path

DEFAULT_DATA_DIR = Path.home() / ".shortsmind"


def get_data_dir() -> Path:
    """Directory holding the key-value slots."""
    return Path(os.getenv("SHORTSMIND_DATA_DIR") or DEFAULT_DATA_DIR).expanduser()


__all__ = ["DEFAULT_DATA_DIR", "get_data_dir"]
