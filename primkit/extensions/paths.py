"""
Well-known user directories and a file existence check.
"""

import os
import tempfile
from enum import Enum
from pathlib import Path
from typing import Union


class DirectoryCategory(Enum):
    HOME = "home"
    DOCUMENTS = "documents"
    CACHES = "caches"
    TEMPORARY = "temporary"


def directory(category: DirectoryCategory) -> Path:
    """
    Path of a well-known per-user directory.

    **Resolution**:
      - HOME: the user's home directory.
      - DOCUMENTS: ~/Documents.
      - CACHES: $XDG_CACHE_HOME if set, else ~/.cache.
      - TEMPORARY: the platform temp directory.

    The directory is not created; callers that write into it should
    mkdir(parents=True, exist_ok=True) first.
    """
    home = Path.home()
    if category is DirectoryCategory.HOME:
        return home
    if category is DirectoryCategory.DOCUMENTS:
        return home / "Documents"
    if category is DirectoryCategory.CACHES:
        xdg_cache = os.getenv("XDG_CACHE_HOME", "").strip()
        return Path(xdg_cache) if xdg_cache else home / ".cache"
    if category is DirectoryCategory.TEMPORARY:
        return Path(tempfile.gettempdir())
    raise ValueError(f"Unknown directory category: {category!r}")


def documents_directory() -> Path:
    return directory(DirectoryCategory.DOCUMENTS)


def caches_directory() -> Path:
    return directory(DirectoryCategory.CACHES)


def file_exists(path: Union[str, Path]) -> bool:
    """True if path points at an existing regular file (directories don't count)."""
    return Path(path).is_file()
