"""
One-time flags on top of a simple key-value settings store.

**Conceptual**: "Show this tip only once" style logic needs a boolean that
survives restarts. flag_once(key) answers True the first time it is asked
about a key and False on every later call, until reset_flag(key) clears it.

The backing store is anything implementing KeyValueStore. InMemoryStore is
process-local; JsonFileStore persists to a JSON file and is what
default_store() returns when PRIMKIT_FLAG_STORE_PATH is set.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

from primkit.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal settings storage: get / set / remove by string key."""

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class InMemoryStore:
    """KeyValueStore backed by a dict. Contents are lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)


class JsonFileStore:
    """
    KeyValueStore persisted as a single JSON object on disk.

    The file is read once at construction and rewritten on every set/remove.
    Parent directories are created on first write. Values must be
    json-serializable.

    Args:
        path: Location of the JSON file. A missing file means an empty store.

    Raises:
        ValueError: If the file exists but does not contain a JSON object.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._values: Dict[str, Any] = {}
        if self.path.exists():
            with open(self.path, "r", encoding="utf-8") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError(
                    f"Flag store {self.path} must contain a JSON object, got {type(loaded).__name__}"
                )
            self._values = loaded

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value
        self._write()

    def remove(self, key: str) -> None:
        if key in self._values:
            del self._values[key]
            self._write()

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._values, f, indent=2, sort_keys=True)


def default_store(settings: Optional[Settings] = None) -> KeyValueStore:
    """
    Store selected by configuration.

    Returns a JsonFileStore at PRIMKIT_FLAG_STORE_PATH when it is set,
    otherwise a new InMemoryStore.
    """
    settings = settings or get_settings()
    if settings.flag_store_path is not None:
        return JsonFileStore(settings.flag_store_path)
    return InMemoryStore()


def flag_once(key: str, store: KeyValueStore) -> bool:
    """
    Set the flag for key, reporting whether this call was the one that set it.

    **Usage**:
        store = default_store()
        if flag_once("ShouldShowOneTimePopUp", store):
            show_popup()
        flag_once("ShouldShowOneTimePopUp", store)  # False from now on

    Args:
        key: Flag name.
        store: Where flags are kept.

    Returns:
        True if the key was absent or falsy (and is now True), else False.
    """
    if not store.get(key):
        store.set(key, True)
        logger.debug("Flag %r set", key)
        return True
    return False


def reset_flag(key: str, store: KeyValueStore) -> None:
    """Forget key so the next flag_once(key) returns True again."""
    store.remove(key)
    logger.debug("Flag %r reset", key)
