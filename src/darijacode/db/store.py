# Fichier: src/darijacode/db/store.py
"""
Durable local key/value storage and the persistent values built on top of it.

The store is string-keyed, synchronous and has no transactions: each key is
written on its own, right after the in-memory value changes.
"""
import logging
import os
import re
from pathlib import Path
from typing import Any, Callable, Dict, Generic, Optional, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

from darijacode import config

logger = logging.getLogger(__name__)

T = TypeVar("T")

# --- Keys ---
CHAT_MESSAGES_KEY = "chatMessages"
COMMUNITY_POSTS_KEY = "communityPosts"
USERNAME_KEY = "communityUserName"
COMPLETED_LESSONS_KEY = "completedLessons"
PROJECT_IDEAS_KEY = "projectIdeas"
PATH_GOAL_KEY = "pathGoal"
LEARNING_PATH_KEY = "learningPath"
THEME_KEY = "theme"

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStore:
    """In-process store, mostly for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)


class FileStore:
    """One `<key>.json` file per key inside `directory`."""

    def __init__(self, directory: str):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        if not _KEY_RE.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        try:
            tmp.write_text(value, encoding="utf-8")
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
        # a reader never sees a half-written value
        os.replace(tmp, path)

    def remove_item(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


def open_store(directory: Optional[str] = None) -> FileStore:
    return FileStore(directory or config.STORE_DIR)


class PersistentValue(Generic[T]):
    """
    A value mirrored to one key of the store.

    Loaded once on construction: a missing key, undecodable JSON or data of
    the wrong shape all give the default. Every change is saved immediately.
    `store=None` means no durable storage is available, the value then only
    lives in memory.
    """

    def __init__(
        self,
        store: Optional[KeyValueStore],
        key: str,
        type_: Any,
        default_factory: Callable[[], T],
    ):
        self.store = store
        self.key = key
        self._adapter = TypeAdapter(type_)
        self._default_factory = default_factory
        self._value: T = self._load()

    @property
    def value(self) -> T:
        return self._value

    def _load(self) -> T:
        if self.store is None:
            return self._default_factory()
        try:
            raw = self.store.get_item(self.key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read '{self.key}' from storage: {e}")
            return self._default_factory()
        if raw is None:
            return self._default_factory()
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Stored value for '{self.key}' is unreadable, using default: {e.error_count()} error(s)")
            return self._default_factory()

    def _save(self) -> None:
        if self.store is None:
            return
        try:
            self.store.set_item(self.key, self._adapter.dump_json(self._value).decode("utf-8"))
        except OSError as e:
            logger.error(f"Failed saving '{self.key}': {e}")

    def set(self, value: T) -> T:
        self._value = value
        self._save()
        return value

    def update(self, fn: Callable[[T], T]) -> T:
        """
        Applies `fn` to the value as it is now, not to an earlier snapshot,
        then saves. Delayed effects must go through here so that changes made
        while they were waiting are kept.
        """
        return self.set(fn(self._value))

    def reset(self) -> T:
        return self.set(self._default_factory())
