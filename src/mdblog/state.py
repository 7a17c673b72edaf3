"""Local key/value state: recently viewed posts and theme preference

State lives in one JSON file. Read or write failures are logged and
otherwise ignored so that they never interrupt the calling command.
"""

import json
from pathlib import Path
from typing import Any, Optional

from mdblog.log import logger


RECENT_KEY = "recently_viewed"
THEME_KEY = "theme"
THEMES = ("light", "dark")


class LocalStore:
    """A JSON file holding a flat key -> value mapping."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._data: dict[str, Any] = {}
        self._loaded = False

    def load(self) -> "LocalStore":
        self._loaded = True
        if not self.path.exists():
            self._data = {}
            return self
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable state file %s: %s", self.path, e)
            data = {}
        self._data = data if isinstance(data, dict) else {}
        return self

    def save(self) -> bool:
        """Write the mapping to disk. Returns False if the write failed."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._data, indent=2, ensure_ascii=False), encoding='utf-8')
        except OSError as e:
            logger.warning("Could not write state file %s: %s", self.path, e)
            return False
        return True

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()

    def get(self, key: str, default: Any = None) -> Any:
        self._ensure_loaded()
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._ensure_loaded()
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._ensure_loaded()
        self._data.pop(key, None)


class RecentlyViewed:
    """Most-recent-first post ids, de-duplicated and capped at limit."""

    def __init__(self, store: LocalStore, limit: int = 8):
        self.store = store
        self.limit = limit
        self.ids: list[str] = []

    def load(self) -> list[str]:
        raw = self.store.load().get(RECENT_KEY, [])
        ids = [i for i in raw if isinstance(i, str)] if isinstance(raw, list) else []
        self.ids = list(dict.fromkeys(ids))[:self.limit]
        return self.ids

    def push(self, post_id: str) -> list[str]:
        """Move post_id to the front, dropping the oldest entries past limit."""
        self.ids = [post_id, *(i for i in self.ids if i != post_id)][:self.limit]
        return self.ids

    def save(self) -> bool:
        self.store.set(RECENT_KEY, self.ids)
        return self.store.save()

    def clear(self) -> bool:
        self.ids = []
        self.store.delete(RECENT_KEY)
        return self.store.save()


class ThemePreference:
    """Stored light/dark choice; None means follow the system default."""

    def __init__(self, store: LocalStore):
        self.store = store

    def load(self) -> Optional[str]:
        theme = self.store.load().get(THEME_KEY)
        return theme if theme in THEMES else None

    def save(self, theme: str) -> bool:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme!r} (expected one of {', '.join(THEMES)})")
        self.store.set(THEME_KEY, theme)
        return self.store.save()

    def clear(self) -> bool:
        self.store.delete(THEME_KEY)
        return self.store.save()
