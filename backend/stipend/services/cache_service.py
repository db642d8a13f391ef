"""JSON-file backed cache for flight prices and stipend breakdowns."""

import hashlib
import json
import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from stipend.config import settings

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CacheEntry(BaseModel):
    value: Any
    timestamp: str  # ISO-8601, UTC

    model_config = {"frozen": True}

    def age(self, now: datetime) -> timedelta:
        written = datetime.fromisoformat(self.timestamp)
        if written.tzinfo is None:
            written = written.replace(tzinfo=timezone.utc)
        return now - written


def make_cache_key(*parts: Any) -> str:
    """SHA-256 of the JSON-encoded ordered parts. Include a version token to invalidate."""
    payload = json.dumps(list(parts), default=str, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class PersistentCache:
    """In-memory map persisted to one JSON file.

    Entries are never evicted; only `max_age` on read and a version token in the
    key make old values unreachable. The backing file is loaded on first use
    when `init()` was not called.
    """

    def __init__(
        self,
        name: str,
        cache_dir: str | Path | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.name = name
        self.path = Path(cache_dir or settings.cache_dir) / f"{name}.json"
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._loaded = False

    def __len__(self) -> int:
        self._ensure_loaded()
        return len(self._entries)

    def init(self) -> None:
        """Load the backing file. A missing or unreadable file starts an empty cache."""
        self._entries = {}
        self._loaded = True
        if not self.path.exists():
            return
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            for key, entry in raw.items():
                self._entries[key] = CacheEntry(**entry)
            logger.info(f"Loaded {len(self._entries)} entries from cache {self.name}")
        except Exception as e:
            logger.warning(f"Could not load cache file {self.path}, starting empty: {e}")
            self._entries = {}

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.init()

    def close(self) -> None:
        self.save_to_disk()

    def get_entry(self, key: str) -> CacheEntry | None:
        self._ensure_loaded()
        return self._entries.get(key)

    def get(self, key: str, max_age: timedelta | None = None) -> Any | None:
        """Return the cached value, or None on miss or when older than max_age."""
        self._ensure_loaded()
        entry = self._entries.get(key)
        if entry is None:
            return None
        if max_age is not None:
            try:
                if entry.age(self._clock()) > max_age:
                    return None
            except ValueError:
                logger.warning(f"Bad timestamp on cache entry {key} in {self.name}")
                return None
        return entry.value

    def has(self, key: str) -> bool:
        self._ensure_loaded()
        return key in self._entries

    def set(self, key: str, value: Any) -> None:
        self._ensure_loaded()
        self._entries[key] = CacheEntry(value=value, timestamp=self._clock().isoformat())

    def save_to_disk(self) -> bool:
        """Rewrite the whole file. Returns False on error."""
        self._ensure_loaded()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            data = {key: entry.model_dump() for key, entry in self._entries.items()}
            self.path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
            return True
        except Exception as e:
            logger.error(f"Failed to write cache {self.name} to {self.path}: {e}")
            return False
