"""In-memory translation store for single-process hosts and tests."""

import copy
import threading
import time
from typing import Callable, Dict, Optional, Tuple

from shared.logging import get_logger
from ..models import TranslationResult
from .base import TranslationStore


class InMemoryTranslationStore(TranslationStore):
    """
    Process-local store with per-entry expiry.

    Values are deep-copied on the way in and out so callers cannot mutate
    what is cached. Every write also drops entries that have already
    expired, so keys that are never read again do not accumulate.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, Tuple[TranslationResult, float]] = {}
        self._lock = threading.Lock()
        self.logger = get_logger("translations.cache.memory")

    async def get(self, key: str) -> Optional[TranslationResult]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                self.logger.debug("Expired translation entry dropped", cache_key=key)
                return None

            return copy.deepcopy(value)

    async def set(self, key: str, value: TranslationResult, ttl_seconds: int) -> bool:
        with self._lock:
            now = self._clock()
            evicted = self._evict_expired(now)
            self._entries[key] = (copy.deepcopy(value), now + ttl_seconds)

        if evicted:
            self.logger.debug("Expired translation entries evicted", count=evicted)
        self.logger.debug("Cached translation entry", cache_key=key, ttl=ttl_seconds)
        return True

    def _evict_expired(self, now: float) -> int:
        # Caller holds self._lock.
        expired = [key for key, (_, expires_at) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and self._clock() < entry[1]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
