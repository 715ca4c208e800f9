"""
Cache package for the Translations service.

Provides the store interface the lookup gateway reads and writes, with a
Redis-backed implementation for deployments and a process-local one for
single-process hosts and tests. Stores own expiry; callers never delete.
"""

from .base import TranslationStore
from .memory_cache import InMemoryTranslationStore
from .redis_cache import RedisTranslationStore

__all__ = [
    "TranslationStore",
    "InMemoryTranslationStore",
    "RedisTranslationStore",
]
