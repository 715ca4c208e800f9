"""
Redis caching layer for the Translations service.
"""

import json
from typing import Optional

import redis.asyncio as redis

from shared.logging import get_logger
from shared.errors import TranslationsException
from ..models import TranslationResult
from .base import TranslationStore


class RedisTranslationStore(TranslationStore):
    """Redis-backed translation store. Expiry is delegated to SETEX."""

    def __init__(self, redis_url: str):
        self.redis_url = redis_url
        self.logger = get_logger("translations.cache.redis")
        self.redis: Optional[redis.Redis] = None

    async def start(self):
        """Start the Redis store."""
        try:
            self.redis = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                health_check_interval=30
            )

            await self.redis.ping()

            self.logger.info("Redis cache started")

        except Exception as e:
            self.logger.error("Failed to start Redis cache", error=str(e))
            raise TranslationsException("REDIS_START_FAILED", str(e))

    async def stop(self):
        """Stop the Redis store."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self.logger.info("Redis cache stopped")

    async def _get_redis(self) -> redis.Redis:
        if self.redis is None:
            self.redis = redis.from_url(self.redis_url, encoding="utf-8", decode_responses=True)
        return self.redis

    async def get(self, key: str) -> Optional[TranslationResult]:
        """Get cached translation result. Store failures read as a miss."""
        try:
            client = await self._get_redis()
            cached_data = await client.get(key)
            if not cached_data:
                return None

            value = json.loads(cached_data)
            self.logger.debug("Cache hit for translations", cache_key=key)
            return value

        except Exception as e:
            self.logger.error("Error getting cached translations", cache_key=key, error=str(e))
            return None

    async def set(self, key: str, value: TranslationResult, ttl_seconds: int) -> bool:
        """Cache a translation result for ``ttl_seconds``."""
        try:
            client = await self._get_redis()
            await client.setex(key, ttl_seconds, json.dumps(value))

            self.logger.debug("Cached translations", cache_key=key, ttl=ttl_seconds)
            return True

        except Exception as e:
            self.logger.error("Error caching translations", cache_key=key, error=str(e))
            return False

    async def health_check(self) -> bool:
        """Check Redis health."""
        try:
            client = await self._get_redis()
            await client.ping()
            return True
        except Exception:
            return False
