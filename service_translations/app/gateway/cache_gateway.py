"""
Read-through cache in front of the translation API.
"""

import time
from typing import Optional, Protocol, TYPE_CHECKING

from shared.logging import get_logger
from shared.errors import FetchError
from ..cache.base import TranslationStore
from ..models import LookupRequest, TranslationResult, make_cache_key

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


DEFAULT_TRANSLATIONS_TTL = 3 * 60 * 60


class TranslationFetcher(Protocol):
    """Anything that can fetch translation data for a validated request."""

    async def fetch(self, request: LookupRequest) -> TranslationResult:
        ...


class TranslationCacheGateway:
    """Serves lookups from the store when fresh, otherwise fetches and writes through.

    Failures are never written to the store. Concurrent misses for the same
    key each fetch and each write; the last write wins.
    """

    def __init__(
        self,
        store: TranslationStore,
        fetcher: TranslationFetcher,
        *,
        ttl_seconds: int = DEFAULT_TRANSLATIONS_TTL,
        metrics: Optional["MetricsCollector"] = None,
    ):
        self.store = store
        self.fetcher = fetcher
        self.ttl_seconds = ttl_seconds
        self.metrics = metrics
        self.logger = get_logger("translations.gateway")

    async def lookup(self, request: LookupRequest) -> TranslationResult:
        """Return translation data for ``request``.

        Raises InvalidRequestError before touching the store or the network
        when the request is malformed, and re-raises TransportError or
        InvalidPayloadError from the fetcher unchanged.
        """
        request = request.validated()
        kind = request.kind.value
        key = make_cache_key(request)

        cached = await self.store.get(key)
        if cached is not None:
            self.logger.debug("Translation cache hit", cache_key=key, type=kind, slug=request.slug)
            self._count("translation_cache_hits_total", kind=kind)
            return cached

        self.logger.debug("Translation cache miss", cache_key=key, type=kind, slug=request.slug)
        self._count("translation_cache_misses_total", kind=kind)

        start_time = time.time()
        try:
            result = await self.fetcher.fetch(request)
        except FetchError as exc:
            self.logger.warning(
                "Translation lookup failed",
                cache_key=key,
                type=kind,
                slug=request.slug,
                locale=request.locale,
                code=exc.code
            )
            self._count("translation_fetch_errors_total", error_type=exc.code)
            raise
        finally:
            if self.metrics:
                self.metrics.observe_histogram(
                    "translation_fetch_duration_seconds",
                    time.time() - start_time,
                    kind=kind
                )

        if not await self.store.set(key, result, self.ttl_seconds):
            self.logger.warning("Translation result not cached", cache_key=key)

        return result

    def _count(self, metric_name: str, **labels):
        if self.metrics:
            self.metrics.increment_counter(metric_name, **labels)
