"""
Translations lookup service.
"""

from typing import Dict, Optional

from fastapi.responses import JSONResponse

from shared.base_service import BaseService
from shared.config import ServiceConfig
from shared.logging import set_locale_context

from .adapters.translation_api_client import TranslationApiClient
from .cache import InMemoryTranslationStore, RedisTranslationStore, TranslationStore
from .gateway.cache_gateway import TranslationCacheGateway
from .models import LookupPayload


class TranslationsService(BaseService):
    """Translations service implementation.

    Collaborators are built here and handed to the gateway explicitly;
    tests and embedding hosts can pass their own.
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        *,
        store: Optional[TranslationStore] = None,
        api_client: Optional[TranslationApiClient] = None,
    ):
        super().__init__("translations", 8020, config=config)

        self.store = store or self._build_store()
        self.api_client = api_client or TranslationApiClient(
            self.config.api_url,
            self.config.host_version,
            timeout=self.config.fetch_timeout_seconds
        )
        self.gateway = TranslationCacheGateway(
            self.store,
            self.api_client,
            ttl_seconds=self.config.cache_ttl_seconds,
            metrics=self.metrics
        )

        self._setup_translations_routes()

    def _build_store(self) -> TranslationStore:
        if self.config.cache_backend == "memory":
            return InMemoryTranslationStore()
        return RedisTranslationStore(self.config.redis_url)

    def _setup_translations_routes(self):
        """Set up translations-specific routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "translations",
                "message": "Translations lookup service",
                "version": "1.0.0",
                "capabilities": ["lookup", "caching"]
            }

        @self.app.post("/translations/lookup")
        async def lookup_translations(payload: LookupPayload):
            """Look up translation data for a plugin, theme or core release."""
            request = payload.to_request(self.config.default_locale)
            set_locale_context(request.locale)
            result = await self.gateway.lookup(request)
            return JSONResponse(content=result)

    async def _check_dependencies(self) -> Dict[str, str]:
        healthy = await self.store.health_check()
        return {"cache": "ok" if healthy else "unavailable"}

    async def stop(self):
        """Release store connections."""
        if isinstance(self.store, RedisTranslationStore):
            await self.store.stop()


def create_app(config: Optional[ServiceConfig] = None):
    """Create translations service application."""
    service = TranslationsService(config)
    return service.app


if __name__ == "__main__":
    service = TranslationsService()
    service.run()
