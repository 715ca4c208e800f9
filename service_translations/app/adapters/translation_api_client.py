"""
Translation API client for the Translations service.
"""

import time
from typing import Any, Dict, Optional

import httpx

from shared.logging import get_logger
from shared.errors import TransportError, InvalidPayloadError
from shared.tracing import get_tracer
from ..models import LookupRequest, TranslationKind, TranslationResult


DEFAULT_FETCH_TIMEOUT = 30.0


class TranslationApiClient:
    """Client for the remote translation API.

    Performs exactly one POST per ``fetch`` call. Retries are left to the
    caller; a timeout or connection failure surfaces as ``TransportError``.
    """

    def __init__(
        self,
        api_url: str,
        host_version: str,
        *,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url
        self.host_version = host_version
        self.timeout = timeout
        self.transport = transport
        self.logger = get_logger("translations.api_client")
        self.tracer = get_tracer("translations.api_client")

    def build_body(self, request: LookupRequest) -> Dict[str, Any]:
        """Shape the outbound form body. Core lookups carry no slug."""
        kind = TranslationKind.parse(request.kind)
        body = {
            "type": kind.value,
            "host_version": self.host_version,
            "locale": request.locale,
            "version": request.version,
        }

        if kind is not TranslationKind.CORE:
            body["slug"] = request.slug

        return body

    async def fetch(self, request: LookupRequest) -> TranslationResult:
        """Fetch translations for ``request`` from the remote API."""
        body = self.build_body(request)

        with self.tracer.start_as_current_span("translations.fetch") as span:
            span.set_attribute("translations.type", body["type"])
            start_time = time.time()

            try:
                async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                    response = await client.post(self.api_url, data=body)
            except httpx.HTTPError as e:
                self.logger.error(
                    "Translation API request failed",
                    url=self.api_url,
                    type=body["type"],
                    error=str(e) or type(e).__name__
                )
                raise TransportError(e, details={"url": self.api_url}) from e

            duration_ms = round((time.time() - start_time) * 1000, 2)
            span.set_attribute("http.status_code", response.status_code)

            if not response.is_success:
                self.logger.warning(
                    "Translation API returned non-success status",
                    url=self.api_url,
                    status_code=response.status_code
                )

            raw_body = response.text
            try:
                result = response.json()
            except ValueError:
                result = None

            if not isinstance(result, (dict, list)):
                self.logger.error(
                    "Translation API returned invalid payload",
                    url=self.api_url,
                    status_code=response.status_code,
                    body=raw_body[:500]
                )
                raise InvalidPayloadError(raw_body, details={"status_code": response.status_code})

            self.logger.debug(
                "Translations retrieved",
                type=body["type"],
                slug=body.get("slug"),
                locale=request.locale,
                duration_ms=duration_ms
            )
            return result
