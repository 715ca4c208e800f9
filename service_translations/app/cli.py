"""
Run a single translation lookup from the command line.

Goes through the same gateway as the service, so a successful lookup
also primes the configured cache for the next three hours.
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from shared.config import ServiceConfig, get_config
from shared.errors import FetchError, InvalidRequestError
from shared.logging import configure_logging

from .adapters.translation_api_client import TranslationApiClient
from .cache import InMemoryTranslationStore, RedisTranslationStore, TranslationStore
from .gateway.cache_gateway import TranslationCacheGateway
from .models import LookupRequest, TranslationKind, TranslationResult


EXIT_INVALID_REQUEST = 2
EXIT_FETCH_FAILED = 1


async def lookup(
    request: LookupRequest,
    *,
    store: TranslationStore,
    api_client: TranslationApiClient,
    ttl_seconds: int,
) -> TranslationResult:
    gateway = TranslationCacheGateway(store, api_client, ttl_seconds=ttl_seconds)
    try:
        return await gateway.lookup(request)
    finally:
        if isinstance(store, RedisTranslationStore):
            await store.stop()


def _parse_args(argv: Optional[List[str]], config: ServiceConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Look up translation data for a plugin, theme or core release.")
    parser.add_argument("kind", choices=[kind.value for kind in TranslationKind], help="Kind of software unit")
    parser.add_argument("version", help="Release version to look up")
    parser.add_argument("--slug", default=None, help="Plugin or theme slug (omit for core)")
    parser.add_argument("--locale", default=config.default_locale, help="Requester locale")
    parser.add_argument("--api-url", default=config.api_url, help="Translation API endpoint")
    parser.add_argument("--host-version", default=config.host_version, help="Host runtime version to report")
    parser.add_argument("--redis-url", default=config.redis_url, help="Redis connection URL")
    parser.add_argument("--no-cache", action="store_true", help="Use a throwaway in-memory store instead of Redis")
    parser.add_argument("--timeout", type=float, default=config.fetch_timeout_seconds, help="Fetch timeout in seconds")
    parser.add_argument("--ttl", type=int, default=config.cache_ttl_seconds, help="Cache TTL in seconds")
    parser.add_argument("--support-url", default=config.support_url, help=argparse.SUPPRESS)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    config = get_config("translations", 8020)
    # stdout carries only the result
    configure_logging("translations", config.log_level, stream=sys.stderr)

    args = _parse_args(argv, config)
    request = LookupRequest(kind=args.kind, slug=args.slug, version=args.version, locale=args.locale)
    store = InMemoryTranslationStore() if args.no_cache else RedisTranslationStore(args.redis_url)
    api_client = TranslationApiClient(args.api_url, args.host_version, timeout=args.timeout)

    try:
        result = asyncio.run(lookup(request, store=store, api_client=api_client, ttl_seconds=args.ttl))
    except KeyboardInterrupt:
        return 130
    except InvalidRequestError as exc:
        print(f"[translations] invalid request: {exc.message}", file=sys.stderr)
        return EXIT_INVALID_REQUEST
    except FetchError as exc:
        print(f"[translations] {exc.user_message(args.support_url)}", file=sys.stderr)
        print(f"[translations] {exc.code}: {json.dumps(exc.details, default=str)}", file=sys.stderr)
        return EXIT_FETCH_FAILED

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
