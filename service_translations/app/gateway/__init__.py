"""
Read-through cache gateway for translation lookups.
"""

from .cache_gateway import TranslationCacheGateway, DEFAULT_TRANSLATIONS_TTL

__all__ = ["TranslationCacheGateway", "DEFAULT_TRANSLATIONS_TTL"]
