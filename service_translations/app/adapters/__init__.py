"""
Adapters package for the Translations service.

Contains the HTTP client wrapper for the remote translation API. The
adapter encapsulates the endpoint URL, the request shape, the timeout and
the mapping of failures onto shared errors.

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .translation_api_client import TranslationApiClient

__all__ = ["TranslationApiClient"]
