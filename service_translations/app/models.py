"""
Lookup data models for the Translations service.
"""

import hashlib
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from shared.errors import InvalidRequestError


# Decoded JSON container returned by the translation API. Opaque to this service.
TranslationResult = Union[Dict[str, Any], List[Any]]

CACHE_KEY_PREFIX = "translations:"


class TranslationKind(str, Enum):
    """Kinds of software unit that carry translations."""
    PLUGIN = "plugins"
    THEME = "themes"
    CORE = "core"

    @classmethod
    def parse(cls, value: Union["TranslationKind", str]) -> "TranslationKind":
        """Coerce a kind or its wire name, raising InvalidRequestError otherwise."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidRequestError(details={"kind": str(value)})


@dataclass(frozen=True)
class LookupRequest:
    """A single request for translation data."""
    kind: Union[TranslationKind, str]
    version: str
    locale: str
    slug: Optional[str] = None

    def validated(self) -> "LookupRequest":
        """Return a copy with a parsed kind, enforcing the slug/kind pairing."""
        kind = TranslationKind.parse(self.kind)

        if kind is TranslationKind.CORE and self.slug is not None:
            raise InvalidRequestError(
                "Core translations are not addressed by slug.",
                details={"kind": kind.value, "slug": self.slug}
            )
        if kind is not TranslationKind.CORE and not self.slug:
            raise InvalidRequestError(
                f"A slug is required for {kind.value} translations.",
                details={"kind": kind.value}
            )

        return LookupRequest(kind=kind, version=self.version, locale=self.locale, slug=self.slug)


def make_cache_key(request: LookupRequest) -> str:
    """Derive the store key for a lookup.

    The four fields are encoded as a JSON array before hashing so that no
    choice of separator inside a slug or version can make two different
    requests encode to the same string.
    """
    kind = TranslationKind.parse(request.kind)
    canonical = json.dumps(
        [kind.value, request.slug, request.version, request.locale],
        separators=(",", ":"),
        ensure_ascii=True
    )
    return f"{CACHE_KEY_PREFIX}{hashlib.sha256(canonical.encode('utf-8')).hexdigest()}"


class LookupPayload(BaseModel):
    """HTTP body for a lookup request."""
    kind: str = Field(..., description="plugins, themes or core")
    slug: Optional[str] = None
    version: str
    locale: Optional[str] = None

    def to_request(self, default_locale: str) -> LookupRequest:
        return LookupRequest(
            kind=self.kind,
            slug=self.slug,
            version=self.version,
            locale=self.locale or default_locale
        )
