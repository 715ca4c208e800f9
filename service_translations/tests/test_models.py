"""
Unit tests for lookup models and cache key derivation.
"""

import pytest

from service_translations.app.models import (
    CACHE_KEY_PREFIX, LookupPayload, LookupRequest, TranslationKind, make_cache_key
)
from shared.errors import InvalidRequestError


class TestTranslationKind:
    """Test cases for TranslationKind parsing."""

    @pytest.mark.parametrize("value,expected", [
        ("plugins", TranslationKind.PLUGIN),
        ("themes", TranslationKind.THEME),
        ("core", TranslationKind.CORE),
        (TranslationKind.THEME, TranslationKind.THEME),
    ])
    def test_parse_supported(self, value, expected):
        assert TranslationKind.parse(value) is expected

    @pytest.mark.parametrize("value", ["invalid", "plugin", "CORE", ""])
    def test_parse_unsupported(self, value):
        with pytest.raises(InvalidRequestError) as exc_info:
            TranslationKind.parse(value)

        assert exc_info.value.code == "INVALID_REQUEST"
        assert exc_info.value.details["kind"] == value


class TestLookupRequest:
    """Test cases for LookupRequest validation."""

    def test_validated_parses_kind(self):
        request = LookupRequest(kind="plugins", slug="akismet", version="5.0", locale="fr_FR")

        validated = request.validated()

        assert validated.kind is TranslationKind.PLUGIN
        assert validated.slug == "akismet"

    def test_core_without_slug(self):
        validated = LookupRequest(kind="core", version="6.4", locale="de_DE").validated()
        assert validated.kind is TranslationKind.CORE
        assert validated.slug is None

    def test_core_with_slug_rejected(self):
        with pytest.raises(InvalidRequestError):
            LookupRequest(kind="core", slug="wordpress", version="6.4", locale="de_DE").validated()

    @pytest.mark.parametrize("slug", [None, ""])
    def test_theme_requires_slug(self, slug):
        with pytest.raises(InvalidRequestError):
            LookupRequest(kind="themes", slug=slug, version="1.0", locale="de_DE").validated()


class TestCacheKey:
    """Test cases for make_cache_key."""

    @pytest.fixture
    def request_args(self):
        return {"kind": "plugins", "slug": "akismet", "version": "5.0", "locale": "fr_FR"}

    def test_key_is_stable(self, request_args):
        first = make_cache_key(LookupRequest(**request_args))
        second = make_cache_key(LookupRequest(**request_args))

        assert first == second

    def test_key_shape(self, request_args):
        key = make_cache_key(LookupRequest(**request_args))

        assert key.startswith(CACHE_KEY_PREFIX)
        assert len(key) == len(CACHE_KEY_PREFIX) + 64

    def test_enum_and_wire_kind_match(self, request_args):
        as_wire = make_cache_key(LookupRequest(**request_args))
        request_args["kind"] = TranslationKind.PLUGIN
        as_enum = make_cache_key(LookupRequest(**request_args))

        assert as_wire == as_enum

    def test_known_digest(self):
        # Pinned so a change to the encoding is caught: keys must survive restarts.
        key = make_cache_key(LookupRequest(kind="core", version="6.4", locale="en_US"))

        assert key == "translations:0e9e7a73a2694a1e05c0eed0eee9fb569519b9b3e28f46745d83c4e88dfebbb4"

    @pytest.mark.parametrize("field,value", [
        ("kind", "themes"),
        ("slug", "jetpack"),
        ("version", "5.0.1"),
        ("locale", "fr_CA"),
    ])
    def test_each_field_changes_key(self, request_args, field, value):
        baseline = make_cache_key(LookupRequest(**request_args))
        request_args[field] = value

        assert make_cache_key(LookupRequest(**request_args)) != baseline

    def test_separator_ambiguity(self):
        left = LookupRequest(kind="plugins", slug="a:b", version="c", locale="fr_FR")
        right = LookupRequest(kind="plugins", slug="a", version="b:c", locale="fr_FR")

        assert make_cache_key(left) != make_cache_key(right)

    def test_invalid_kind_rejected(self):
        with pytest.raises(InvalidRequestError):
            make_cache_key(LookupRequest(kind="invalid", slug="x", version="1", locale="en_US"))


class TestLookupPayload:
    """Test cases for the HTTP payload model."""

    def test_default_locale_applied(self):
        payload = LookupPayload(kind="core", version="6.4")

        request = payload.to_request("en_US")

        assert request.locale == "en_US"
        assert request.slug is None

    def test_explicit_locale_kept(self):
        payload = LookupPayload(kind="plugins", slug="akismet", version="5.0", locale="fr_FR")

        assert payload.to_request("en_US").locale == "fr_FR"
