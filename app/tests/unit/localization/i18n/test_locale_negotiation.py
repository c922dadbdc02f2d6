"""Tests for localization.i18n.negotiation module."""

import pytest

from localization.i18n import LanguageNegotiator, negotiate_from_header
from localization.i18n.negotiation import parse_accept_language

AVAILABLE = ["en", "es", "es-MX", "ar"]


class TestLanguageNegotiator:
    """Tests for LanguageNegotiator."""

    def test_matches_language_exact(self):
        """matches_language() matches identical tags."""
        assert LanguageNegotiator.matches_language("es-MX", "es-MX")

    def test_matches_language_is_case_insensitive(self):
        assert LanguageNegotiator.matches_language("es-mx", "es-MX")

    def test_matches_language_accepts_underscores(self):
        assert LanguageNegotiator.matches_language("es_MX", "es-MX", strict=True)

    def test_matches_language_only(self):
        """matches_language() matches on language when not strict."""
        assert LanguageNegotiator.matches_language("pt-BR", "pt")
        assert not LanguageNegotiator.matches_language("pt-BR", "pt", strict=True)

    def test_different_languages_do_not_match(self):
        assert not LanguageNegotiator.matches_language("fr", "en")

    def test_find_best_match_prefers_exact(self):
        """An exact match beats a language-only match for the same tag."""
        result = LanguageNegotiator.find_best_match(["es-MX"], ["es", "es-MX"])
        assert result == "es-MX"

    def test_find_best_match_language_only(self):
        assert LanguageNegotiator.find_best_match(["es-AR"], AVAILABLE) == "es"

    def test_find_best_match_respects_preference_order(self):
        assert LanguageNegotiator.find_best_match(["fr", "ar", "en"], AVAILABLE) == "ar"

    def test_find_best_match_skips_wildcard(self):
        assert LanguageNegotiator.find_best_match(["*"], AVAILABLE, default="en") == "en"

    def test_find_best_match_default(self):
        assert LanguageNegotiator.find_best_match(["de"], AVAILABLE) is None
        assert LanguageNegotiator.find_best_match(["de"], AVAILABLE, default="en") == "en"


class TestParseAcceptLanguage:
    """Tests for parse_accept_language()."""

    def test_orders_by_quality(self):
        assert parse_accept_language("en;q=0.5,fr-CA,fr;q=0.9") == ["fr-CA", "fr", "en"]

    def test_ties_keep_header_order(self):
        assert parse_accept_language("es, en") == ["es", "en"]

    def test_zero_quality_is_dropped(self):
        assert parse_accept_language("en, fr;q=0") == ["en"]

    def test_invalid_quality_counts_as_one(self):
        assert parse_accept_language("fr;q=0.5, de;q=abc") == ["de", "fr"]

    @pytest.mark.parametrize("header", [None, "", " , "])
    def test_empty_header(self, header):
        assert parse_accept_language(header) == []


class TestNegotiateFromHeader:
    """Tests for negotiate_from_header()."""

    def test_quality_ordering(self):
        result = negotiate_from_header("fr-FR;q=0.9,es-MX;q=0.95", AVAILABLE, "en")
        assert result == "es-MX"

    def test_language_only_match(self):
        assert negotiate_from_header("ar-EG", AVAILABLE, "en") == "ar"

    def test_no_match_returns_default(self):
        assert negotiate_from_header("de-DE", AVAILABLE, "en") == "en"

    def test_missing_header_returns_default(self):
        assert negotiate_from_header(None, AVAILABLE, "en") == "en"
