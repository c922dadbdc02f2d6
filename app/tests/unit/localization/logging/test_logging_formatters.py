"""Unit tests for localization.logging.formatters module."""

import pytest

from localization.logging import add_runtime_info, truncate_long_values


@pytest.mark.unit
class TestAddRuntimeInfo:
    """Test suite for add_runtime_info processor factory."""

    def test_adds_app_name_and_environment(self):
        """Processor adds app_name and environment to event dict."""
        processor = add_runtime_info("storefront", "production")
        event_dict = {"event": "translation_done", "locale": "es"}

        result = processor(None, "info", event_dict)

        assert result["app_name"] == "storefront"
        assert result["environment"] == "production"
        assert result["locale"] == "es"

    def test_existing_values_win(self):
        processor = add_runtime_info("storefront", "production")

        result = processor(None, "info", {"event": "e", "environment": "staging"})

        assert result["environment"] == "staging"


@pytest.mark.unit
class TestTruncateLongValues:
    """Test suite for truncate_long_values processor factory."""

    def test_short_values_unchanged(self):
        processor = truncate_long_values(max_length=10)
        result = processor(None, "info", {"event": "e", "key": "short"})
        assert result["key"] == "short"

    def test_long_values_truncated(self):
        processor = truncate_long_values(max_length=10)

        result = processor(None, "info", {"event": "e", "template": "x" * 25})

        assert result["template"].startswith("x" * 10 + "...")
        assert "25 chars total" in result["template"]

    def test_event_never_truncated(self):
        processor = truncate_long_values(max_length=5)
        result = processor(None, "info", {"event": "catalog_load_started"})
        assert result["event"] == "catalog_load_started"

    def test_non_string_values_unchanged(self):
        processor = truncate_long_values(max_length=2)
        chain = ["es-MX", "es", "en"]
        result = processor(None, "info", {"event": "e", "chain": chain, "count": 12345})
        assert result["chain"] is chain
        assert result["count"] == 12345
