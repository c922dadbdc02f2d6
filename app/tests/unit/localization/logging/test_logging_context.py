"""Unit tests for localization.logging.context module.

Tests cover:
- bind_locale_context() context manager
- get_bound_context()
- clear_context()
- Context isolation between concurrent tasks
"""

import asyncio

import pytest
import structlog

from localization.logging import bind_locale_context, clear_context, get_bound_context


@pytest.mark.unit
class TestBindLocaleContext:
    """Test suite for bind_locale_context context manager."""

    def test_binds_locale_and_key(self):
        with bind_locale_context(locale="es", key="cart.items"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["locale"] == "es"
            assert ctx["key"] == "cart.items"

    def test_binds_extra_context(self):
        with bind_locale_context(locale="en", source="yaml"):
            assert get_bound_context()["source"] == "yaml"

    def test_none_values_are_not_bound(self):
        with bind_locale_context(locale="en"):
            assert "key" not in get_bound_context()

    def test_context_removed_on_exit(self):
        with bind_locale_context(locale="es", key="common.welcome"):
            pass
        assert get_bound_context() == {}

    def test_context_removed_on_exception(self):
        with pytest.raises(RuntimeError):
            with bind_locale_context(locale="es"):
                raise RuntimeError("boom")
        assert "locale" not in get_bound_context()

    def test_nested_context_restores_outer_values(self):
        with bind_locale_context(locale="es", key="outer"):
            with bind_locale_context(key="inner"):
                assert get_bound_context() == {"locale": "es", "key": "inner"}
            assert get_bound_context() == {"locale": "es", "key": "outer"}

    def test_unrelated_context_is_preserved(self):
        structlog.contextvars.bind_contextvars(request_id="req-1")
        with bind_locale_context(locale="ar"):
            pass
        assert get_bound_context() == {"request_id": "req-1"}

    @pytest.mark.asyncio
    async def test_concurrent_tasks_are_isolated(self):
        seen = {}

        async def translate_in(locale):
            with bind_locale_context(locale=locale):
                await asyncio.sleep(0)
                seen[locale] = get_bound_context()["locale"]

        await asyncio.gather(translate_in("en"), translate_in("es"), translate_in("ar"))

        assert seen == {"en": "en", "es": "es", "ar": "ar"}


@pytest.mark.unit
class TestClearContext:
    """Test suite for clear_context()."""

    def test_clear_context(self):
        structlog.contextvars.bind_contextvars(locale="en", key="k")
        clear_context()
        assert get_bound_context() == {}

    def test_get_bound_context_returns_copy(self):
        structlog.contextvars.bind_contextvars(locale="en")
        ctx = get_bound_context()
        ctx["locale"] = "fr"
        assert get_bound_context()["locale"] == "en"
