"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_raw_catalogs,
    make_settings,
    make_translator,
)

__all__ = [
    "make_catalog",
    "make_raw_catalogs",
    "make_settings",
    "make_translator",
]
