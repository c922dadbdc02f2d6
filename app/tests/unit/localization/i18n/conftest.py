"""Feature-level fixtures for i18n runtime tests.

Provides catalog directories, controllable catalog sources and wired
translators.
"""

import asyncio
from typing import Any, Dict, Mapping

import pytest
import yaml

from localization.i18n import BabelLocaleData, CatalogSource, CatalogStore
from tests.factories.i18n import make_raw_catalogs, make_translator


class GatedCatalogSource(CatalogSource):
    """Catalog source whose fetches block until ``gate`` is set.

    Attributes:
        started: Set once a fetch has begun.
        gate: Fetches wait on this event before returning.
        fetch_count: Total number of fetches.
        failures: Number of upcoming fetches that raise OSError.
    """

    def __init__(self, catalogs: Mapping[str, Mapping[str, Any]]):
        self.catalogs = dict(catalogs)
        self.started = asyncio.Event()
        self.gate = asyncio.Event()
        self.fetch_count = 0
        self.failures = 0

    async def fetch_catalog(self, locale: str) -> Mapping[str, Any]:
        self.fetch_count += 1
        self.started.set()
        await self.gate.wait()
        if self.failures:
            self.failures -= 1
            raise OSError("catalog backend unavailable")
        return self.catalogs[locale]


@pytest.fixture
def raw_catalogs() -> Dict[str, Dict[str, Any]]:
    """Raw en/es/ar catalogs."""
    return make_raw_catalogs()


@pytest.fixture
def gated_source(raw_catalogs):
    """GatedCatalogSource over the raw catalogs (gate closed)."""
    return GatedCatalogSource(raw_catalogs)


@pytest.fixture
def store():
    """Empty catalog store."""
    return CatalogStore()


@pytest.fixture
def locale_data():
    """CLDR locale data with "en" as default locale."""
    return BabelLocaleData(default_locale="en")


@pytest.fixture
def translator(raw_catalogs):
    """Translator over the in-memory raw catalogs."""
    return make_translator(raw_catalogs)


@pytest.fixture
def temp_catalog_dir(tmp_path):
    """Create a temporary directory with sample catalog files.

    Returns a directory structure like:
    - common.en.yml
    - cart.en.yml
    - common.es.yml
    - es-MX.yml
    """
    files = {
        "common.en.yml": {
            "common": {
                "greeting": "Hello {{name}}!",
                "farewell": "Goodbye",
            }
        },
        "cart.en.yml": {
            "cart": {"items": {"one": "{{count}} item", "other": "{{count}} items"}},
            "common": {"checkout": "Checkout"},
        },
        "common.es.yml": {
            "common": {"greeting": "¡Hola {{name}}!"},
        },
        "es-MX.yml": {
            "common": {"greeting": "¡Quihubo {{name}}!"},
        },
    }
    for filename, data in files.items():
        with open(tmp_path / filename, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, allow_unicode=True)
    return tmp_path
