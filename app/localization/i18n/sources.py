"""Catalog sources: where a locale's raw catalog data comes from.

Defines the contract the BundleLoader fetches through and provides a
YAML/JSON directory source and an in-memory source.
"""

import asyncio
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Set

import yaml

from localization.logging import get_module_logger

logger = get_module_logger()

CATALOG_SUFFIXES = (".yml", ".yaml", ".json")

BOOL_TAG = "tag:yaml.org,2002:bool"


class CatalogYAMLLoader(yaml.SafeLoader):
    """SafeLoader that reads yes/no/on/off/true/false as plain strings.

    Catalog keys such as ``buttons.yes`` would otherwise become booleans.
    """

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


class CatalogSource(ABC):
    """Abstract base for catalog sources.

    Implementations must be safe to call again after a failure: the
    BundleLoader retries a failed locale on the next request.
    """

    @abstractmethod
    async def fetch_catalog(self, locale: str) -> Mapping[str, Any]:
        """Fetch raw catalog data for a locale.

        Args:
            locale: Locale identifier.

        Returns:
            Nested mapping of string keys to strings or mappings.

        Raises:
            FileNotFoundError: If the source has no catalog for the locale.
            ValueError: If the catalog cannot be parsed.
        """

    def available_locales(self) -> Optional[Set[str]]:
        """Locales this source can serve, or None when unknown."""
        return None


class YAMLCatalogSource(CatalogSource):
    """Source reading catalog files from a directory.

    Expects files named ``<locale>.yml`` or ``<domain>.<locale>.yml``
    (``.yaml`` and ``.json`` are accepted too). All files of a locale are
    deep-merged in sorted filename order, later files winning.

    Attributes:
        catalog_dir: Directory containing catalog files.
    """

    def __init__(self, catalog_dir: Path):
        """Initialize the directory source.

        Args:
            catalog_dir: Directory with catalog files.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.catalog_dir = Path(catalog_dir)

        if not self.catalog_dir.is_dir():
            raise ValueError(f"Catalog directory not found: {self.catalog_dir}")

        logger.info("initialized_yaml_catalog_source", catalog_dir=str(self.catalog_dir))

    async def fetch_catalog(self, locale: str) -> Mapping[str, Any]:
        return await asyncio.to_thread(self._read_locale, locale)

    def available_locales(self) -> Set[str]:
        """Detect locales from catalog filenames.

        Returns:
            Set of locale identifiers (e.g., {"en", "es-MX"}).
        """
        return {
            self._locale_of(path)
            for path in self.catalog_dir.iterdir()
            if path.suffix in CATALOG_SUFFIXES
        }

    def files_for(self, locale: str) -> list:
        """Catalog files belonging to a locale, in merge order."""
        return sorted(
            path
            for path in self.catalog_dir.iterdir()
            if path.suffix in CATALOG_SUFFIXES and self._locale_of(path) == locale
        )

    @staticmethod
    def _locale_of(path: Path) -> str:
        # "cart.es-MX.yml" -> "es-MX", "en.yml" -> "en"
        return path.stem.split(".")[-1]

    def _read_locale(self, locale: str) -> Dict[str, Any]:
        files = self.files_for(locale)
        if not files:
            raise FileNotFoundError(
                f"No catalog files found for locale {locale} in {self.catalog_dir}"
            )

        merged: Dict[str, Any] = {}
        for path in files:
            data = self._read_file(path)
            if data is None:
                continue
            if not isinstance(data, dict):
                raise ValueError(f"Catalog file {path} must contain a mapping")
            _deep_merge(merged, data)

        logger.info(
            "read_catalog_files",
            locale=locale,
            file_count=len(files),
            namespace_count=len(merged),
        )
        return merged

    @staticmethod
    def _read_file(path: Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            try:
                if path.suffix == ".json":
                    return json.load(f)
                return yaml.load(f, Loader=CatalogYAMLLoader)
            except (yaml.YAMLError, json.JSONDecodeError) as e:
                logger.error("catalog_parse_error", file=str(path), error=str(e))
                raise ValueError(f"Failed to parse {path}: {e}") from e


class MappingCatalogSource(CatalogSource):
    """Source serving catalogs bundled in memory.

    Attributes:
        catalogs: Mapping of locale -> raw catalog data.
        fetch_counts: Number of fetches per locale.
    """

    def __init__(self, catalogs: Mapping[str, Mapping[str, Any]]):
        self.catalogs = dict(catalogs)
        self.fetch_counts: Dict[str, int] = {}

    async def fetch_catalog(self, locale: str) -> Mapping[str, Any]:
        self.fetch_counts[locale] = self.fetch_counts.get(locale, 0) + 1
        # Yield once so concurrent callers genuinely overlap
        await asyncio.sleep(0)
        try:
            return self.catalogs[locale]
        except KeyError:
            raise FileNotFoundError(f"No bundled catalog for locale {locale}") from None

    def available_locales(self) -> Set[str]:
        return set(self.catalogs)


def _deep_merge(target: Dict[str, Any], incoming: Mapping[str, Any]) -> None:
    for key, value in incoming.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, Mapping):
            _deep_merge(existing, value)
        elif isinstance(value, Mapping):
            target[key] = {}
            _deep_merge(target[key], value)
        else:
            target[key] = value
