"""Catalog store: registry of loaded catalogs and per-locale load state."""

import threading
from typing import Dict, List, Optional

from localization.i18n.models import Catalog, LoadState, LoadStatus
from localization.logging import get_module_logger

logger = get_module_logger()


class CatalogStore:
    """Registry of catalogs keyed by locale.

    Holds the per-locale Loaded-State. State transitions are driven by the
    BundleLoader; ``get`` never triggers loading. Catalogs are immutable once
    registered, so reads need no lock.

    The store is constructed explicitly and passed to its collaborators;
    ``reset()`` tears it down for test isolation.
    """

    def __init__(self):
        self._states: Dict[str, LoadState] = {}
        self._lock = threading.Lock()

    def register(self, locale: str, catalog: Catalog) -> None:
        """Insert or replace the catalog for a locale and mark it LOADED.

        Args:
            locale: Locale identifier.
            catalog: Parsed catalog.
        """
        with self._lock:
            self._states[locale] = LoadState(
                status=LoadStatus.LOADED, catalog=catalog
            )
        logger.debug("catalog_registered", locale=locale)

    def get(self, locale: str) -> Optional[Catalog]:
        """Return the loaded catalog for a locale, or None."""
        state = self._states.get(locale)
        return state.catalog if state else None

    def state(self, locale: str) -> LoadState:
        """Return the Loaded-State for a locale (NOT_LOADED if never requested)."""
        return self._states.get(locale) or LoadState()

    def mark_loading(self, locale: str, pending) -> None:
        """Record the shared in-flight load task for a locale."""
        with self._lock:
            self._states[locale] = LoadState(status=LoadStatus.LOADING, pending=pending)

    def mark_failed(self, locale: str, error: BaseException) -> None:
        """Record a failed load; the next ensure_loaded retries."""
        with self._lock:
            self._states[locale] = LoadState(status=LoadStatus.FAILED, error=error)

    def locales(self) -> List[str]:
        """Locales with a registered catalog."""
        return sorted(
            locale
            for locale, state in self._states.items()
            if state.status is LoadStatus.LOADED
        )

    def reset(self) -> None:
        """Drop every catalog and load state."""
        with self._lock:
            self._states.clear()
        logger.info("catalog_store_reset")
