"""Bundle loader: fetches each locale's catalog once, on demand.

Concurrent requests for a locale that is not loaded yet share a single
underlying fetch (single-flight). The shared fetch runs as its own task;
every caller awaits it through ``asyncio.shield`` so one caller timing out
or being cancelled does not abort the load for the others.
"""

import asyncio
from typing import Iterable, List, Optional

from localization.i18n.errors import BundleLoadError, LoadCancelledError
from localization.i18n.models import Catalog, LoadStatus
from localization.i18n.sources import CatalogSource
from localization.i18n.store import CatalogStore
from localization.logging import get_module_logger

logger = get_module_logger()


class BundleLoader:
    """Loads catalogs from a CatalogSource into a CatalogStore.

    Attributes:
        source: Where raw catalogs are fetched from.
        store: Registry receiving parsed catalogs.
        load_timeout: Seconds a caller waits for a load (None: no limit).
    """

    def __init__(
        self,
        source: CatalogSource,
        store: CatalogStore,
        load_timeout: Optional[float] = None,
    ):
        self.source = source
        self.store = store
        self.load_timeout = load_timeout

    async def ensure_loaded(self, locale: str) -> Catalog:
        """Return the catalog for a locale, loading it if needed.

        Args:
            locale: Locale identifier.

        Returns:
            The registered Catalog.

        Raises:
            BundleLoadError: If the fetch or parse failed, or the wait timed out.
            LoadCancelledError: If the in-flight load was cancelled.
        """
        state = self.store.state(locale)
        if state.status is LoadStatus.LOADED and state.catalog is not None:
            return state.catalog

        # No await between the state check and mark_loading: the check-and-set
        # is atomic on the event loop.
        if state.status is LoadStatus.LOADING and state.pending is not None:
            pending = state.pending
            logger.debug("joining_inflight_load", locale=locale)
        else:
            if state.status is LoadStatus.FAILED:
                logger.info("retrying_failed_load", locale=locale, error=str(state.error))
            pending = asyncio.get_running_loop().create_task(
                self._load(locale), name=f"catalog-load:{locale}"
            )
            pending.add_done_callback(_retrieve_exception)
            self.store.mark_loading(locale, pending)

        return await self._wait(locale, pending)

    async def preload(self, locales: Iterable[str]) -> List[Catalog]:
        """Load several locales concurrently.

        Args:
            locales: Locales to load.

        Returns:
            Catalogs in the order requested.
        """
        return list(
            await asyncio.gather(*(self.ensure_loaded(locale) for locale in locales))
        )

    def cancel(self, locale: str) -> bool:
        """Cancel the in-flight load of a locale.

        Every caller waiting on it gets LoadCancelledError; the next
        ensure_loaded starts a fresh load.

        Args:
            locale: Locale identifier.

        Returns:
            True if a load was cancelled, False if none was in flight.
        """
        state = self.store.state(locale)
        if state.status is not LoadStatus.LOADING or state.pending is None:
            return False
        if state.pending.done():
            return False

        state.pending.cancel()
        self.store.mark_failed(locale, LoadCancelledError(locale))
        logger.warning("catalog_load_cancel_requested", locale=locale)
        return True

    async def _wait(self, locale: str, pending: "asyncio.Task[Catalog]") -> Catalog:
        try:
            if self.load_timeout is None:
                return await asyncio.shield(pending)
            return await asyncio.wait_for(asyncio.shield(pending), self.load_timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "catalog_load_wait_timed_out",
                locale=locale,
                timeout_seconds=self.load_timeout,
            )
            raise BundleLoadError(
                locale, f"timed out after {self.load_timeout} seconds"
            ) from None
        except asyncio.CancelledError:
            if pending.cancelled():
                raise LoadCancelledError(locale) from None
            raise

    async def _load(self, locale: str) -> Catalog:
        logger.info("catalog_load_started", locale=locale)
        try:
            raw = await self.source.fetch_catalog(locale)
            catalog = Catalog.from_mapping(locale, raw)
        except asyncio.CancelledError:
            if self._is_current(locale):
                self.store.mark_failed(locale, LoadCancelledError(locale))
            logger.warning("catalog_load_cancelled", locale=locale)
            raise
        except Exception as e:
            error = BundleLoadError(locale, str(e))
            if self._is_current(locale):
                self.store.mark_failed(locale, error)
            logger.error(
                "catalog_load_failed",
                locale=locale,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise error from e

        # The store was reset or the load cancelled while fetching
        if not self._is_current(locale):
            logger.info("catalog_load_superseded", locale=locale)
            return catalog

        # Registered before any waiter resumes
        self.store.register(locale, catalog)
        logger.info("catalog_loaded", locale=locale, loaded_at=catalog.loaded_at)
        return catalog

    def _is_current(self, locale: str) -> bool:
        return self.store.state(locale).pending is asyncio.current_task()


def _retrieve_exception(task: "asyncio.Task[Catalog]") -> None:
    # Marks a failure retrieved when no waiter is left to read it
    if not task.cancelled():
        task.exception()
