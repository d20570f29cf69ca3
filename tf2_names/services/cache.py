"""
Catalog holder
Keeps the current catalog snapshot and swaps it wholesale on refresh
"""

import logging
import time
from threading import Lock
from typing import Any, Callable, Mapping, Optional

from ..config import CATALOG_MAX_AGE_SECONDS
from .catalog import CatalogIndex

logger = logging.getLogger(__name__)

CatalogSource = Callable[[], Mapping[str, Any]]


class CatalogHolder:
    """
    Holder for the current CatalogIndex

    Snapshots are never modified; refresh builds a new one and replaces
    the reference under the lock, so readers see either the old or the
    new catalog and nothing in between.
    """

    def __init__(self, catalog: Optional[CatalogIndex] = None, max_age_seconds: int = CATALOG_MAX_AGE_SECONDS):
        self.max_age_seconds = max_age_seconds
        self._catalog = catalog
        self.lock = Lock()

    def get(self) -> Optional[CatalogIndex]:
        """Current snapshot, or None before the first load"""
        with self.lock:
            return self._catalog

    def replace(self, catalog: CatalogIndex) -> Optional[CatalogIndex]:
        """Install a new snapshot and return the previous one"""
        with self.lock:
            previous = self._catalog
            self._catalog = catalog
        logger.info(f"Catalog snapshot replaced (version={catalog.version}, items={len(catalog.items)})")
        return previous

    def refresh(self, source: CatalogSource, version: Optional[str] = None) -> CatalogIndex:
        """
        Build a snapshot from a source and install it

        Args:
            source: Callable returning the raw catalog mapping
            version: Version marker stored on the snapshot

        Returns:
            The new snapshot. On failure the current one stays in place
            and the error is re-raised.
        """
        try:
            catalog = CatalogIndex(source(), version=version)
        except Exception as e:
            logger.error(f"Catalog refresh failed: {e}")
            raise

        self.replace(catalog)
        return catalog

    def is_stale(self) -> bool:
        """True when no snapshot is held or it is older than max_age_seconds"""
        catalog = self.get()
        if catalog is None:
            return True
        age_seconds = time.time() - catalog.time / 1000
        return age_seconds >= self.max_age_seconds

    def clear(self) -> None:
        """Drop the current snapshot"""
        with self.lock:
            self._catalog = None
