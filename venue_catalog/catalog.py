from __future__ import annotations

import logging
from typing import Optional, Tuple

from .errors import CatalogError
from .models import IngestReport, Venue
from .normalize import build_catalog, ingest_feed

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Holds the current catalog.

    The venues tuple is only ever replaced as a whole, so a reader that grabbed
    `venues` keeps a consistent snapshot while a refresh is running. A failed
    refresh leaves the previous catalog in place.
    """

    def __init__(self, venues: Tuple[Venue, ...] = ()):
        self._venues: Tuple[Venue, ...] = tuple(venues)
        self.loaded = bool(self._venues)
        self.last_error: Optional[str] = None

    @property
    def venues(self) -> Tuple[Venue, ...]:
        return self._venues

    def __len__(self) -> int:
        return len(self._venues)

    def replace(self, venues) -> None:
        self._venues = tuple(venues)
        self.loaded = True
        self.last_error = None

    def fail(self, error: CatalogError) -> None:
        self.last_error = str(error)
        logger.warning("catalog refresh failed, keeping %d venues: %s", len(self._venues), error)

    def refresh(self, csv_text: str) -> Tuple[Venue, ...]:
        try:
            venues = build_catalog(csv_text)
        except CatalogError as e:
            self.fail(e)
            raise
        self.replace(venues)
        return self._venues

    def refresh_bytes(self, raw: bytes) -> IngestReport:
        try:
            venues, report = ingest_feed(raw)
        except CatalogError as e:
            self.fail(e)
            raise
        self.replace(venues)
        return report
