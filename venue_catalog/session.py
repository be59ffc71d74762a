"""
Per-user search state layered over a CatalogStore.

Only the inputs and the page number are kept; the ranked results are
recomputed from the catalog whenever a search is submitted, and the page is
reset to 1 every time.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import List

from . import config
from .catalog import CatalogStore
from .models import Venue
from .paginate import paginate, visible_page_numbers
from .search import search
from .suggest import genre_domain, location_domain, suggestions


@dataclass(frozen=True)
class PageView:
    items: List[Venue]
    total: int
    total_pages: int
    page: int
    pages: List[int]


class SearchSession:
    def __init__(
        self,
        store: CatalogStore,
        page_size: int = config.PAGE_SIZE,
        window_size: int = config.PAGE_WINDOW,
        suggestion_limit: int = config.SUGGESTION_LIMIT,
    ):
        self.store = store
        self.page_size = page_size
        self.window_size = window_size
        self.suggestion_limit = suggestion_limit
        self.location = ""
        self.genre = ""
        self.page = 1
        self.searched = False
        self.searching = False
        self._results: List[Venue] = []

    @property
    def results(self) -> List[Venue]:
        return list(self._results)

    def submit(self, location: str = "", genre: str = "") -> List[Venue]:
        self.location = location
        self.genre = genre
        self._results = search(self.store.venues, location, genre)
        self.page = 1
        self.searched = True
        return self.results

    async def submit_with_delay(
        self, location: str = "", genre: str = "", delay: float = config.SEARCH_DELAY_SECONDS
    ) -> List[Venue]:
        self.searching = True
        try:
            if delay > 0:
                await asyncio.sleep(delay)
            return self.submit(location, genre)
        finally:
            self.searching = False

    def go_to(self, page: int) -> int:
        last = paginate(self._results, self.page_size, 1).total_pages
        self.page = max(1, min(page, last)) if last else 1
        return self.page

    def current_page_view(self) -> PageView:
        page = paginate(self._results, self.page_size, self.page)
        return PageView(
            items=page.items,
            total=len(self._results),
            total_pages=page.total_pages,
            page=self.page,
            pages=visible_page_numbers(page.total_pages, self.page, self.window_size),
        )

    def clear(self) -> None:
        self.location = ""
        self.genre = ""
        self._results = []
        self.page = 1
        self.searched = False

    def location_suggestions(self, partial: str) -> List[str]:
        return suggestions(partial, location_domain(self.store.venues), self.suggestion_limit)

    def genre_suggestions(self, partial: str) -> List[str]:
        return suggestions(partial, genre_domain(self.store.venues), self.suggestion_limit)
