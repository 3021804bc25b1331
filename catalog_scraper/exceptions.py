# catalog_scraper/exceptions.py
"""Exceptions raised while scraping the storefront catalog."""

from typing import Any, Dict, Optional


class ScraperError(Exception):
    """Base exception for the catalog scraper."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class BrowserSessionError(ScraperError):
    """The browser session was used outside of its `async with` block."""

    pass


class PageLoadError(ScraperError):
    """
    Navigation, readiness wait or extraction failed for one listing page.

    A grid that never renders (end of catalog) and a network failure both end
    up here; the two are not told apart.
    """

    def __init__(self, page_index: int, cause: BaseException):
        super().__init__(
            f"failed to navigate or evaluate page {page_index}: {cause}",
            {"page_index": page_index},
        )
        self.page_index = page_index
        self.cause = cause


class CatalogAssemblyError(ScraperError):
    """The run was aborted by a page failure. Nothing collected so far is returned."""

    def __init__(self, page_index: int, discarded: int):
        super().__init__(
            f"error scraping page {page_index}",
            {"page_index": page_index, "discarded": discarded},
        )
        self.page_index = page_index
        self.discarded = discarded
