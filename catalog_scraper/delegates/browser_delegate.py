# catalog_scraper/delegates/browser_delegate.py
import logging
from playwright.async_api import async_playwright, Playwright, Browser, BrowserContext, Page
from typing import Dict, Optional

from ..exceptions import BrowserSessionError

logger = logging.getLogger(__name__)

class BrowserSession:
    """
    Owns the headless browser for one scraping run.

    A single tab is opened on entry and reused for every listing page, so the
    current URL is shared state between page extractions. Everything is closed
    in __aexit__, whether the run finished or failed.
    """
    def __init__(self, user_agent: str, viewport: Dict, headless: bool = True):
        self.user_agent = user_agent
        self.viewport = viewport
        self.headless = headless
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def __aenter__(self):
        logger.debug("Starting Playwright and launching browser (headless=%s)...", self.headless)
        self._playwright = await async_playwright().start()
        try:
            self._browser = await self._playwright.chromium.launch(headless=self.headless)
            self._context = await self._browser.new_context(
                user_agent=self.user_agent,
                viewport=self.viewport,
            )
            self._page = await self._context.new_page()
        except BaseException:
            await self._close()
            raise
        logger.debug("Playwright browser launched, context and page created.")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        logger.debug("Closing browser, context, and stopping Playwright...")
        await self._close()
        logger.debug("Playwright resources released.")

    async def _close(self):
        if self._page:
            await self._page.close()
        if self._context:
            await self._context.close()
        if self._browser:
            await self._browser.close()
        if self._playwright:
            await self._playwright.stop()
        self._page = None
        self._context = None
        self._browser = None
        self._playwright = None

    @property
    def page(self) -> Page:
        """The shared tab used for navigation."""
        if self._page is None:
            raise BrowserSessionError("Browser session is not open. Use it inside 'async with'.")
        return self._page
