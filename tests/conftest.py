"""Shared fakes: a scripted product source and a stand-in for a Playwright page."""

from typing import Dict, List, Optional

import pytest

from catalog_scraper.exceptions import PageLoadError
from catalog_scraper.models import ProductRecord


def product(slug: str, **fields) -> ProductRecord:
    return ProductRecord(url=f"https://shop.example/products/{slug}", name=slug.title(), **fields)


class ScriptedSource:
    """
    Returns a fixed list per page. Pages past the script come back empty;
    an Exception in the script is raised as the cause of a PageLoadError.
    """

    def __init__(self, pages: List):
        self.pages = pages
        self.calls: List[int] = []

    async def extract(self, page_index: int) -> List[ProductRecord]:
        self.calls.append(page_index)
        if page_index > len(self.pages):
            return []
        entry = self.pages[page_index - 1]
        if isinstance(entry, Exception):
            raise PageLoadError(page_index, entry)
        return list(entry)


class FakePage:
    """Enough of playwright.async_api.Page for PageExtractor."""

    def __init__(self, evaluate_result=None, html: str = "", fail_on: Optional[str] = None,
                 error: Optional[BaseException] = None):
        self.evaluate_result = evaluate_result if evaluate_result is not None else []
        self.html = html
        self.fail_on = fail_on
        self.error = error
        self.url = "about:blank"
        self.calls: List[str] = []
        self.waits: List[Dict] = []

    def _maybe_fail(self, step: str):
        self.calls.append(step)
        if self.fail_on == step:
            raise self.error

    async def goto(self, url, wait_until=None, timeout=None):
        self.url = url
        self._maybe_fail("goto")

    async def wait_for_selector(self, selector, state=None, timeout=None):
        self.waits.append({"selector": selector, "state": state, "timeout": timeout})
        self._maybe_fail(f"wait:{selector}")

    async def evaluate(self, script, arg=None):
        self.evaluate_arg = arg
        self._maybe_fail("evaluate")
        return self.evaluate_result

    async def content(self):
        self._maybe_fail("content")
        return self.html


class FakeSession:
    def __init__(self, page: FakePage):
        self.page = page


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def fake_session(fake_page) -> FakeSession:
    return FakeSession(fake_page)
