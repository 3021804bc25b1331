# catalog_scraper/delegates/page_extractor.py
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

from lxml import etree, html as lxml_html
from playwright.async_api import Error as PlaywrightError, Page

from .. import config
from ..exceptions import PageLoadError
from ..models import ProductRecord

logger = logging.getLogger(__name__)

# Runs inside the rendered page with the dict from card_selectors() as `sel`.
# Returns one plain object per product card; filtering on the URL happens on
# the Python side.
EXTRACT_PRODUCTS_JS = """
(sel) => Array.from(document.querySelectorAll(sel.card)).map(product => {
  const link = product.querySelector(sel.link);
  const nameEl = product.querySelector(sel.title);
  const imageEl = product.querySelector(sel.image);
  const priceEl = product.querySelector(sel.price);
  const ratingEl = product.querySelector(sel.rating);

  let ratingAvg = 0;
  let ratingCount = 0;
  if (ratingEl) {
    const avgAttr = ratingEl.getAttribute('data-average-rating');
    const countAttr = ratingEl.getAttribute('data-number-of-reviews');
    ratingAvg = avgAttr ? parseFloat(avgAttr) || 0 : 0;
    ratingCount = countAttr ? parseInt(countAttr, 10) || 0 : 0;
  }

  let imageUrl = '';
  if (imageEl && imageEl.tagName === 'IMG') {
    imageUrl = imageEl.src;
  }

  return {
    url: link ? link.href : '',
    name: nameEl ? nameEl.textContent.trim() : '',
    image: imageUrl,
    price: priceEl ? priceEl.textContent.trim() : '',
    rating_avg: Number.isFinite(ratingAvg) ? ratingAvg : 0,
    rating_count: ratingCount
  };
})
"""

# page.content() may start with an encoding declaration (XHTML); lxml refuses
# those on str input, so the snapshot is parsed as UTF-8 bytes.
_HTML_PARSER = lxml_html.HTMLParser(encoding="utf-8")


def card_grid_selector() -> str:
    return f".{config.PRODUCT_CARD_CLASS}"


def card_selectors() -> Dict[str, str]:
    """CSS selectors handed to EXTRACT_PRODUCTS_JS."""
    return {
        "card": card_grid_selector(),
        "link": f"a.{config.LINK_CLASS}",
        "title": f".{config.TITLE_CLASS}",
        "image": f".{config.IMAGE_CLASS}, img",
        "price": f".{config.PRICE_CLASS} .{config.PRICE_AMOUNT_CLASS}",
        "rating": f".{config.RATING_CLASS}",
    }


def _has_class(name: str) -> str:
    return f"contains(concat(' ', normalize-space(@class), ' '), ' {name} ')"


def card_xpaths() -> Dict[str, str]:
    """The same lookups as card_selectors(), for lxml."""
    return {
        "card": f"//*[{_has_class(config.PRODUCT_CARD_CLASS)}]",
        "link": f".//a[{_has_class(config.LINK_CLASS)}]",
        "title": f".//*[{_has_class(config.TITLE_CLASS)}]",
        "image": f".//*[{_has_class(config.IMAGE_CLASS)} or self::img]",
        "price": f".//*[{_has_class(config.PRICE_CLASS)}]//*[{_has_class(config.PRICE_AMOUNT_CLASS)}]",
        "rating": f".//*[{_has_class(config.RATING_CLASS)}]",
    }


def _first(element, xpath: str):
    found = element.xpath(xpath)
    return found[0] if found else None


def _resolve(base_url: str, value: Optional[str]) -> str:
    value = (value or "").strip()
    return urljoin(base_url, value) if value else ""


def parse_product_grid(html_content: str, base_url: str) -> List[Dict[str, Any]]:
    """
    Parses rendered listing HTML into raw product dicts, mirroring what
    EXTRACT_PRODUCTS_JS returns from inside the browser. Links and image
    sources are resolved against base_url like the DOM's .href / .src do.
    """
    if not html_content or not html_content.strip():
        return []
    root = lxml_html.fromstring(html_content.encode("utf-8"), parser=_HTML_PARSER)
    xpaths = card_xpaths()
    products = []
    for card in root.xpath(xpaths["card"]):
        link = _first(card, xpaths["link"])
        name_el = _first(card, xpaths["title"])
        image_el = _first(card, xpaths["image"])
        price_el = _first(card, xpaths["price"])
        rating_el = _first(card, xpaths["rating"])

        rating_avg = rating_count = 0
        if rating_el is not None:
            rating_avg = rating_el.get("data-average-rating") or 0
            rating_count = rating_el.get("data-number-of-reviews") or 0

        image_url = ""
        if image_el is not None and image_el.tag == "img":
            image_url = _resolve(base_url, image_el.get("src"))

        products.append({
            "url": _resolve(base_url, link.get("href")) if link is not None else "",
            "name": name_el.text_content().strip() if name_el is not None else "",
            "image": image_url,
            "price": price_el.text_content().strip() if price_el is not None else "",
            "rating_avg": rating_avg,
            "rating_count": rating_count,
        })
    logger.debug("Parsed %d product cards from HTML.", len(products))
    return products


class ScriptExtractionStrategy:
    """Evaluates EXTRACT_PRODUCTS_JS inside the rendered page."""
    name = "script"

    async def extract(self, page: Page) -> List[Dict[str, Any]]:
        return await page.evaluate(EXTRACT_PRODUCTS_JS, card_selectors())


class HtmlExtractionStrategy:
    """Takes a snapshot of the rendered HTML and parses it with lxml."""
    name = "html"

    async def extract(self, page: Page) -> List[Dict[str, Any]]:
        html_content = await page.content()
        return parse_product_grid(html_content, page.url)


STRATEGIES = {
    ScriptExtractionStrategy.name: ScriptExtractionStrategy,
    HtmlExtractionStrategy.name: HtmlExtractionStrategy,
}


def is_product_url(url: str) -> bool:
    return bool(url) and config.PRODUCT_PATH_MARKER in url


class PageExtractor:
    """Navigates the shared browser tab to one listing page and returns its products."""
    def __init__(self, session, strategy=None, url_template: str = config.URL_TEMPLATE,
                 timeout: int = config.REQUEST_TIMEOUT):
        self.session = session
        self.strategy = strategy or ScriptExtractionStrategy()
        self.url_template = url_template
        self.timeout = timeout

    def page_url(self, page_index: int) -> str:
        return self.url_template.format(page=page_index)

    async def extract(self, page_index: int) -> List[ProductRecord]:
        """
        Returns the product records visible on page `page_index` (1-based),
        in page order. Raises PageLoadError when navigation, the wait for the
        product grid, or the extraction routine fails.
        """
        if page_index < 1:
            raise ValueError(f"page_index must be >= 1, got {page_index}")

        url = self.page_url(page_index)
        page = self.session.page
        try:
            logger.info("Navigating to listing page %d: %s", page_index, url)
            await page.goto(url, wait_until="domcontentloaded", timeout=self.timeout)
            await page.wait_for_selector("body", state="attached", timeout=self.timeout)
            await page.wait_for_selector(card_grid_selector(), state="visible", timeout=self.timeout)
            raw_products = await self.strategy.extract(page)
        except (PlaywrightError, etree.ParserError, ValueError) as e:
            logger.error("Failed to load page %d from %s: %s", page_index, url, e)
            raise PageLoadError(page_index, e) from e

        if not isinstance(raw_products, list):
            cause = TypeError(f"extraction returned {type(raw_products).__name__}, expected a list")
            raise PageLoadError(page_index, cause)

        records = []
        for raw in raw_products:
            if not isinstance(raw, dict):
                logger.debug("Skipping non-object product entry on page %d: %r", page_index, raw)
                continue
            record = ProductRecord.from_raw(raw)
            if not is_product_url(record.url):
                logger.debug("Skipping card without a product link on page %d: %r", page_index, record.url)
                continue
            records.append(record)

        logger.info("Extracted %d products from page %d.", len(records), page_index)
        return records
