# catalog_scraper/delegates/__init__.py

# This file makes the delegate classes directly available from the 'delegates' package.
# Instead of: from catalog_scraper.delegates.browser_delegate import BrowserSession
# We can now use: from catalog_scraper.delegates import BrowserSession

from .browser_delegate import BrowserSession
from .page_extractor import PageExtractor, ScriptExtractionStrategy, HtmlExtractionStrategy, STRATEGIES
from .output_delegate import OutputDelegate
