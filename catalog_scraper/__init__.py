# catalog_scraper/__init__.py

# Storefront catalog scraper: drives a headless browser through a paginated
# collection and assembles a bounded, deduplicated list of products.

__version__ = "0.1.0"
