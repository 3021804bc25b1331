# catalog_scraper/config.py

# Import the 'Path' object for handling file paths in a way that works on any OS (Windows, macOS, Linux)
from pathlib import Path

# --- Core Settings ---
# The collection listing we paginate through. '{page}' is replaced with the 1-based page number.
URL_TEMPLATE = "https://raidlight.com/collections/all?page={page}"
# The maximum number of unique products collected in one run.
MAX_PRODUCTS = 100
# Only links containing this path segment are treated as product pages.
PRODUCT_PATH_MARKER = "/products/"

# --- Selector Settings ---
# Both extraction strategies build their selectors from these class names.
# The product card container. The scraper waits for the first one to become visible on each page.
PRODUCT_CARD_CLASS = "grid-product"
LINK_CLASS = "grid-product__link" # on the <a> element
TITLE_CLASS = "grid-product__title"
# The first element carrying this class (or the first <img>) is the card image; only an <img> yields a URL.
IMAGE_CLASS = "grid__image-ratio"
PRICE_CLASS = "grid-product__price"
PRICE_AMOUNT_CLASS = "money" # inside the price block
# Review badge carrying data-average-rating / data-number-of-reviews.
RATING_CLASS = "jdgm-prev-badge"

# --- File Path Settings ---
# Log file written next to wherever the scraper is launched from.
LOG_FILE = Path("scraper.log")

# --- Browser/Network Settings ---
# The User-Agent string tells the website what kind of browser we are. We use a common one to avoid being blocked.
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/108.0.0.0 Safari/537.36"
# The size of the virtual browser window.
VIEWPORT = {"width": 1920, "height": 1080}
# The maximum time (in milliseconds) to wait for navigation or for the product grid to render.
REQUEST_TIMEOUT = 30000 # 30 seconds
