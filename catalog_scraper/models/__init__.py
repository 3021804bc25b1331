# catalog_scraper/models/__init__.py

# This file makes the model classes directly available from the 'models' package.
# Instead of: from catalog_scraper.models.product_models import ProductRecord
# We can now use: from catalog_scraper.models import ProductRecord

from .product_models import ProductRecord
