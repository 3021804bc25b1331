# catalog_scraper/delegates/output_delegate.py
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from rich.console import Console

from ..models import ProductRecord

logger = logging.getLogger(__name__)

class OutputDelegate:
    """Handles rendering the assembled catalog to stdout and to disk."""
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.console = Console(file=self.stream, highlight=False, markup=False, emoji=False, soft_wrap=True)

    @staticmethod
    def to_json(products: List[ProductRecord]) -> str:
        return json.dumps([product.to_dict() for product in products], indent=2, ensure_ascii=False)

    def emit(self, products: List[ProductRecord], as_json: bool, max_products: int):
        if as_json:
            self.stream.write(self.to_json(products) + "\n")
            self.stream.flush()
        else:
            self.print_listing(products, max_products)

    def print_listing(self, products: List[ProductRecord], max_products: int):
        """Numbered, human-readable listing. Never prints more than max_products entries."""
        self.console.print(f"These are the {len(products)} products Found :\n")
        for i, product in enumerate(products[:max(max_products, 0)], start=1):
            self.console.print(f"{i}. {product.name}")
            self.console.print(f"   URL: {product.url}")
            self.console.print(f"   Price: {product.price}")
            if product.has_rating:
                self.console.print(f"   Rating: {product.rating_avg:.2f}/5 ({product.rating_count} reviews)")
            self.console.print(f"   Image: {product.image}\n")

    def save_catalog_json(self, products: List[ProductRecord], file_path: Path) -> Path:
        """Saves the catalog to a JSON file, creating parent directories as needed."""
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with file_path.open("w", encoding="utf-8") as f:
                f.write(self.to_json(products) + "\n")
            logger.info("Saved %d products to: %s", len(products), file_path)
            return file_path
        except OSError as e:
            logger.error("Failed to save catalog to %s: %s", file_path, e, exc_info=True)
            raise
