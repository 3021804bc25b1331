# catalog_scraper/models/product_models.py

import math
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

_LEADING_INT = re.compile(r"\s*([-+]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def _parse_int(value: Any) -> int:
    """Lenient integer parse: reads a leading integer, 0 when there is none."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def _parse_float(value: Any) -> float:
    """Lenient float parse: reads a leading number, 0.0 when there is none or it is not finite."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_FLOAT.match(str(value))
        number = float(match.group(1)) if match else 0.0
    return number if math.isfinite(number) else 0.0


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


@dataclass(frozen=True)
class ProductRecord:
    """
    One product card scraped from a listing page. The URL is the
    deduplication key; every other field may be empty or zero when the
    card layout differs from what the selectors expect.
    """
    url: str
    name: str = ""
    image: str = ""
    price: str = ""
    rating_avg: float = 0.0
    rating_count: int = 0

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "ProductRecord":
        """Builds a record from the loosely typed dict an extraction strategy returns."""
        return cls(
            url=_text(raw.get("url")),
            name=_text(raw.get("name")),
            image=_text(raw.get("image")),
            price=_text(raw.get("price")),
            rating_avg=_parse_float(raw.get("rating_avg")),
            rating_count=_parse_int(raw.get("rating_count")),
        )

    @property
    def has_rating(self) -> bool:
        return self.rating_count > 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
