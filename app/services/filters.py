"""Query-string filter normalization shared by the ranking and search reads.

Filters are parsed once into an immutable ``RankingFilter`` and applied to a
query by ``apply_filter``; nothing here keeps state between requests.
"""
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple

from fastapi import HTTPException
from sqlalchemy.orm import Query

from app.models.platform import Platform
from app.models.product import Product

ALL_PLATFORMS = "all_platforms"
ALL_CATEGORIES = "all_categories"

# signed 64-bit, the widest INTEGER the database drivers bind
INT_MIN = -2**63
INT_MAX = 2**63 - 1


@dataclass(frozen=True)
class RankingFilter:
    platform: Optional[str] = None  # matches Platform.name
    category_id: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.platform is None and self.category_id is None


def _lenient_int(value) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    else:
        try:
            parsed = int(str(value).strip())
        except ValueError:
            return None
    if not INT_MIN <= parsed <= INT_MAX:
        return None
    return parsed


def build_filter(platform: Optional[str] = None, category=None) -> RankingFilter:
    """Normalize raw query values into a ``RankingFilter``.

    Sentinel values and blanks mean "no filter"; a category that is not a
    number, or too large to store, is dropped instead of rejected.
    """
    platform_value = platform.strip() if isinstance(platform, str) else None
    if not platform_value or platform_value == ALL_PLATFORMS:
        platform_value = None

    category_id = None
    if isinstance(category, str):
        stripped = category.strip()
        if stripped and stripped != ALL_CATEGORIES:
            category_id = _lenient_int(stripped)
    else:
        category_id = _lenient_int(category)

    return RankingFilter(platform=platform_value, category_id=category_id)


def apply_filter(query: Query, spec: RankingFilter) -> Query:
    """Add the filter's equality predicates to a query joining Product and Platform."""
    if spec.platform is not None:
        query = query.filter(Platform.name == spec.platform)
    if spec.category_id is not None:
        query = query.filter(Product.category_id == spec.category_id)
    return query


def parse_limit(value, default: int, maximum: int) -> int:
    limit = _lenient_int(value)
    if limit is None:
        limit = default
    return max(1, min(limit, maximum))


def parse_id(value, label: str = "ID") -> int:
    """Parse a required path identifier, raising 400 when it is not a positive integer."""
    parsed = _lenient_int(value)
    if parsed is None or parsed < 1:
        raise HTTPException(status_code=400, detail=f"Invalid {label}")
    return parsed


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Half-open [start, end) datetime range covering ``day``."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def utc_today() -> date:
    return datetime.utcnow().date()
