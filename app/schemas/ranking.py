from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.schemas.base import CamelModel


class RankingRow(CamelModel):
    """One ranking joined with its product and platform."""

    rank: int
    rank_date: datetime
    rank_change: Optional[int] = None
    sales_volume: Optional[int] = None

    product_id: int
    product_name: str
    brand: Optional[str] = None
    category_id: Optional[int] = None
    price: Decimal
    original_price: Optional[Decimal] = None
    discount_rate: Optional[Decimal] = None
    image_url: Optional[str] = None
    product_url: str
    rating: Optional[Decimal] = None
    review_count: Optional[int] = None

    platform_id: int
    platform_name: str


class TrendingProductRow(CamelModel):
    id: int
    name: str
    brand: Optional[str] = None
    price: Decimal
    original_price: Optional[Decimal] = None
    discount_rate: Optional[Decimal] = None
    image_url: Optional[str] = None
    product_url: str
    rating: Optional[Decimal] = None
    review_count: Optional[int] = None
    platform_name: str
    rank: int
    rank_change: int
