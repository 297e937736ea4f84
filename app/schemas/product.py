from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.schemas.base import CamelModel


class ProductSearchRow(CamelModel):
    id: int
    name: str
    brand: Optional[str] = None
    category_id: Optional[int] = None
    price: Decimal
    original_price: Optional[Decimal] = None
    discount_rate: Optional[Decimal] = None
    image_url: Optional[str] = None
    product_url: str
    rating: Optional[Decimal] = None
    review_count: Optional[int] = None
    platform_name: str
    last_updated: datetime
