from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel


class WatchlistCreate(CamelModel):
    user_email: str = Field(min_length=1)
    product_id: int
    notify_price_change: bool = False
    notify_rank_change: bool = False
    target_price: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)


class WatchlistResponse(CamelModel):
    id: int
    user_email: str
    product_id: int
    notify_price_change: Optional[bool] = False
    notify_rank_change: Optional[bool] = False
    target_price: Optional[Decimal] = None
    created_at: datetime


class WatchlistItem(CamelModel):
    """Watchlist entry joined with the product's current data."""

    id: int
    user_email: str
    product_id: int
    product_name: str
    current_price: Decimal
    target_price: Optional[Decimal] = None
    platform_name: str
    image_url: Optional[str] = None
    product_url: str
    notify_price_change: Optional[bool] = False
    notify_rank_change: Optional[bool] = False
    created_at: datetime
