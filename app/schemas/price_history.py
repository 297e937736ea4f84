from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.schemas.base import CamelModel


class PriceHistoryResponse(CamelModel):
    id: int
    product_id: int
    price: Decimal
    original_price: Optional[Decimal] = None
    discount_rate: Optional[Decimal] = None
    recorded_at: datetime
