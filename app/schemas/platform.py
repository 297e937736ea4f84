from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.schemas.base import CamelModel


class PlatformResponse(CamelModel):
    id: int
    name: str
    display_name: str
    base_url: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


# ---------- Platform comparison ----------

class PlatformComparisonItem(CamelModel):
    platform_id: int
    platform_name: str
    total_products: int = 0
    avg_price: Optional[Decimal] = None
    top_rank_product: Optional[str] = None
