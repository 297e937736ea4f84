from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from app.schemas.base import CamelModel


class ProductAnalysisResponse(CamelModel):
    id: int
    product_id: int
    trend_score: Optional[Decimal] = None
    price_stability: Optional[Decimal] = None
    competitiveness: Optional[Decimal] = None
    # free text in storage; strong / moderate / weak in practice
    market_position: Optional[str] = None
    recommendation_score: Optional[Decimal] = None
    analysis_data: Optional[Dict[str, Any]] = None
    last_analyzed: datetime
    created_at: datetime
