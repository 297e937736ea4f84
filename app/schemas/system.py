from pydantic import BaseModel
from typing import Optional, Dict, Any
from datetime import datetime


class HealthCheckResponse(BaseModel):
    status: str
    now: datetime
    uptime_seconds: float
    db_ok: bool
    extra: Optional[Dict[str, Any]] = None


class SystemMetricsResponse(BaseModel):
    uptime_seconds: float
    now: datetime

    # middleware counters
    requests_count: int
    avg_response_ms: Optional[float] = None

    # DB metrics
    today_rankings: int
    watchlist_entries: int
    last_collection_status: Optional[str] = None
    last_collection_at: Optional[datetime] = None

    extra: Optional[Dict[str, Any]] = None
