import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Request
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database.connection import get_db
from app.models.data_collection_log import DataCollectionLog
from app.models.ranking import Ranking
from app.models.watchlist import Watchlist
from app.schemas.system import HealthCheckResponse, SystemMetricsResponse
from app.services.filters import day_bounds

logger = logging.getLogger(__name__)

router = APIRouter(tags=["System"])


def _uptime_seconds(request: Request, now: datetime) -> float:
    start_time = getattr(request.app.state, "start_time", now)
    return (now - start_time).total_seconds()


@router.get("/health", response_model=HealthCheckResponse)
def health_check(request: Request, db: Session = Depends(get_db)):
    """
    Lightweight public health check.
    Returns ok + DB connectivity check (SELECT 1).
    """
    now = datetime.utcnow()

    db_ok = True
    extra = {}
    try:
        db.execute(select(1))
    except SQLAlchemyError as e:
        logger.warning("Health check query failed: %s", e)
        db_ok = False
        extra["db_error"] = e.__class__.__name__

    return HealthCheckResponse(
        status="ok" if db_ok else "degraded",
        now=now,
        uptime_seconds=_uptime_seconds(request, now),
        db_ok=db_ok,
        extra=extra or None,
    )


@router.get("/metrics", response_model=SystemMetricsResponse)
def system_metrics(request: Request, db: Session = Depends(get_db)):
    """
    System metrics in JSON form.
    Uses in-process counters stored on app.state.metrics and DB-derived metrics.
    """
    now = datetime.utcnow()

    metrics = getattr(request.app.state, "metrics", None) or {}
    requests_count = int(metrics.get("requests", 0))
    total_response_ms = float(metrics.get("total_response_ms", 0.0))
    avg_response_ms = (total_response_ms / requests_count) if requests_count > 0 else None

    start, end = day_bounds(now.date())
    today_rankings = (
        db.query(func.count(Ranking.id))
        .filter(Ranking.rank_date >= start, Ranking.rank_date < end)
        .scalar()
    ) or 0
    watchlist_entries = db.query(func.count(Watchlist.id)).scalar() or 0

    last_run = (
        db.query(DataCollectionLog)
        .order_by(DataCollectionLog.started_at.desc(), DataCollectionLog.id.desc())
        .first()
    )

    return SystemMetricsResponse(
        uptime_seconds=_uptime_seconds(request, now),
        now=now,
        requests_count=requests_count,
        avg_response_ms=avg_response_ms,
        today_rankings=int(today_rankings),
        watchlist_entries=int(watchlist_entries),
        last_collection_status=last_run.status if last_run else None,
        last_collection_at=last_run.started_at if last_run else None,
    )
