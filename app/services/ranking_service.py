import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.platform import Platform
from app.models.product import Product
from app.models.ranking import Ranking
from app.schemas.platform import PlatformComparisonItem
from app.schemas.ranking import RankingRow, TrendingProductRow
from app.services.filters import RankingFilter, apply_filter, day_bounds, utc_today

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


def _ranking_columns():
    return (
        Ranking.rank.label("rank"),
        Ranking.rank_date.label("rank_date"),
        Ranking.rank_change.label("rank_change"),
        Ranking.sales_volume.label("sales_volume"),
        Product.id.label("product_id"),
        Product.name.label("product_name"),
        Product.brand.label("brand"),
        Product.category_id.label("category_id"),
        Product.price.label("price"),
        Product.original_price.label("original_price"),
        Product.discount_rate.label("discount_rate"),
        Product.image_url.label("image_url"),
        Product.product_url.label("product_url"),
        Product.rating.label("rating"),
        Product.review_count.label("review_count"),
        Platform.id.label("platform_id"),
        Platform.display_name.label("platform_name"),
    )


def _todays_rankings(db: Session, today: date):
    """Rankings dated ``today`` within the top cutoff, joined with product and active platform."""
    start, end = day_bounds(today)
    return (
        db.query(*_ranking_columns())
        .join(Product, Ranking.product_id == Product.id)
        .join(Platform, Ranking.platform_id == Platform.id)
        .filter(
            Platform.is_active.is_(True),
            Ranking.rank_date >= start,
            Ranking.rank_date < end,
            Ranking.rank <= settings.TOP_RANK_CUTOFF,
        )
    )


def _as_money(value) -> Optional[Decimal]:
    if value is None:
        return None
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(TWO_PLACES)


# ---------- TOP RANKINGS ----------

def get_top_rankings(
    db: Session,
    spec: Optional[RankingFilter] = None,
    today: Optional[date] = None,
) -> List[RankingRow]:
    spec = spec or RankingFilter()
    today = today or utc_today()
    logger.debug("top rankings for %s with filter %s", today, spec)

    query = apply_filter(_todays_rankings(db, today), spec)
    rows = (
        query
        .order_by(Ranking.rank.asc(), Ranking.id.asc())
        .limit(settings.TOP_RANKINGS_LIMIT)
        .all()
    )
    return [RankingRow.model_validate(dict(row._mapping)) for row in rows]


# ---------- RANKINGS BY PLATFORM ----------

def get_platform_rankings(
    db: Session,
    platform_id: int,
    today: Optional[date] = None,
) -> List[RankingRow]:
    today = today or utc_today()
    rows = (
        _todays_rankings(db, today)
        .filter(Ranking.platform_id == platform_id)
        .order_by(Ranking.rank.asc(), Ranking.id.asc())
        .all()
    )
    return [RankingRow.model_validate(dict(row._mapping)) for row in rows]


# ---------- TRENDING ----------

def get_trending_products(db: Session, today: Optional[date] = None) -> List[TrendingProductRow]:
    """
    Products that climbed in today's rankings, steepest climb first.

    A negative rank_change means the product moved up; zero and positive
    changes are never trending.
    """
    today = today or utc_today()
    start, end = day_bounds(today)

    rows = (
        db.query(
            Product.id.label("id"),
            Product.name.label("name"),
            Product.brand.label("brand"),
            Product.price.label("price"),
            Product.original_price.label("original_price"),
            Product.discount_rate.label("discount_rate"),
            Product.image_url.label("image_url"),
            Product.product_url.label("product_url"),
            Product.rating.label("rating"),
            Product.review_count.label("review_count"),
            Platform.display_name.label("platform_name"),
            Ranking.rank.label("rank"),
            Ranking.rank_change.label("rank_change"),
        )
        .join(Platform, Product.platform_id == Platform.id)
        .join(Ranking, Ranking.product_id == Product.id)
        .filter(
            Product.is_available.is_(True),
            Platform.is_active.is_(True),
            Ranking.rank_date >= start,
            Ranking.rank_date < end,
            Ranking.rank_change < 0,
        )
        .order_by(Ranking.rank_change.asc(), Ranking.rank.asc(), Ranking.id.asc())
        .limit(settings.TRENDING_LIMIT)
        .all()
    )
    return [TrendingProductRow.model_validate(dict(row._mapping)) for row in rows]


# ---------- PLATFORM COMPARISON ----------

def compare_platforms(db: Session, today: Optional[date] = None) -> List[PlatformComparisonItem]:
    today = today or utc_today()
    start, end = day_bounds(today)

    # aggregated separately so the ranking join cannot multiply product rows
    product_stats = (
        db.query(
            Product.platform_id.label("platform_id"),
            func.count(Product.id).label("total_products"),
            func.avg(Product.price).label("avg_price"),
        )
        .group_by(Product.platform_id)
        .subquery()
    )
    top_ranked = (
        db.query(
            Product.platform_id.label("platform_id"),
            func.min(Product.name).label("top_rank_product"),
        )
        .join(Ranking, Ranking.product_id == Product.id)
        .filter(
            Ranking.rank == 1,
            Ranking.rank_date >= start,
            Ranking.rank_date < end,
        )
        .group_by(Product.platform_id)
        .subquery()
    )

    rows = (
        db.query(
            Platform.id,
            Platform.display_name,
            func.coalesce(product_stats.c.total_products, 0),
            product_stats.c.avg_price,
            top_ranked.c.top_rank_product,
        )
        .outerjoin(product_stats, product_stats.c.platform_id == Platform.id)
        .outerjoin(top_ranked, top_ranked.c.platform_id == Platform.id)
        .filter(Platform.is_active.is_(True))
        .order_by(Platform.display_name.asc(), Platform.id.asc())
        .all()
    )

    items: list[PlatformComparisonItem] = []
    for platform_id, platform_name, total_products, avg_price, top_rank_product in rows:
        items.append(
            PlatformComparisonItem(
                platform_id=platform_id,
                platform_name=platform_name,
                total_products=int(total_products or 0),
                avg_price=_as_money(avg_price),
                top_rank_product=top_rank_product,
            )
        )
    return items
