import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.platform import Platform
from app.models.price_history import PriceHistory
from app.models.product import Product
from app.models.product_analysis import ProductAnalysis
from app.schemas.product import ProductSearchRow
from app.services.filters import RankingFilter, apply_filter

logger = logging.getLogger(__name__)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


# --------------------------
# PRODUCT ANALYSIS
# --------------------------
def get_latest_analysis(db: Session, product_id: int) -> ProductAnalysis:
    """Most recently analyzed record for a product; 404 when the product has none."""
    analysis = (
        db.query(ProductAnalysis)
        .filter(ProductAnalysis.product_id == product_id)
        .order_by(ProductAnalysis.last_analyzed.desc(), ProductAnalysis.id.desc())
        .first()
    )
    if not analysis:
        raise HTTPException(status_code=404, detail="Analysis not found")
    return analysis


# --------------------------
# GET PRICE HISTORY
# --------------------------
def get_price_history(db: Session, product_id: int, limit: Optional[int] = None) -> List[PriceHistory]:
    """Newest snapshots first; empty list when none were recorded."""
    limit = limit or settings.PRICE_HISTORY_LIMIT
    return (
        db.query(PriceHistory)
        .filter(PriceHistory.product_id == product_id)
        .order_by(PriceHistory.recorded_at.desc(), PriceHistory.id.desc())
        .limit(limit)
        .all()
    )


# --------------------------
# SEARCH PRODUCTS
# --------------------------
def search_products(
    db: Session,
    q: Optional[str] = None,
    spec: Optional[RankingFilter] = None,
    limit: Optional[int] = None,
) -> List[ProductSearchRow]:
    spec = spec or RankingFilter()
    limit = limit or settings.SEARCH_DEFAULT_LIMIT
    limit = max(1, min(limit, settings.SEARCH_MAX_LIMIT))

    query = (
        db.query(
            Product.id.label("id"),
            Product.name.label("name"),
            Product.brand.label("brand"),
            Product.category_id.label("category_id"),
            Product.price.label("price"),
            Product.original_price.label("original_price"),
            Product.discount_rate.label("discount_rate"),
            Product.image_url.label("image_url"),
            Product.product_url.label("product_url"),
            Product.rating.label("rating"),
            Product.review_count.label("review_count"),
            Platform.display_name.label("platform_name"),
            Product.last_updated.label("last_updated"),
        )
        .join(Platform, Product.platform_id == Platform.id)
        .filter(Product.is_available.is_(True), Platform.is_active.is_(True))
    )

    term = q.strip() if q else ""
    if term:
        query = query.filter(Product.name.ilike(f"%{_escape_like(term)}%", escape="\\"))

    query = apply_filter(query, spec)
    logger.debug("product search q=%r filter=%s limit=%d", term, spec, limit)

    rows = (
        query
        .order_by(Product.last_updated.desc(), Product.id.desc())
        .limit(limit)
        .all()
    )
    return [ProductSearchRow.model_validate(dict(row._mapping)) for row in rows]
