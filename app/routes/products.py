from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.database.connection import get_db
from app.schemas.analysis import ProductAnalysisResponse
from app.schemas.price_history import PriceHistoryResponse
from app.schemas.product import ProductSearchRow
from app.schemas.ranking import TrendingProductRow
from app.services.filters import build_filter, parse_id, parse_limit
from app.services.product_service import get_latest_analysis, get_price_history, search_products
from app.services.ranking_service import get_trending_products


router = APIRouter(prefix="/products", tags=["Products"])

# SEARCH
@router.get("/search", response_model=List[ProductSearchRow])
def search(
    q: Optional[str] = None,
    platform: Optional[str] = None,
    category: Optional[str] = None,
    limit: Optional[str] = None,
    db: Session = Depends(get_db),
):
    page_size = parse_limit(limit, settings.SEARCH_DEFAULT_LIMIT, settings.SEARCH_MAX_LIMIT)
    return search_products(db, q=q, spec=build_filter(platform, category), limit=page_size)

# TRENDING
@router.get("/trending", response_model=List[TrendingProductRow])
def trending(db: Session = Depends(get_db)):
    return get_trending_products(db)

# ANALYSIS
@router.get("/{product_id}/analysis", response_model=ProductAnalysisResponse)
def analysis(product_id: str, db: Session = Depends(get_db)):
    return get_latest_analysis(db, parse_id(product_id, "product ID"))

# PRICE HISTORY
@router.get("/{product_id}/price-history", response_model=List[PriceHistoryResponse])
def price_history(product_id: str, db: Session = Depends(get_db)):
    return get_price_history(db, parse_id(product_id, "product ID"))
