import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.platform import Platform
from app.models.product import Product
from app.models.watchlist import Watchlist
from app.schemas.watchlist import WatchlistCreate, WatchlistItem

logger = logging.getLogger(__name__)


# ---------- ADD TO WATCHLIST ----------

def add_to_watchlist(db: Session, data: WatchlistCreate) -> Watchlist:
    """Insert one entry. The same user may watch the same product more than once."""
    entry = Watchlist(
        user_email=data.user_email,
        product_id=data.product_id,
        notify_price_change=data.notify_price_change,
        notify_rank_change=data.notify_rank_change,
        target_price=data.target_price,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    logger.info("watchlist entry %s added for product %s", entry.id, entry.product_id)
    return entry


# ---------- LIST WATCHLIST ----------

def get_watchlist(db: Session, user_email: Optional[str] = None) -> List[WatchlistItem]:
    query = (
        db.query(
            Watchlist.id.label("id"),
            Watchlist.user_email.label("user_email"),
            Watchlist.product_id.label("product_id"),
            Product.name.label("product_name"),
            Product.price.label("current_price"),
            Watchlist.target_price.label("target_price"),
            Platform.display_name.label("platform_name"),
            Product.image_url.label("image_url"),
            Product.product_url.label("product_url"),
            Watchlist.notify_price_change.label("notify_price_change"),
            Watchlist.notify_rank_change.label("notify_rank_change"),
            Watchlist.created_at.label("created_at"),
        )
        .join(Product, Watchlist.product_id == Product.id)
        .join(Platform, Product.platform_id == Platform.id)
    )
    if user_email is not None:
        query = query.filter(Watchlist.user_email == user_email)

    rows = query.order_by(Watchlist.created_at.desc(), Watchlist.id.desc()).all()
    return [WatchlistItem.model_validate(dict(row._mapping)) for row in rows]
