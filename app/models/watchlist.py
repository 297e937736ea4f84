from sqlalchemy import Column, Integer, String, Boolean, Numeric, DateTime, ForeignKey
from datetime import datetime
from app.database.connection import Base

class Watchlist(Base):
    __tablename__ = "watchlist"

    id = Column(Integer, primary_key=True, index=True)
    user_email = Column(String, nullable=False, index=True)  # only identity there is
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    notify_price_change = Column(Boolean, default=False)
    notify_rank_change = Column(Boolean, default=False)
    target_price = Column(Numeric(12, 2), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
