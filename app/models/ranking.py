from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index
from datetime import datetime
from app.database.connection import Base

class Ranking(Base):
    __tablename__ = "rankings"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    platform_id = Column(Integer, ForeignKey("platforms.id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    rank = Column(Integer, nullable=False)  # 1-based, lower is better
    rank_date = Column(DateTime, nullable=False)
    sales_volume = Column(Integer, nullable=True)
    view_count = Column(Integer, nullable=True)
    # delta vs previous day: negative = rose, positive = fell
    rank_change = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("ix_rankings_platform_date_rank", "platform_id", "rank_date", "rank"),
    )
