from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, JSON
from datetime import datetime
from app.database.connection import Base

class ProductAnalysis(Base):
    __tablename__ = "product_analysis"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    trend_score = Column(Numeric(5, 2), nullable=True)  # 0-100
    price_stability = Column(Numeric(5, 2), nullable=True)
    competitiveness = Column(Numeric(5, 2), nullable=True)
    market_position = Column(String, nullable=True)  # strong / moderate / weak
    recommendation_score = Column(Numeric(5, 2), nullable=True)
    # e.g. {"keywords": [...], "sentiment": "positive", "competitorCount": 7}
    analysis_data = Column(JSON, nullable=True)
    last_analyzed = Column(DateTime, default=datetime.utcnow, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
