from sqlalchemy import Column, String, Integer, Numeric, Boolean, DateTime, Text, ForeignKey
from datetime import datetime
from app.database.connection import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    platform_id = Column(Integer, ForeignKey("platforms.id"), nullable=False, index=True)
    # (platform_id, platform_product_id) is not enforced unique
    platform_product_id = Column(String, nullable=False)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True, index=True)
    brand = Column(String, nullable=True)

    price = Column(Numeric(12, 2), nullable=False)
    original_price = Column(Numeric(12, 2), nullable=True)
    discount_rate = Column(Numeric(5, 2), nullable=True)

    image_url = Column(String, nullable=True)
    product_url = Column(String, nullable=False)
    rating = Column(Numeric(3, 2), nullable=True)
    review_count = Column(Integer, default=0)
    is_available = Column(Boolean, nullable=False, default=True)

    last_updated = Column(DateTime, default=datetime.utcnow, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
