"""
Load a sample data set: five Korean marketplaces, eight categories, seven
products per platform with today's top-10 rankings, a week of price
history, one analysis per product, a few watchlist entries and collection
runs.

Run with ``python -m app.database.seed``. Existing rows are deleted first.
"""
import logging
import random
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.database.connection import Base, SessionLocal, engine
from app.enums.collection_status import CollectionStatus
from app.enums.market_position import MarketPosition
from app.models.category import Category
from app.models.data_collection_log import DataCollectionLog
from app.models.platform import Platform
from app.models.price_history import PriceHistory
from app.models.product import Product
from app.models.product_analysis import ProductAnalysis
from app.models.ranking import Ranking
from app.models.watchlist import Watchlist

logger = logging.getLogger(__name__)

PLATFORMS = [
    {"name": "coupang", "display_name": "쿠팡", "base_url": "https://www.coupang.com"},
    {"name": "naver_shopping", "display_name": "네이버 쇼핑", "base_url": "https://shopping.naver.com"},
    {"name": "11st", "display_name": "11번가", "base_url": "https://www.11st.co.kr"},
    {"name": "gmarket", "display_name": "G마켓", "base_url": "https://www.gmarket.co.kr"},
    {"name": "auction", "display_name": "옥션", "base_url": "https://www.auction.co.kr"},
]

CATEGORIES = [
    ("electronics", "전자제품"),
    ("fashion", "패션/의류"),
    ("beauty", "뷰티/화장품"),
    ("home_living", "홈/리빙"),
    ("food", "식품/건강"),
    ("books", "도서/문구"),
    ("sports", "스포츠/레저"),
    ("baby_kids", "유아/아동"),
]

# (category name, product fields)
PRODUCTS = [
    ("electronics", dict(name="삼성 갤럭시 S24 256GB", description="최신 플래그십 스마트폰", brand="Samsung",
                         price="1200000", original_price="1350000", discount_rate="11.11", rating="4.5", review_count=1523)),
    ("electronics", dict(name="애플 아이폰 15 Pro 128GB", description="프리미엄 스마트폰", brand="Apple",
                         price="1550000", original_price="1650000", discount_rate="6.06", rating="4.7", review_count=892)),
    ("electronics", dict(name="LG 32인치 4K 모니터", description="고해상도 컴퓨터 모니터", brand="LG",
                         price="450000", original_price="520000", discount_rate="13.46", rating="4.3", review_count=456)),
    ("fashion", dict(name="나이키 에어맥스 90", description="클래식 운동화", brand="Nike",
                     price="150000", original_price="180000", discount_rate="16.67", rating="4.4", review_count=2341)),
    ("fashion", dict(name="유니클로 히트텍 이너웨어", description="보온 속옷", brand="Uniqlo",
                     price="25000", original_price="29000", discount_rate="13.79", rating="4.2", review_count=1876)),
    ("beauty", dict(name="설화수 윤조에센스", description="프리미엄 스킨케어", brand="Sulwhasoo",
                    price="120000", original_price="135000", discount_rate="11.11", rating="4.6", review_count=567)),
    ("beauty", dict(name="이니스프리 그린티 씨드 세럼", description="자연주의 스킨케어", brand="Innisfree",
                    price="32000", original_price="38000", discount_rate="15.79", rating="4.1", review_count=1234)),
]

PRICE_HISTORY_DAYS = 7
CENT = Decimal("0.01")


def _score(rng: random.Random, low: float, span: float) -> Decimal:
    return Decimal(str(rng.random() * span + low)).quantize(CENT)


def _market_position(rng: random.Random) -> str:
    if rng.random() > 0.7:
        return MarketPosition.strong.value
    if rng.random() > 0.3:
        return MarketPosition.moderate.value
    return MarketPosition.weak.value


def clear_data(db: Session) -> None:
    # children before parents
    for model in (DataCollectionLog, Watchlist, ProductAnalysis, PriceHistory, Ranking, Product, Category, Platform):
        db.query(model).delete()
    db.flush()


def seed(db: Session, now: Optional[datetime] = None, rng_seed: int = 42) -> Dict[str, int]:
    """Replace the contents of every table with the sample data set. Returns row counts."""
    rng = random.Random(rng_seed)
    now = now or datetime.utcnow()

    clear_data(db)

    platforms: List[Platform] = [Platform(is_active=True, **data) for data in PLATFORMS]
    db.add_all(platforms)
    categories: Dict[str, Category] = {
        name: Category(name=name, display_name=display_name, is_active=True)
        for name, display_name in CATEGORIES
    }
    db.add_all(categories.values())
    db.flush()

    products: List[Product] = []
    for platform in platforms:
        for index, (category_name, data) in enumerate(PRODUCTS, start=1):
            fields = dict(data)
            products.append(
                Product(
                    platform_id=platform.id,
                    platform_product_id=f"{platform.name}_{index:03d}_{rng.randrange(16**6):06x}",
                    category_id=categories[category_name].id,
                    image_url=f"https://example.com/images/{platform.name}/{index}.jpg",
                    product_url=f"{platform.base_url}/products/{index:010d}",
                    price=Decimal(fields.pop("price")),
                    original_price=Decimal(fields.pop("original_price")),
                    discount_rate=Decimal(fields.pop("discount_rate")),
                    rating=Decimal(fields.pop("rating")),
                    last_updated=now,
                    **fields,
                )
            )
    db.add_all(products)
    db.flush()

    rankings: List[Ranking] = []
    for platform in platforms:
        platform_products = [p for p in products if p.platform_id == platform.id]
        for rank, product in enumerate(platform_products[:10], start=1):
            rankings.append(
                Ranking(
                    product_id=product.id,
                    platform_id=platform.id,
                    category_id=product.category_id,
                    rank=rank,
                    rank_date=now,
                    sales_volume=rng.randint(100, 1099),
                    view_count=rng.randint(1000, 10999),
                    rank_change=rng.randint(-5, 5),
                )
            )
    db.add_all(rankings)

    history: List[PriceHistory] = []
    for product in products:
        for days_ago in range(PRICE_HISTORY_DAYS, -1, -1):
            variation = Decimal(str((rng.random() - 0.5) * 0.1))
            history.append(
                PriceHistory(
                    product_id=product.id,
                    price=(product.price * (1 + variation)).quantize(CENT),
                    original_price=product.original_price,
                    discount_rate=product.discount_rate,
                    recorded_at=now - timedelta(days=days_ago),
                )
            )
    db.add_all(history)

    analyses = [
        ProductAnalysis(
            product_id=product.id,
            trend_score=_score(rng, 60, 40),
            price_stability=_score(rng, 70, 30),
            competitiveness=_score(rng, 50, 50),
            market_position=_market_position(rng),
            recommendation_score=_score(rng, 70, 30),
            analysis_data={
                "keywords": ["인기", "베스트셀러", "추천"],
                "sentiment": "positive",
                "competitorCount": rng.randint(5, 14),
                "marketShare": str(_score(rng, 5, 20)),
            },
            last_analyzed=now,
        )
        for product in products
    ]
    db.add_all(analyses)

    db.add_all([
        Watchlist(user_email="user1@example.com", product_id=products[0].id,
                  notify_price_change=True, notify_rank_change=True, target_price=Decimal("1100000")),
        Watchlist(user_email="user1@example.com", product_id=products[5].id,
                  notify_price_change=True, notify_rank_change=False, target_price=Decimal("140000")),
        Watchlist(user_email="user2@example.com", product_id=products[2].id,
                  notify_price_change=False, notify_rank_change=True),
    ])

    started = now - timedelta(hours=1)
    db.add_all([
        DataCollectionLog(platform_id=platforms[0].id, status=CollectionStatus.success.value,
                          products_updated=15, rankings_updated=10,
                          started_at=started, completed_at=started + timedelta(minutes=5)),
        DataCollectionLog(platform_id=platforms[1].id, status=CollectionStatus.success.value,
                          products_updated=12, rankings_updated=10,
                          started_at=started, completed_at=started + timedelta(minutes=3, seconds=20)),
        DataCollectionLog(platform_id=platforms[2].id, status=CollectionStatus.partial.value,
                          products_updated=8, rankings_updated=7, error_message="Rate limit exceeded",
                          started_at=started, completed_at=started + timedelta(minutes=1, seconds=40)),
    ])

    db.commit()

    counts = {
        "platforms": len(platforms),
        "categories": len(categories),
        "products": len(products),
        "rankings": len(rankings),
        "price_history": len(history),
        "analyses": len(analyses),
    }
    logger.info("Seeded database: %s", counts)
    return counts


def main() -> None:
    from app.core.logging_config import setup_logging

    setup_logging()
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed(db)
    except Exception:
        db.rollback()
        logger.exception("Seeding failed")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
