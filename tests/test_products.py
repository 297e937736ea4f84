from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from fastapi import HTTPException

from app.models.price_history import PriceHistory
from app.models.product_analysis import ProductAnalysis
from app.services.filters import build_filter
from app.services.product_service import get_latest_analysis, get_price_history, search_products

NOW = datetime.utcnow()


# ---------- ANALYSIS ----------

def test_latest_analysis_picks_most_recent(db, factory):
    product = factory.product(factory.platform())
    for days_ago, score in ((3, "61.00"), (0, "88.50"), (1, "70.25")):
        db.add(ProductAnalysis(
            product_id=product.id,
            trend_score=Decimal(score),
            market_position="moderate",
            analysis_data={"sentiment": "positive"},
            last_analyzed=NOW - timedelta(days=days_ago),
        ))
    db.flush()

    analysis = get_latest_analysis(db, product.id)

    assert analysis.trend_score == Decimal("88.50")
    assert analysis.analysis_data == {"sentiment": "positive"}


def test_latest_analysis_tie_broken_by_id(db, factory):
    product = factory.product(factory.platform())
    first = ProductAnalysis(product_id=product.id, market_position="weak", last_analyzed=NOW)
    second = ProductAnalysis(product_id=product.id, market_position="strong", last_analyzed=NOW)
    db.add(first)
    db.flush()
    db.add(second)
    db.flush()

    assert get_latest_analysis(db, product.id).id == second.id


def test_latest_analysis_missing_raises_not_found(db, factory):
    product = factory.product(factory.platform())

    with pytest.raises(HTTPException) as exc:
        get_latest_analysis(db, product.id)

    assert exc.value.status_code == 404
    assert exc.value.detail == "Analysis not found"


# ---------- PRICE HISTORY ----------

def test_price_history_newest_first_capped_at_thirty(db, factory):
    product = factory.product(factory.platform())
    for days_ago in range(40):
        db.add(PriceHistory(
            product_id=product.id,
            price=Decimal(1000 + days_ago),
            recorded_at=NOW - timedelta(days=days_ago),
        ))
    db.flush()

    history = get_price_history(db, product.id)

    assert len(history) == 30
    assert history[0].price == Decimal("1000")
    recorded = [h.recorded_at for h in history]
    assert recorded == sorted(recorded, reverse=True)


def test_price_history_empty_is_not_an_error(db, factory):
    product = factory.product(factory.platform())
    assert get_price_history(db, product.id) == []


# ---------- SEARCH ----------

@pytest.mark.parametrize("query", ["galaxy", "GALAXY", "GaLaXy", "  galaxy "])
def test_search_is_case_insensitive(db, factory, query):
    platform = factory.platform()
    hit = factory.product(platform, name="Samsung Galaxy S24")
    factory.product(platform, name="Apple iPhone 15")

    rows = search_products(db, q=query)

    assert [r.id for r in rows] == [hit.id]


def test_search_excludes_unavailable_and_inactive_platform(db, factory):
    active = factory.platform()
    inactive = factory.platform(is_active=False)
    available = factory.product(active, name="Galaxy Buds")
    factory.product(active, name="Galaxy Tab", is_available=False)
    factory.product(inactive, name="Galaxy Watch")

    rows = search_products(db, q="galaxy")

    assert [r.id for r in rows] == [available.id]


def test_search_orders_by_last_updated(db, factory):
    platform = factory.platform()
    old = factory.product(platform, name="Monitor old", last_updated=NOW - timedelta(days=2))
    new = factory.product(platform, name="Monitor new", last_updated=NOW)
    mid = factory.product(platform, name="Monitor mid", last_updated=NOW - timedelta(days=1))

    rows = search_products(db, q="monitor")

    assert [r.id for r in rows] == [new.id, mid.id, old.id]


def test_search_filters_and_limit(db, factory):
    coupang = factory.platform(name="coupang")
    gmarket = factory.platform(name="gmarket")
    shoes = factory.category(name="fashion")
    for i in range(5):
        factory.product(coupang, name=f"Air Max {i}", category=shoes)
    factory.product(coupang, name="Air Fryer")
    factory.product(gmarket, name="Air Max gmarket", category=shoes)

    rows = search_products(db, q="air", spec=build_filter("coupang", str(shoes.id)))
    assert len(rows) == 5
    assert all(r.category_id == shoes.id for r in rows)

    assert len(search_products(db, q="air", limit=2)) == 2


def test_search_limit_clamped_to_maximum(db, factory):
    platform = factory.platform()
    for i in range(105):
        factory.product(platform, name=f"Bulk {i}")

    assert len(search_products(db, q="bulk", limit=1000)) == 100


def test_search_wildcards_are_literal(db, factory):
    platform = factory.platform()
    factory.product(platform, name="Discount 50% pack")
    factory.product(platform, name="Discount 500 pack")

    rows = search_products(db, q="50%")

    assert [r.name for r in rows] == ["Discount 50% pack"]
