from datetime import datetime

from app.database.seed import PLATFORMS, PRODUCTS, seed
from app.services.dashboard_service import get_dashboard_stats
from app.services.ranking_service import compare_platforms, get_top_rankings, get_trending_products
from app.services.watchlist_service import get_watchlist


def test_seed_loads_sample_data(db):
    now = datetime.utcnow()

    counts = seed(db, now=now)

    assert counts["platforms"] == len(PLATFORMS)
    assert counts["products"] == len(PLATFORMS) * len(PRODUCTS)

    stats = get_dashboard_stats(db, today=now.date())
    assert stats.total_platforms == 5
    assert stats.total_categories == 8
    assert stats.total_products == 35
    assert stats.today_rankings == 35

    assert len(get_top_rankings(db, today=now.date())) == 35
    assert len(get_watchlist(db, "user1@example.com")) == 2

    trending = get_trending_products(db, today=now.date())
    assert all(row.rank_change < 0 for row in trending)

    comparison = compare_platforms(db, today=now.date())
    assert len(comparison) == 5
    assert all(item.total_products == 7 and item.top_rank_product for item in comparison)


def test_seed_is_repeatable(db):
    now = datetime.utcnow()
    seed(db, now=now)
    first = [r.rank_change for r in get_top_rankings(db, today=now.date())]

    seed(db, now=now)
    second = [r.rank_change for r in get_top_rankings(db, today=now.date())]

    assert first == second
