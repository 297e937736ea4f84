from datetime import datetime, timedelta

from app.models.category import Category
from app.services.dashboard_service import (
    build_category_tree,
    get_category_tree,
    get_dashboard_stats,
    list_categories,
    list_platforms,
)

NOW = datetime.utcnow()


def test_dashboard_stats_counts(db, factory):
    active = factory.platform()
    factory.platform(is_active=False)
    factory.category()
    factory.category(is_active=False)
    on_sale = factory.product(active)
    factory.product(active, is_available=False)
    factory.ranking(on_sale, rank=1, rank_date=NOW)
    factory.ranking(on_sale, rank=1, rank_date=NOW - timedelta(days=1))

    stats = get_dashboard_stats(db, today=NOW.date())

    assert stats.total_platforms == 1
    assert stats.total_products == 1
    assert stats.today_rankings == 1
    assert stats.total_categories == 1


def test_dashboard_stats_empty_store(db):
    stats = get_dashboard_stats(db)
    assert stats.model_dump(by_alias=True) == {
        "totalPlatforms": 0,
        "totalProducts": 0,
        "todayRankings": 0,
        "totalCategories": 0,
    }


def test_platforms_active_only_sorted_by_display_name(db, factory):
    factory.platform(display_name="옥션")
    factory.platform(display_name="G마켓")
    factory.platform(display_name="11번가")
    factory.platform(display_name="Hidden", is_active=False)

    names = [p.display_name for p in list_platforms(db)]

    assert names == sorted(names)
    assert "Hidden" not in names
    assert len(names) == 3


def test_categories_active_only_sorted(db, factory):
    factory.category(display_name="패션/의류")
    factory.category(display_name="뷰티/화장품")
    factory.category(display_name="Archived", is_active=False)

    names = [c.display_name for c in list_categories(db)]

    assert names == sorted(names)
    assert "Archived" not in names


def test_category_tree_nests_children(db, factory):
    electronics = factory.category(display_name="Electronics")
    phones = factory.category(display_name="Phones", parent=electronics)
    factory.category(display_name="Smartphones", parent=phones)
    factory.category(display_name="Fashion")

    tree = get_category_tree(db)

    assert [n.display_name for n in tree] == ["Electronics", "Fashion"]
    assert tree[0].children[0].display_name == "Phones"
    assert tree[0].children[0].children[0].display_name == "Smartphones"


def test_category_tree_orphan_of_inactive_parent_becomes_root(db, factory):
    hidden = factory.category(display_name="Hidden", is_active=False)
    factory.category(display_name="Visible child", parent=hidden)

    tree = get_category_tree(db)

    assert [n.display_name for n in tree] == ["Visible child"]


def test_category_tree_survives_cycles():
    a = Category(id=1, name="a", display_name="A", parent_id=2, is_active=True)
    b = Category(id=2, name="b", display_name="B", parent_id=1, is_active=True)
    c = Category(id=3, name="c", display_name="C", parent_id=3, is_active=True)

    tree = build_category_tree([a, b, c])

    seen = []

    def walk(nodes):
        for node in nodes:
            seen.append(node.id)
            walk(node.children)

    walk(tree)
    assert sorted(seen) == [1, 2, 3]
