from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.category import Category
from app.models.platform import Platform
from app.models.product import Product
from app.models.ranking import Ranking
from app.schemas.category import CategoryNode
from app.schemas.dashboard import DashboardStatsResponse
from app.services.filters import day_bounds, utc_today


# ---------- DASHBOARD STATS ----------

def get_dashboard_stats(db: Session, today: Optional[date] = None) -> DashboardStatsResponse:
    today = today or utc_today()
    start, end = day_bounds(today)

    total_platforms = (
        db.query(func.count(Platform.id))
        .filter(Platform.is_active.is_(True))
        .scalar()
    ) or 0
    total_products = (
        db.query(func.count(Product.id))
        .filter(Product.is_available.is_(True))
        .scalar()
    ) or 0
    today_rankings = (
        db.query(func.count(Ranking.id))
        .filter(Ranking.rank_date >= start, Ranking.rank_date < end)
        .scalar()
    ) or 0
    total_categories = (
        db.query(func.count(Category.id))
        .filter(Category.is_active.is_(True))
        .scalar()
    ) or 0

    return DashboardStatsResponse(
        total_platforms=total_platforms,
        total_products=total_products,
        today_rankings=today_rankings,
        total_categories=total_categories,
    )


# ---------- PLATFORMS / CATEGORIES ----------

def list_platforms(db: Session) -> List[Platform]:
    return (
        db.query(Platform)
        .filter(Platform.is_active.is_(True))
        .order_by(Platform.display_name.asc(), Platform.id.asc())
        .all()
    )


def list_categories(db: Session) -> List[Category]:
    return (
        db.query(Category)
        .filter(Category.is_active.is_(True))
        .order_by(Category.display_name.asc(), Category.id.asc())
        .all()
    )


def build_category_tree(categories: List[Category]) -> List[CategoryNode]:
    """
    Arrange flat category rows into nested nodes.

    Children are looked up through a parent_id index. Rows whose parent is
    not in the input become roots. A visited set guarantees every row is
    emitted once, so a stored cycle cannot loop forever; rows only reachable
    through a cycle are emitted as roots.
    """
    by_id: Dict[int, Category] = {c.id: c for c in categories}
    children: Dict[Optional[int], List[Category]] = defaultdict(list)
    for category in categories:
        parent_id = category.parent_id if category.parent_id in by_id else None
        children[parent_id].append(category)

    visited: set[int] = set()

    def build(category: Category) -> CategoryNode:
        visited.add(category.id)
        return CategoryNode(
            id=category.id,
            name=category.name,
            display_name=category.display_name,
            parent_id=category.parent_id,
            children=[build(child) for child in children[category.id] if child.id not in visited],
        )

    roots = [build(c) for c in children[None] if c.id not in visited]

    # anything left over sits on a parent cycle with no way in from a root
    for category in categories:
        if category.id not in visited:
            roots.append(build(category))

    return roots


def get_category_tree(db: Session) -> List[CategoryNode]:
    return build_category_tree(list_categories(db))
