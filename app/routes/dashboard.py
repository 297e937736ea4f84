from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database.connection import get_db
from app.schemas.category import CategoryNode, CategoryResponse
from app.schemas.dashboard import DashboardStatsResponse
from app.schemas.platform import PlatformResponse
from app.services.dashboard_service import (
    get_category_tree,
    get_dashboard_stats,
    list_categories,
    list_platforms,
)

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard/stats", response_model=DashboardStatsResponse)
def dashboard_stats(db: Session = Depends(get_db)):
    return get_dashboard_stats(db)


@router.get("/platforms", response_model=List[PlatformResponse])
def platforms(db: Session = Depends(get_db)):
    return list_platforms(db)


@router.get("/categories", response_model=List[CategoryResponse])
def categories(db: Session = Depends(get_db)):
    return list_categories(db)


@router.get("/categories/tree", response_model=List[CategoryNode])
def category_tree(db: Session = Depends(get_db)):
    return get_category_tree(db)
