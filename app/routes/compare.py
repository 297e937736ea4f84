from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database.connection import get_db
from app.schemas.platform import PlatformComparisonItem
from app.services.ranking_service import compare_platforms

router = APIRouter(prefix="/compare", tags=["Platform Comparison"])


@router.get("/platforms", response_model=List[PlatformComparisonItem])
def platform_comparison(db: Session = Depends(get_db)):
    return compare_platforms(db)
