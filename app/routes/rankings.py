from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database.connection import get_db
from app.schemas.ranking import RankingRow
from app.services.filters import build_filter, parse_id
from app.services.ranking_service import get_platform_rankings, get_top_rankings

router = APIRouter(prefix="/rankings", tags=["Rankings"])


# ---------- TOP RANKINGS ----------

@router.get("/top", response_model=List[RankingRow])
def top_rankings(
    platform: Optional[str] = None,
    category: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    Today's top-ranked products across active platforms.

    `platform` is a platform name, `category` a category id; `all_platforms`,
    `all_categories` or a non-numeric category mean no filter.
    """
    return get_top_rankings(db, build_filter(platform, category))


# ---------- RANKINGS BY PLATFORM ----------

@router.get("/platform/{platform_id}", response_model=List[RankingRow])
def platform_rankings(platform_id: str, db: Session = Depends(get_db)):
    return get_platform_rankings(db, parse_id(platform_id, "platform ID"))
