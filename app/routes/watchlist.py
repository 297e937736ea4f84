from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database.connection import get_db
from app.schemas.watchlist import WatchlistCreate, WatchlistItem, WatchlistResponse
from app.services.watchlist_service import add_to_watchlist, get_watchlist

router = APIRouter(prefix="/watchlist", tags=["Watchlist"])


@router.post("", response_model=WatchlistResponse, status_code=status.HTTP_201_CREATED)
def create_watchlist_entry(data: WatchlistCreate, db: Session = Depends(get_db)):
    return add_to_watchlist(db, data)


@router.get("", response_model=List[WatchlistItem])
def all_watchlist_entries(db: Session = Depends(get_db)):
    return get_watchlist(db)


@router.get("/{user_email}", response_model=List[WatchlistItem])
def user_watchlist(user_email: str, db: Session = Depends(get_db)):
    return get_watchlist(db, user_email=user_email)
