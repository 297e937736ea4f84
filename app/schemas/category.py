from datetime import datetime
from typing import List, Optional

from app.schemas.base import CamelModel


class CategoryResponse(CamelModel):
    id: int
    name: str
    display_name: str
    parent_id: Optional[int] = None
    is_active: bool
    created_at: datetime


class CategoryNode(CamelModel):
    id: int
    name: str
    display_name: str
    parent_id: Optional[int] = None
    children: List["CategoryNode"] = []


CategoryNode.model_rebuild()
