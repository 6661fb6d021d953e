from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class FolderCreate(BaseModel):
    name: str
    parent_id: Optional[str] = None


class FolderUpdate(BaseModel):
    name: str


class FolderMove(BaseModel):
    parent_id: Optional[str] = None


class FolderResponse(BaseModel):
    id: str
    team_id: str
    parent_id: Optional[str] = None
    name: str
    created_by: str
    created_at: datetime

    class Config:
        from_attributes = True
