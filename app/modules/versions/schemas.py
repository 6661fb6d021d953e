from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class VersionCreate(BaseModel):
    change_note: Optional[str] = None


class VersionResponse(BaseModel):
    id: str
    prompt_id: str
    title: str
    body_md: str
    created_by: str
    created_at: datetime
    change_note: Optional[str] = None

    class Config:
        from_attributes = True
