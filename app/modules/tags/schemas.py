from pydantic import BaseModel
from datetime import datetime


class TagCreate(BaseModel):
    name: str


class TagAssign(BaseModel):
    tag_id: str


class TagResponse(BaseModel):
    id: str
    team_id: str
    name: str
    created_by: str
    created_at: datetime

    class Config:
        from_attributes = True
