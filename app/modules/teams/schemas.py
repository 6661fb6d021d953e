from pydantic import BaseModel
from typing import Literal, Optional
from datetime import datetime

MembershipRole = Literal["owner", "editor", "viewer"]


class TeamCreate(BaseModel):
    name: str


class TeamUpdate(BaseModel):
    name: Optional[str] = None


class TeamResponse(BaseModel):
    id: str
    name: str
    owner_id: str
    created_at: datetime

    class Config:
        from_attributes = True


class MembershipAdd(BaseModel):
    user_id: str
    role: MembershipRole = "viewer"


class MembershipUpdate(BaseModel):
    role: MembershipRole


class MembershipResponse(BaseModel):
    team_id: str
    user_id: str
    role: MembershipRole
    created_at: datetime

    class Config:
        from_attributes = True
