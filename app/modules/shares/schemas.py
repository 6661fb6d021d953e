from pydantic import BaseModel
from typing import Literal
from datetime import datetime

SharePermission = Literal["view", "edit"]


class ShareCreate(BaseModel):
    target_user: str
    permission: SharePermission = "view"


class ShareUpdate(BaseModel):
    permission: SharePermission


class ShareResponse(BaseModel):
    id: str
    prompt_id: str
    target_user: str
    permission: SharePermission
    created_at: datetime

    class Config:
        from_attributes = True
