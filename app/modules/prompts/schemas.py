from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import datetime
from app.modules.tags.schemas import TagResponse

Visibility = Literal["private", "team", "public"]


class PromptCreate(BaseModel):
    title: str
    body_md: str = ""
    folder_id: Optional[str] = None
    visibility: Visibility = "private"


class PromptUpdate(BaseModel):
    """Partial update; only fields present in the request are written."""
    title: Optional[str] = None
    body_md: Optional[str] = None
    folder_id: Optional[str] = None
    visibility: Optional[Visibility] = None


class PromptSave(BaseModel):
    """Editor save (manual or autosave) of the live content."""
    title: str
    body_md: str = ""
    change_note: Optional[str] = None


class VisibilityChange(BaseModel):
    visibility: Visibility


class PromptMove(BaseModel):
    folder_id: Optional[str] = None


class PromptResponse(BaseModel):
    id: str
    team_id: str
    folder_id: Optional[str] = None
    owner_id: str
    title: str
    body_md: str
    visibility: Visibility
    public_slug: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class PromptWithTagsResponse(PromptResponse):
    tags: List[TagResponse] = Field(default_factory=list)


class BulkDeleteRequest(BaseModel):
    ids: List[str]


class BulkDeleteFailure(BaseModel):
    id: str
    detail: str


class BulkDeleteResponse(BaseModel):
    deleted: List[str]
    failed: List[BulkDeleteFailure]


class ExportedPrompt(BaseModel):
    title: str
    body_md: str
    visibility: Visibility
    created_at: datetime
    updated_at: datetime


class PromptExport(BaseModel):
    version: str
    exportDate: datetime
    prompts: List[ExportedPrompt]


class ImportResult(BaseModel):
    imported: int
    total: int
    skipped: int
    message: str
