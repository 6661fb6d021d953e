from fastapi import APIRouter, Depends
from app.modules.versions.schemas import VersionCreate, VersionResponse
from app.modules.prompts.schemas import PromptResponse
from app.modules.prompts.lifecycle import PromptLifecycle
from app.core.dependencies import RequestSession, get_session
from app.core.errors import NotFound
from typing import List

router = APIRouter(prefix="/prompts/{prompt_id}/versions", tags=["versions"])


def get_lifecycle(session: RequestSession = Depends(get_session)) -> PromptLifecycle:
    return PromptLifecycle(session.supabase)


@router.get("", response_model=List[VersionResponse])
async def list_versions(
    prompt_id: str,
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    """Version history, newest first"""
    return lifecycle.versions.list_versions(prompt_id)


@router.post("", response_model=VersionResponse, status_code=201)
async def create_snapshot(
    prompt_id: str,
    data: VersionCreate,
    session: RequestSession = Depends(get_session),
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    """Snapshot the prompt's current content"""
    return lifecycle.create_snapshot(prompt_id, session.user_id, data.change_note)


@router.get("/{version_id}", response_model=VersionResponse)
async def get_version(
    prompt_id: str,
    version_id: str,
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    version = lifecycle.versions.get_version(version_id)
    if version.prompt_id != prompt_id:
        raise NotFound("Version not found")
    return version


@router.post("/{version_id}/restore", response_model=PromptResponse)
async def restore_version(
    prompt_id: str,
    version_id: str,
    session: RequestSession = Depends(get_session),
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    """Copy a version's title/body back onto the prompt"""
    return lifecycle.restore_version(prompt_id, version_id, session.user_id)
