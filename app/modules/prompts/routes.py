from fastapi import APIRouter, Body, Depends
from app.modules.prompts.schemas import (
    PromptCreate, PromptUpdate, PromptSave, PromptMove, VisibilityChange,
    PromptResponse, PromptWithTagsResponse,
    BulkDeleteRequest, BulkDeleteResponse, PromptExport, ImportResult
)
from app.modules.prompts.lifecycle import PromptLifecycle
from app.modules.prompts.transfer import PromptTransferService
from app.core.dependencies import RequestSession, get_session
from typing import Any, Dict, List, Optional

router = APIRouter(tags=["prompts"])


def get_lifecycle(session: RequestSession = Depends(get_session)) -> PromptLifecycle:
    return PromptLifecycle(session.supabase)


def get_transfer_service(session: RequestSession = Depends(get_session)) -> PromptTransferService:
    return PromptTransferService(session.supabase)


@router.get("/teams/{team_id}/prompts", response_model=List[PromptResponse])
async def list_prompts(
    team_id: str,
    folder_id: Optional[str] = None,
    q: Optional[str] = None,
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    """List a team's prompts, newest first; optional folder filter and title search"""
    return lifecycle.prompts.list_prompts(team_id, folder_id=folder_id, search=q)


@router.post("/teams/{team_id}/prompts", response_model=PromptResponse, status_code=201)
async def create_prompt(
    team_id: str,
    prompt_data: PromptCreate,
    session: RequestSession = Depends(get_session),
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    return lifecycle.create_prompt(team_id, prompt_data, session.user_id)


@router.post("/teams/{team_id}/prompts/editor", response_model=PromptResponse, status_code=201)
async def save_new_prompt(
    team_id: str,
    data: PromptSave,
    session: RequestSession = Depends(get_session),
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    """Editor save of a new prompt (version snapshot per save policy)"""
    return lifecycle.save_prompt(None, data, session.user_id, team_id=team_id)


@router.post("/teams/{team_id}/prompts/bulk-delete", response_model=BulkDeleteResponse)
async def bulk_delete_prompts(
    team_id: str,
    request: BulkDeleteRequest,
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    """Delete many prompts concurrently; reports which ones actually went away"""
    return await lifecycle.prompts.bulk_delete(request.ids)


@router.get("/teams/{team_id}/export", response_model=PromptExport)
async def export_prompts(
    team_id: str,
    service: PromptTransferService = Depends(get_transfer_service)
):
    return service.export_prompts(team_id)


@router.post("/teams/{team_id}/import", response_model=ImportResult)
async def import_prompts(
    team_id: str,
    document: Dict[str, Any] = Body(...),
    session: RequestSession = Depends(get_session),
    service: PromptTransferService = Depends(get_transfer_service)
):
    """Import a previous export; failing records are skipped and counted"""
    return service.import_prompts(team_id, document, session.user_id)


@router.get("/prompts/{prompt_id}", response_model=PromptWithTagsResponse)
async def get_prompt(
    prompt_id: str,
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    return lifecycle.get_prompt(prompt_id)


@router.patch("/prompts/{prompt_id}", response_model=PromptResponse)
async def update_prompt(
    prompt_id: str,
    patch: PromptUpdate,
    session: RequestSession = Depends(get_session),
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    return lifecycle.update_prompt(prompt_id, patch, session.user_id)


@router.put("/prompts/{prompt_id}", response_model=PromptResponse)
async def save_prompt(
    prompt_id: str,
    data: PromptSave,
    session: RequestSession = Depends(get_session),
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    """Manual editor save"""
    return lifecycle.save_prompt(prompt_id, data, session.user_id)


@router.put("/prompts/{prompt_id}/autosave", response_model=PromptResponse)
async def autosave_prompt(
    prompt_id: str,
    data: PromptSave,
    session: RequestSession = Depends(get_session),
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    """Debounced editor autosave"""
    return lifecycle.save_prompt(prompt_id, data, session.user_id, autosave=True)


@router.delete("/prompts/{prompt_id}", status_code=204)
async def delete_prompt(
    prompt_id: str,
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    lifecycle.prompts.delete_prompt(prompt_id)
    return None


@router.post("/prompts/{prompt_id}/publish", response_model=PromptResponse)
async def publish_prompt(
    prompt_id: str,
    session: RequestSession = Depends(get_session),
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    """Make public under a new slug"""
    return lifecycle.publish(prompt_id, session.user_id)


@router.post("/prompts/{prompt_id}/unpublish", response_model=PromptResponse)
async def unpublish_prompt(
    prompt_id: str,
    session: RequestSession = Depends(get_session),
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    return lifecycle.unpublish(prompt_id, session.user_id)


@router.put("/prompts/{prompt_id}/visibility", response_model=PromptResponse)
async def set_visibility(
    prompt_id: str,
    change: VisibilityChange,
    session: RequestSession = Depends(get_session),
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    return lifecycle.set_visibility(prompt_id, change.visibility, session.user_id)


@router.post("/prompts/{prompt_id}/move", response_model=PromptResponse)
async def move_prompt(
    prompt_id: str,
    move: PromptMove,
    session: RequestSession = Depends(get_session),
    lifecycle: PromptLifecycle = Depends(get_lifecycle)
):
    """Move into a folder of the same team (null folder_id means team root)"""
    return lifecycle.move_prompt(prompt_id, move.folder_id, session.user_id)
