from fastapi import APIRouter, Depends
from app.modules.shares.schemas import ShareCreate, ShareUpdate, ShareResponse
from app.modules.shares.service import ShareService
from app.core.dependencies import get_current_user_id, get_user_supabase
from supabase import Client
from typing import List, Dict

router = APIRouter(tags=["shares"])


def get_share_service(supabase: Client = Depends(get_user_supabase)) -> ShareService:
    return ShareService(supabase)


@router.get("/prompts/{prompt_id}/shares", response_model=List[ShareResponse])
async def list_shares(
    prompt_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: ShareService = Depends(get_share_service)
):
    return service.list_shares(prompt_id)


@router.post("/prompts/{prompt_id}/shares", response_model=ShareResponse, status_code=201)
async def create_share(
    prompt_id: str,
    share_data: ShareCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: ShareService = Depends(get_share_service)
):
    """Grant one user view or edit access to a prompt"""
    return service.create_share(prompt_id, share_data)


@router.put("/shares/{share_id}", response_model=ShareResponse)
async def update_share(
    share_id: str,
    share_data: ShareUpdate,
    user_data: Dict = Depends(get_current_user_id),
    service: ShareService = Depends(get_share_service)
):
    return service.update_share(share_id, share_data.permission)


@router.delete("/shares/{share_id}", status_code=204)
async def delete_share(
    share_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: ShareService = Depends(get_share_service)
):
    service.delete_share(share_id)
    return None
