from fastapi import APIRouter, Depends
from app.modules.folders.schemas import FolderCreate, FolderUpdate, FolderMove, FolderResponse
from app.modules.folders.service import FolderService
from app.core.dependencies import get_current_user_id, get_user_supabase
from supabase import Client
from typing import List, Dict

router = APIRouter(tags=["folders"])


def get_folder_service(supabase: Client = Depends(get_user_supabase)) -> FolderService:
    return FolderService(supabase)


@router.get("/teams/{team_id}/folders", response_model=List[FolderResponse])
async def list_folders(
    team_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: FolderService = Depends(get_folder_service)
):
    """List a team's folders by name"""
    return service.list_folders(team_id)


@router.post("/teams/{team_id}/folders", response_model=FolderResponse, status_code=201)
async def create_folder(
    team_id: str,
    folder_data: FolderCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: FolderService = Depends(get_folder_service)
):
    return service.create_folder(team_id, folder_data, user_data["id"])


@router.get("/folders/{folder_id}", response_model=FolderResponse)
async def get_folder(
    folder_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: FolderService = Depends(get_folder_service)
):
    return service.get_folder(folder_id)


@router.put("/folders/{folder_id}", response_model=FolderResponse)
async def rename_folder(
    folder_id: str,
    folder_data: FolderUpdate,
    user_data: Dict = Depends(get_current_user_id),
    service: FolderService = Depends(get_folder_service)
):
    return service.rename_folder(folder_id, folder_data.name)


@router.post("/folders/{folder_id}/move", response_model=FolderResponse)
async def move_folder(
    folder_id: str,
    move: FolderMove,
    user_data: Dict = Depends(get_current_user_id),
    service: FolderService = Depends(get_folder_service)
):
    """Re-parent a folder (null parent_id means team root)"""
    return service.move_folder(folder_id, move.parent_id)


@router.delete("/folders/{folder_id}", status_code=204)
async def delete_folder(
    folder_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: FolderService = Depends(get_folder_service)
):
    service.delete_folder(folder_id)
    return None
