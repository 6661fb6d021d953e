from fastapi import APIRouter, Depends
from app.modules.tags.schemas import TagCreate, TagAssign, TagResponse
from app.modules.tags.service import TagService
from app.core.dependencies import get_current_user_id, get_user_supabase
from supabase import Client
from typing import List, Dict

router = APIRouter(tags=["tags"])


def get_tag_service(supabase: Client = Depends(get_user_supabase)) -> TagService:
    return TagService(supabase)


@router.get("/teams/{team_id}/tags", response_model=List[TagResponse])
async def list_tags(
    team_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: TagService = Depends(get_tag_service)
):
    return service.list_tags(team_id)


@router.post("/teams/{team_id}/tags", response_model=TagResponse, status_code=201)
async def create_tag(
    team_id: str,
    tag_data: TagCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: TagService = Depends(get_tag_service)
):
    """Create a tag (409 when the name is taken in this team)"""
    return service.create_tag(team_id, tag_data, user_data["id"])


@router.delete("/tags/{tag_id}", status_code=204)
async def delete_tag(
    tag_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: TagService = Depends(get_tag_service)
):
    service.delete_tag(tag_id)
    return None


@router.get("/prompts/{prompt_id}/tags", response_model=List[TagResponse])
async def list_prompt_tags(
    prompt_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: TagService = Depends(get_tag_service)
):
    return service.get_prompt_tags(prompt_id)


@router.post("/prompts/{prompt_id}/tags", status_code=204)
async def add_tag_to_prompt(
    prompt_id: str,
    assign: TagAssign,
    user_data: Dict = Depends(get_current_user_id),
    service: TagService = Depends(get_tag_service)
):
    service.add_tag_to_prompt(prompt_id, assign.tag_id)
    return None


@router.delete("/prompts/{prompt_id}/tags/{tag_id}", status_code=204)
async def remove_tag_from_prompt(
    prompt_id: str,
    tag_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: TagService = Depends(get_tag_service)
):
    service.remove_tag_from_prompt(prompt_id, tag_id)
    return None
