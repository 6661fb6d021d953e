from fastapi import APIRouter, Depends
from app.modules.teams.schemas import (
    TeamCreate, TeamUpdate, TeamResponse,
    MembershipAdd, MembershipUpdate, MembershipResponse
)
from app.modules.teams.service import TeamService
from app.core.dependencies import get_current_user_id, get_user_supabase
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/teams", tags=["teams"])


def get_team_service(supabase: Client = Depends(get_user_supabase)) -> TeamService:
    return TeamService(supabase)


@router.get("", response_model=List[TeamResponse])
async def list_teams(
    user_data: Dict = Depends(get_current_user_id),
    service: TeamService = Depends(get_team_service)
):
    """List teams the caller can see (row-level security filters membership)"""
    return service.list_teams()


@router.post("", response_model=TeamResponse, status_code=201)
async def create_team(
    team_data: TeamCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: TeamService = Depends(get_team_service)
):
    """Create a team; the caller becomes its owner"""
    return service.create_team(team_data, user_data["id"])


@router.get("/{team_id}", response_model=TeamResponse)
async def get_team(
    team_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: TeamService = Depends(get_team_service)
):
    return service.get_team(team_id)


@router.put("/{team_id}", response_model=TeamResponse)
async def update_team(
    team_id: str,
    team_data: TeamUpdate,
    user_data: Dict = Depends(get_current_user_id),
    service: TeamService = Depends(get_team_service)
):
    return service.update_team(team_id, team_data)


@router.delete("/{team_id}", status_code=204)
async def delete_team(
    team_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: TeamService = Depends(get_team_service)
):
    service.delete_team(team_id)
    return None


@router.get("/{team_id}/members", response_model=List[MembershipResponse])
async def list_members(
    team_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: TeamService = Depends(get_team_service)
):
    return service.list_memberships(team_id)


@router.post("/{team_id}/members", response_model=MembershipResponse, status_code=201)
async def add_member(
    team_id: str,
    member_data: MembershipAdd,
    user_data: Dict = Depends(get_current_user_id),
    service: TeamService = Depends(get_team_service)
):
    return service.add_membership(team_id, member_data)


@router.put("/{team_id}/members/{user_id}", response_model=MembershipResponse)
async def update_member(
    team_id: str,
    user_id: str,
    member_data: MembershipUpdate,
    user_data: Dict = Depends(get_current_user_id),
    service: TeamService = Depends(get_team_service)
):
    return service.update_membership(team_id, user_id, member_data)


@router.delete("/{team_id}/members/{user_id}", status_code=204)
async def remove_member(
    team_id: str,
    user_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: TeamService = Depends(get_team_service)
):
    service.remove_membership(team_id, user_id)
    return None
