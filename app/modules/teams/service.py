from supabase import Client
from app.modules.teams.schemas import (
    TeamCreate, TeamUpdate, TeamResponse,
    MembershipAdd, MembershipUpdate, MembershipResponse
)
from app.core.errors import ValidationError, require_user
from app.core.store import execute, rows, first_row
from typing import List
import logging

logger = logging.getLogger(__name__)


class TeamService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_teams(self) -> List[TeamResponse]:
        """List teams visible to the caller, by name"""
        result = execute(
            self.supabase.table("teams")
            .select("*")
            .order("name", desc=False)
        )
        return [TeamResponse(**team) for team in rows(result)]

    def get_team(self, team_id: str) -> TeamResponse:
        result = execute(self.supabase.table("teams").select("*").eq("id", team_id).limit(1))
        return TeamResponse(**first_row(result, "Team not found"))

    def create_team(self, team_data: TeamCreate, user_id: str) -> TeamResponse:
        """Create a team and make the creator its owner"""
        require_user(user_id)
        name = (team_data.name or "").strip()
        if not name:
            raise ValidationError("Team name is required")

        result = execute(self.supabase.table("teams").insert({
            "name": name,
            "owner_id": user_id
        }))
        team = TeamResponse(**first_row(result, "Failed to create team"))

        # Add creator as owner
        execute(self.supabase.table("memberships").insert({
            "team_id": team.id,
            "user_id": user_id,
            "role": "owner"
        }))
        logger.info(f"Team {team.id} created by {user_id}")
        return team

    def update_team(self, team_id: str, team_data: TeamUpdate) -> TeamResponse:
        if team_data.name is None:
            return self.get_team(team_id)
        name = team_data.name.strip()
        if not name:
            raise ValidationError("Team name is required")
        result = execute(
            self.supabase.table("teams")
            .update({"name": name})
            .eq("id", team_id)
        )
        return TeamResponse(**first_row(result, "Team not found"))

    def delete_team(self, team_id: str) -> None:
        """Delete team; folders, prompts, tags and memberships cascade in the store"""
        execute(self.supabase.table("teams").delete().eq("id", team_id))

    def list_memberships(self, team_id: str) -> List[MembershipResponse]:
        result = execute(
            self.supabase.table("memberships")
            .select("*")
            .eq("team_id", team_id)
            .order("created_at", desc=False)
        )
        return [MembershipResponse(**m) for m in rows(result)]

    def add_membership(self, team_id: str, member_data: MembershipAdd) -> MembershipResponse:
        """Add a member; a user already in the team is a Conflict"""
        result = execute(self.supabase.table("memberships").insert({
            "team_id": team_id,
            "user_id": member_data.user_id,
            "role": member_data.role
        }))
        return MembershipResponse(**first_row(result, "Failed to add member"))

    def update_membership(self, team_id: str, user_id: str, member_data: MembershipUpdate) -> MembershipResponse:
        result = execute(
            self.supabase.table("memberships")
            .update({"role": member_data.role})
            .eq("team_id", team_id)
            .eq("user_id", user_id)
        )
        return MembershipResponse(**first_row(result, "Membership not found"))

    def remove_membership(self, team_id: str, user_id: str) -> None:
        execute(
            self.supabase.table("memberships")
            .delete()
            .eq("team_id", team_id)
            .eq("user_id", user_id)
        )
