"""Tests for TeamService."""

import pytest

from app.core.errors import Conflict, NotFound, Unauthenticated, ValidationError
from app.modules.teams.schemas import MembershipAdd, MembershipUpdate, TeamCreate, TeamUpdate


def test_create_team_makes_creator_owner(team_service, supabase, user):
    team = team_service.create_team(TeamCreate(name="  Growth  "), user["id"])
    assert team.name == "Growth"
    assert team.owner_id == user["id"]

    members = team_service.list_memberships(team.id)
    assert [(m.user_id, m.role) for m in members] == [(user["id"], "owner")]


def test_create_team_requires_name_and_user(team_service, supabase, user):
    with pytest.raises(ValidationError):
        team_service.create_team(TeamCreate(name="   "), user["id"])
    with pytest.raises(Unauthenticated):
        team_service.create_team(TeamCreate(name="x"), None)
    assert supabase.calls_to("teams", "insert") == 0


def test_list_teams_sorted_by_name(team_service, user):
    for name in ("Zeta", "alpha", "Beta"):
        team_service.create_team(TeamCreate(name=name), user["id"])
    names = [t.name for t in team_service.list_teams()]
    assert names == sorted(names)


def test_get_unknown_team_is_not_found(team_service):
    with pytest.raises(NotFound):
        team_service.get_team("missing")


def test_update_team(team_service, team):
    updated = team_service.update_team(team.id, TeamUpdate(name="Renamed"))
    assert updated.name == "Renamed"
    assert team_service.update_team(team.id, TeamUpdate()).name == "Renamed"


def test_delete_team_cascades(team_service, supabase, team, folder, prompt):
    team_service.delete_team(team.id)
    assert supabase.rows("teams") == []
    assert supabase.rows("folders") == []
    assert supabase.rows("prompts") == []
    assert supabase.rows("memberships") == []


def test_membership_lifecycle(team_service, team, faker):
    member_id = faker.uuid4()
    added = team_service.add_membership(team.id, MembershipAdd(user_id=member_id))
    assert added.role == "viewer"

    with pytest.raises(Conflict):
        team_service.add_membership(team.id, MembershipAdd(user_id=member_id, role="editor"))

    updated = team_service.update_membership(team.id, member_id, MembershipUpdate(role="editor"))
    assert updated.role == "editor"

    team_service.remove_membership(team.id, member_id)
    assert member_id not in [m.user_id for m in team_service.list_memberships(team.id)]


def test_update_missing_membership_is_not_found(team_service, team):
    with pytest.raises(NotFound):
        team_service.update_membership(team.id, "nobody", MembershipUpdate(role="editor"))
