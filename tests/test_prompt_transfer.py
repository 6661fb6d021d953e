"""Tests for prompt export/import."""

import pytest

from app.config import settings
from app.core.errors import Unauthenticated, ValidationError


def test_export_shape(transfer_service, tag_service, team, titled_prompts, tag):
    tag_service.add_tag_to_prompt(titled_prompts[0].id, tag.id)
    exported = transfer_service.export_prompts(team.id)

    assert exported.version == settings.export_format_version
    assert exported.exportDate is not None
    assert sorted(p.title for p in exported.prompts) == sorted(p.title for p in titled_prompts)

    dumped = exported.model_dump()
    assert set(dumped["prompts"][0]) == {"title", "body_md", "visibility", "created_at", "updated_at"}


def test_import_skips_and_counts_failures(transfer_service, prompt_service, other_team, user):
    document = {
        "version": "1.0",
        "prompts": [
            {"title": "First", "body_md": "one"},
            {"body_md": "no title"},
            {"title": "Third", "body_md": "three", "visibility": "team"},
        ],
    }
    result = transfer_service.import_prompts(other_team.id, document, user["id"])

    assert result.imported == 2
    assert result.total == 3
    assert result.skipped == 1
    assert result.message == "Imported 2 of 3 prompts"
    assert sorted(p.title for p in prompt_service.list_prompts(other_team.id)) == ["First", "Third"]


def test_import_public_record_gets_slug(transfer_service, prompt_service, team, user):
    transfer_service.import_prompts(team.id, {"prompts": [{"title": "Open", "visibility": "public"}]}, user["id"])
    imported = prompt_service.list_prompts(team.id)[0]
    assert imported.visibility == "public"
    assert imported.public_slug


def test_import_skips_invalid_records(transfer_service, team, user):
    document = {"prompts": ["not an object", {"title": "ok"}, {"title": "bad", "visibility": "everyone"}]}
    result = transfer_service.import_prompts(team.id, document, user["id"])
    assert result.message == "Imported 1 of 3 prompts"


def test_import_continues_after_store_failure(transfer_service, supabase, team, user):
    supabase.fail("prompts", "insert", match={"title": "Broken"}, message="insert failed")
    document = {"prompts": [{"title": "Broken"}, {"title": "Fine"}]}
    result = transfer_service.import_prompts(team.id, document, user["id"])
    assert result.imported == 1
    assert result.skipped == 1


@pytest.mark.parametrize("document", [{}, {"prompts": "nope"}, [], {"prompts": None}])
def test_import_rejects_malformed_document(transfer_service, team, user, document):
    with pytest.raises(ValidationError) as exc_info:
        transfer_service.import_prompts(team.id, document, user["id"])
    assert exc_info.value.detail == "Invalid export file format"


def test_import_requires_user(transfer_service, team):
    with pytest.raises(Unauthenticated):
        transfer_service.import_prompts(team.id, {"prompts": []}, None)


def test_export_then_import_into_another_team(transfer_service, prompt_service, team, other_team, titled_prompts, user):
    exported = transfer_service.export_prompts(team.id)
    result = transfer_service.import_prompts(other_team.id, exported.model_dump(mode="json"), user["id"])
    assert result.imported == len(titled_prompts)
    assert {p.title for p in prompt_service.list_prompts(other_team.id)} == {p.title for p in titled_prompts}
