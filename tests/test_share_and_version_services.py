"""Tests for ShareService and VersionService."""

import pytest

from app.core.errors import NotFound, Unauthenticated, ValidationError
from app.modules.shares.schemas import ShareCreate


def test_share_lifecycle(share_service, prompt, faker):
    target = faker.email()
    share = share_service.create_share(prompt.id, ShareCreate(target_user=f" {target} "))
    assert share.target_user == target
    assert share.permission == "view"

    updated = share_service.update_share(share.id, "edit")
    assert updated.permission == "edit"
    assert [s.id for s in share_service.list_shares(prompt.id)] == [share.id]

    share_service.delete_share(share.id)
    assert share_service.list_shares(prompt.id) == []


def test_share_requires_target(share_service, prompt):
    with pytest.raises(ValidationError):
        share_service.create_share(prompt.id, ShareCreate(target_user="  "))


def test_update_missing_share_is_not_found(share_service):
    with pytest.raises(NotFound):
        share_service.update_share("missing", "edit")


def test_versions_listed_newest_first(version_service, prompt, user):
    first = version_service.create_version(prompt.id, "v1", "one", user["id"], "first")
    second = version_service.create_version(prompt.id, "v2", "two", user["id"])
    assert [v.id for v in version_service.list_versions(prompt.id)] == [second.id, first.id]
    assert first.change_note == "first"
    assert second.change_note is None


def test_create_version_requires_user(version_service, prompt):
    with pytest.raises(Unauthenticated):
        version_service.create_version(prompt.id, "t", "b", None)


def test_get_unknown_version_is_not_found(version_service):
    with pytest.raises(NotFound) as exc_info:
        version_service.get_version("missing")
    assert exc_info.value.detail == "Version not found"
