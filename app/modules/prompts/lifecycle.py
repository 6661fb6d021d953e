"""
Prompt lifecycle rules.

PromptLifecycle is the only place that writes visibility, public_slug or
folder_id on a prompt. It keeps these invariants:

- public_slug is set exactly when visibility is "public". Every publish issues
  a brand new slug, so links handed out before an unpublish (or a re-publish)
  stop resolving for good.
- A prompt can only be placed in a folder of its own team.
- Restoring a version copies title/body_md only; placement, visibility, slug,
  tags and the version history itself are left alone.

Whether a save appends a version snapshot is decided by settings
(manual_save_creates_version, autosave_creates_version).
"""

import logging
import secrets
import string
from typing import Optional

from supabase import Client

from app.config import settings
from app.core.errors import NotFound, ValidationError, require_user
from app.modules.folders.service import FolderService
from app.modules.prompts.schemas import (
    PromptCreate, PromptUpdate, PromptSave, PromptResponse, PromptWithTagsResponse
)
from app.modules.prompts.service import PromptService
from app.modules.versions.schemas import VersionResponse
from app.modules.versions.service import VersionService

logger = logging.getLogger(__name__)

SLUG_ALPHABET = string.ascii_letters + string.digits + "_-"


def new_public_slug(length: Optional[int] = None) -> str:
    """Random URL-safe token of fixed length"""
    size = length or settings.public_slug_length
    return "".join(secrets.choice(SLUG_ALPHABET) for _ in range(size))


class PromptLifecycle:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.prompts = PromptService(supabase)
        self.folders = FolderService(supabase)
        self.versions = VersionService(supabase)

    # Reads

    def get_prompt(self, prompt_id: str) -> PromptWithTagsResponse:
        return self.prompts.get_prompt(prompt_id)

    def get_by_slug(self, slug: str) -> PromptWithTagsResponse:
        return self.prompts.get_prompt_by_slug(slug)

    # Create / update

    def create_prompt(self, team_id: str, prompt_data: PromptCreate, user_id: str) -> PromptResponse:
        """Create a prompt owned by the caller; private unless asked otherwise"""
        require_user(user_id)
        if prompt_data.folder_id:
            self._check_folder_team(prompt_data.folder_id, team_id)
        slug = new_public_slug() if prompt_data.visibility == "public" else None
        prompt = self.prompts.create_prompt(team_id, prompt_data, user_id, public_slug=slug)
        logger.info(f"Prompt {prompt.id} created in team {team_id} ({prompt.visibility})")
        return prompt

    def update_prompt(self, prompt_id: str, patch: PromptUpdate, user_id: str) -> PromptResponse:
        """Partial update. Visibility and folder changes go through the same rules as publish/move."""
        require_user(user_id)
        fields = patch.model_dump(exclude_unset=True)
        if "title" in fields and not (fields["title"] or "").strip():
            raise ValidationError("Title is required")
        if "body_md" in fields and fields["body_md"] is None:
            fields["body_md"] = ""
        if "visibility" in fields and fields["visibility"] is None:
            del fields["visibility"]

        if "visibility" in fields or fields.get("folder_id"):
            current = self.prompts.get_prompt(prompt_id, include_tags=False)
            if fields.get("folder_id"):
                self._check_folder_team(fields["folder_id"], current.team_id)
            if "visibility" in fields:
                fields["public_slug"] = self._slug_for(fields["visibility"], current)
        return self.prompts.update_prompt(prompt_id, fields)

    def save_prompt(
        self,
        prompt_id: Optional[str],
        data: PromptSave,
        user_id: str,
        team_id: Optional[str] = None,
        autosave: bool = False
    ) -> PromptResponse:
        """Editor save. Creates when prompt_id is None. Blank titles never reach the store."""
        if not (data.title or "").strip():
            raise ValidationError("Title is required")
        require_user(user_id)

        if prompt_id is None:
            if not team_id:
                raise ValidationError("Please select a team")
            prompt = self.prompts.create_prompt(
                team_id, PromptCreate(title=data.title, body_md=data.body_md), user_id
            )
        else:
            prompt = self.prompts.update_prompt(prompt_id, {"title": data.title, "body_md": data.body_md})

        if self._creates_version(autosave):
            self.versions.create_version(prompt.id, prompt.title, prompt.body_md, user_id, data.change_note)
        return prompt

    # Visibility state machine

    def set_visibility(self, prompt_id: str, visibility: str, user_id: str) -> PromptResponse:
        if visibility == "public":
            return self.publish(prompt_id, user_id)
        require_user(user_id)
        return self.prompts.update_prompt(prompt_id, {"visibility": visibility, "public_slug": None})

    def publish(self, prompt_id: str, user_id: str) -> PromptResponse:
        """Make public under a fresh slug. Any earlier slug for this prompt dies."""
        require_user(user_id)
        prompt = self.prompts.update_prompt(prompt_id, {
            "visibility": "public",
            "public_slug": new_public_slug()
        })
        logger.info(f"Prompt {prompt_id} published")
        return prompt

    def unpublish(self, prompt_id: str, user_id: str) -> PromptResponse:
        require_user(user_id)
        prompt = self.prompts.update_prompt(prompt_id, {
            "visibility": "private",
            "public_slug": None
        })
        logger.info(f"Prompt {prompt_id} unpublished")
        return prompt

    # Placement

    def move_prompt(self, prompt_id: str, folder_id: Optional[str], user_id: str) -> PromptResponse:
        """Move into folder_id, or to the team root when None"""
        require_user(user_id)
        if folder_id:
            current = self.prompts.get_prompt(prompt_id, include_tags=False)
            self._check_folder_team(folder_id, current.team_id)
        return self.prompts.update_prompt(prompt_id, {"folder_id": folder_id or None})

    # Versions

    def create_snapshot(self, prompt_id: str, user_id: str, change_note: Optional[str] = None) -> VersionResponse:
        """Append a version holding the prompt's current title/body"""
        require_user(user_id)
        prompt = self.prompts.get_prompt(prompt_id, include_tags=False)
        return self.versions.create_version(prompt_id, prompt.title, prompt.body_md, user_id, change_note)

    def restore_version(self, prompt_id: str, version_id: str, user_id: str) -> PromptResponse:
        require_user(user_id)
        version = self.versions.get_version(version_id)
        if version.prompt_id != prompt_id:
            raise NotFound("Version not found")
        prompt = self.prompts.update_prompt(prompt_id, {
            "title": version.title,
            "body_md": version.body_md
        })
        logger.info(f"Prompt {prompt_id} restored to version {version_id}")
        return prompt

    # Helpers

    def _check_folder_team(self, folder_id: str, team_id: str) -> None:
        folder = self.folders.get_folder(folder_id)
        if folder.team_id != team_id:
            raise ValidationError("Folder belongs to a different team")

    @staticmethod
    def _slug_for(visibility: str, current: PromptResponse) -> Optional[str]:
        if visibility != "public":
            return None
        # Already public: a plain patch keeps the live link
        if current.visibility == "public" and current.public_slug:
            return current.public_slug
        return new_public_slug()

    @staticmethod
    def _creates_version(autosave: bool) -> bool:
        if autosave:
            return settings.autosave_creates_version
        return settings.manual_save_creates_version
