from supabase import Client
from app.modules.prompts.schemas import (
    PromptCreate, PromptResponse, PromptWithTagsResponse,
    BulkDeleteResponse, BulkDeleteFailure
)
from app.modules.tags.service import TagService
from app.core.errors import NotFound, PromptStashError, ValidationError, require_user
from app.core.store import execute, rows, first_row, utcnow_iso
from typing import Any, Dict, List, Optional
import asyncio
import logging

logger = logging.getLogger(__name__)

PROMPT_NOT_FOUND = "Prompt not found"

# LIKE metacharacters; PostgREST also reads * as %
LIKE_SPECIAL = ("\\", "%", "_", "*")

# Columns a patch may touch; id/team/owner/timestamps are store-managed
MUTABLE_FIELDS = ("title", "body_md", "folder_id", "visibility", "public_slug")


def escape_like(text: str) -> str:
    """Escape user text so ilike treats it as a literal substring"""
    for char in LIKE_SPECIAL:
        text = text.replace(char, "\\" + char)
    return text


class PromptService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.tags = TagService(supabase)

    def list_prompts(
        self,
        team_id: str,
        folder_id: Optional[str] = None,
        search: Optional[str] = None
    ) -> List[PromptResponse]:
        """List a team's prompts, most recently updated first"""
        query = self.supabase.table("prompts")\
            .select("*")\
            .eq("team_id", team_id)
        if folder_id:
            query = query.eq("folder_id", folder_id)
        if search and search.strip():
            query = query.ilike("title", f"%{escape_like(search.strip())}%")
        result = execute(query.order("updated_at", desc=True))
        return [PromptResponse(**p) for p in rows(result)]

    def get_prompt(self, prompt_id: str, include_tags: bool = True) -> PromptWithTagsResponse:
        """Get a prompt and, by default, resolve its tags in a second round trip"""
        result = execute(self.supabase.table("prompts").select("*").eq("id", prompt_id).limit(1))
        prompt = PromptWithTagsResponse(**first_row(result, PROMPT_NOT_FOUND))
        if include_tags:
            prompt.tags = self.tags.get_prompt_tags(prompt_id)
        return prompt

    def get_prompt_by_slug(self, slug: str) -> PromptWithTagsResponse:
        """Public lookup. Unknown slug and no-longer-public prompt look the same."""
        if not slug:
            raise NotFound(PROMPT_NOT_FOUND)
        result = execute(
            self.supabase.table("prompts")
            .select("*")
            .eq("public_slug", slug)
            .eq("visibility", "public")
            .limit(1)
        )
        prompt = PromptWithTagsResponse(**first_row(result, PROMPT_NOT_FOUND))
        prompt.tags = self.tags.get_prompt_tags(prompt.id)
        return prompt

    def create_prompt(
        self,
        team_id: str,
        prompt_data: PromptCreate,
        user_id: str,
        public_slug: Optional[str] = None
    ) -> PromptResponse:
        require_user(user_id)
        if not team_id:
            raise ValidationError("Team is required")
        if not (prompt_data.title or "").strip():
            raise ValidationError("Title is required")

        result = execute(self.supabase.table("prompts").insert({
            "team_id": team_id,
            "folder_id": prompt_data.folder_id or None,
            "owner_id": user_id,
            "title": prompt_data.title,
            "body_md": prompt_data.body_md or "",
            "visibility": prompt_data.visibility or "private",
            "public_slug": public_slug
        }))
        return PromptResponse(**first_row(result, "Failed to create prompt"))

    def update_prompt(self, prompt_id: str, patch: Dict[str, Any]) -> PromptResponse:
        """Write the mutable fields present in patch and return the full row"""
        update_data = {k: v for k, v in patch.items() if k in MUTABLE_FIELDS}
        if not update_data:
            return self.get_prompt(prompt_id, include_tags=False)
        update_data["updated_at"] = utcnow_iso()
        result = execute(
            self.supabase.table("prompts")
            .update(update_data)
            .eq("id", prompt_id)
        )
        return PromptResponse(**first_row(result, PROMPT_NOT_FOUND))

    def delete_prompt(self, prompt_id: str) -> bool:
        """Hard delete; tags, versions and shares cascade in the store"""
        result = execute(self.supabase.table("prompts").delete().eq("id", prompt_id))
        return len(rows(result)) > 0

    async def bulk_delete(self, prompt_ids: List[str]) -> BulkDeleteResponse:
        """Issue every delete at once and wait for all of them. Not a transaction."""
        unique_ids = list(dict.fromkeys(prompt_ids))
        outcomes = await asyncio.gather(
            *(asyncio.to_thread(self.delete_prompt, pid) for pid in unique_ids),
            return_exceptions=True
        )
        deleted, failed = [], []
        for pid, outcome in zip(unique_ids, outcomes):
            if isinstance(outcome, PromptStashError):
                failed.append(BulkDeleteFailure(id=pid, detail=outcome.detail))
            elif isinstance(outcome, BaseException):
                failed.append(BulkDeleteFailure(id=pid, detail=str(outcome)))
            elif not outcome:
                failed.append(BulkDeleteFailure(id=pid, detail=PROMPT_NOT_FOUND))
            else:
                deleted.append(pid)
        if failed:
            logger.warning(f"Bulk delete: {len(deleted)} deleted, {len(failed)} failed")
        else:
            logger.info(f"Bulk delete: {len(deleted)} deleted")
        return BulkDeleteResponse(deleted=deleted, failed=failed)
