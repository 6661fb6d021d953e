from supabase import Client
from app.modules.versions.schemas import VersionResponse
from app.core.errors import require_user
from app.core.store import execute, rows, first_row
from typing import List, Optional


class VersionService:
    """Read/append access to prompt_versions. Snapshots are never mutated."""

    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_versions(self, prompt_id: str) -> List[VersionResponse]:
        """Versions of a prompt, newest first"""
        result = execute(
            self.supabase.table("prompt_versions")
            .select("*")
            .eq("prompt_id", prompt_id)
            .order("created_at", desc=True)
        )
        return [VersionResponse(**v) for v in rows(result)]

    def get_version(self, version_id: str) -> VersionResponse:
        result = execute(self.supabase.table("prompt_versions").select("*").eq("id", version_id).limit(1))
        return VersionResponse(**first_row(result, "Version not found"))

    def create_version(
        self,
        prompt_id: str,
        title: str,
        body_md: str,
        user_id: str,
        change_note: Optional[str] = None
    ) -> VersionResponse:
        require_user(user_id)
        result = execute(self.supabase.table("prompt_versions").insert({
            "prompt_id": prompt_id,
            "title": title,
            "body_md": body_md,
            "created_by": user_id,
            "change_note": change_note or None
        }))
        return VersionResponse(**first_row(result, "Failed to create version"))
