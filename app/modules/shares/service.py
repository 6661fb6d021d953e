from supabase import Client
from app.modules.shares.schemas import ShareCreate, ShareResponse
from app.core.errors import ValidationError
from app.core.store import execute, rows, first_row
from typing import List


class ShareService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_shares(self, prompt_id: str) -> List[ShareResponse]:
        result = execute(
            self.supabase.table("shares")
            .select("*")
            .eq("prompt_id", prompt_id)
            .order("created_at", desc=False)
        )
        return [ShareResponse(**s) for s in rows(result)]

    def create_share(self, prompt_id: str, share_data: ShareCreate) -> ShareResponse:
        if not (share_data.target_user or "").strip():
            raise ValidationError("Target user is required")
        result = execute(self.supabase.table("shares").insert({
            "prompt_id": prompt_id,
            "target_user": share_data.target_user.strip(),
            "permission": share_data.permission
        }))
        return ShareResponse(**first_row(result, "Failed to create share"))

    def update_share(self, share_id: str, permission: str) -> ShareResponse:
        result = execute(
            self.supabase.table("shares")
            .update({"permission": permission})
            .eq("id", share_id)
        )
        return ShareResponse(**first_row(result, "Share not found"))

    def delete_share(self, share_id: str) -> None:
        execute(self.supabase.table("shares").delete().eq("id", share_id))
