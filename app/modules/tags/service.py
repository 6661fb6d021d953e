from supabase import Client
from app.modules.tags.schemas import TagCreate, TagResponse
from app.core.errors import ValidationError, require_user
from app.core.store import execute, rows, first_row
from typing import List


class TagService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_tags(self, team_id: str) -> List[TagResponse]:
        result = execute(
            self.supabase.table("tags")
            .select("*")
            .eq("team_id", team_id)
            .order("name", desc=False)
        )
        return [TagResponse(**t) for t in rows(result)]

    def create_tag(self, team_id: str, tag_data: TagCreate, user_id: str) -> TagResponse:
        """Create a tag; a name already used in the team is a Conflict"""
        require_user(user_id)
        name = (tag_data.name or "").strip()
        if not name:
            raise ValidationError("Tag name is required")
        result = execute(self.supabase.table("tags").insert({
            "team_id": team_id,
            "name": name,
            "created_by": user_id
        }))
        return TagResponse(**first_row(result, "Failed to create tag"))

    def delete_tag(self, tag_id: str) -> None:
        execute(self.supabase.table("tags").delete().eq("id", tag_id))

    def add_tag_to_prompt(self, prompt_id: str, tag_id: str) -> None:
        """Insert the join row; associating twice is a Conflict, not a no-op"""
        execute(self.supabase.table("prompt_tags").insert({
            "prompt_id": prompt_id,
            "tag_id": tag_id
        }))

    def remove_tag_from_prompt(self, prompt_id: str, tag_id: str) -> None:
        execute(
            self.supabase.table("prompt_tags")
            .delete()
            .eq("prompt_id", prompt_id)
            .eq("tag_id", tag_id)
        )

    def get_prompt_tags(self, prompt_id: str) -> List[TagResponse]:
        """Tags attached to a prompt; join rows whose tag is gone are skipped"""
        result = execute(
            self.supabase.table("prompt_tags")
            .select("tag_id, tags(*)")
            .eq("prompt_id", prompt_id)
        )
        return [TagResponse(**item["tags"]) for item in rows(result) if item.get("tags")]
