from supabase import Client
from app.modules.folders.schemas import FolderCreate, FolderResponse
from app.core.errors import ValidationError, require_user
from app.core.store import execute, rows, first_row
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class FolderService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_folders(self, team_id: str) -> List[FolderResponse]:
        result = execute(
            self.supabase.table("folders")
            .select("*")
            .eq("team_id", team_id)
            .order("name", desc=False)
        )
        return [FolderResponse(**f) for f in rows(result)]

    def get_folder(self, folder_id: str) -> FolderResponse:
        result = execute(self.supabase.table("folders").select("*").eq("id", folder_id).limit(1))
        return FolderResponse(**first_row(result, "Folder not found"))

    def create_folder(self, team_id: str, folder_data: FolderCreate, user_id: str) -> FolderResponse:
        require_user(user_id)
        name = (folder_data.name or "").strip()
        if not name:
            raise ValidationError("Folder name is required")
        if folder_data.parent_id:
            parent = self.get_folder(folder_data.parent_id)
            if parent.team_id != team_id:
                raise ValidationError("Parent folder belongs to a different team")

        result = execute(self.supabase.table("folders").insert({
            "team_id": team_id,
            "name": name,
            "parent_id": folder_data.parent_id or None,
            "created_by": user_id
        }))
        return FolderResponse(**first_row(result, "Failed to create folder"))

    def rename_folder(self, folder_id: str, name: str) -> FolderResponse:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Folder name is required")
        result = execute(
            self.supabase.table("folders")
            .update({"name": name})
            .eq("id", folder_id)
        )
        return FolderResponse(**first_row(result, "Folder not found"))

    def delete_folder(self, folder_id: str) -> None:
        """Delete folder; children are not re-parented, the store decides"""
        execute(self.supabase.table("folders").delete().eq("id", folder_id))

    def move_folder(self, folder_id: str, parent_id: Optional[str]) -> FolderResponse:
        """Re-parent a folder. None moves it to the team root."""
        folder = self.get_folder(folder_id)
        if parent_id:
            parent = self.get_folder(parent_id)
            if parent.team_id != folder.team_id:
                raise ValidationError("Parent folder belongs to a different team")
            if folder_id in self.ancestor_ids(parent_id):
                raise ValidationError("Cannot move a folder into itself or one of its descendants")

        result = execute(
            self.supabase.table("folders")
            .update({"parent_id": parent_id})
            .eq("id", folder_id)
        )
        logger.info(f"Folder {folder_id} moved under {parent_id or 'root'}")
        return FolderResponse(**first_row(result, "Folder not found"))

    def ancestor_ids(self, folder_id: str) -> List[str]:
        """Folder ids from folder_id up to its root, inclusive"""
        chain = []
        current = folder_id
        while current:
            if current in chain:
                raise ValidationError(f"Folder hierarchy contains a cycle at {current}")
            chain.append(current)
            result = execute(
                self.supabase.table("folders").select("id, parent_id").eq("id", current).limit(1)
            )
            data = rows(result)
            current = data[0].get("parent_id") if data else None
        return chain
