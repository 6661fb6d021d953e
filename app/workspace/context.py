from typing import Optional


class WorkspaceContext:
    """Current team/folder/tag selection, passed explicitly to whatever needs it."""

    def __init__(self, team_id: Optional[str] = None, folder_id: Optional[str] = None, tag_id: Optional[str] = None):
        self.team_id = team_id
        self.folder_id = folder_id
        self.tag_id = tag_id

    def select_team(self, team_id: Optional[str]) -> None:
        # Folders and tags are team-scoped
        if team_id != self.team_id:
            self.folder_id = None
            self.tag_id = None
        self.team_id = team_id

    def select_folder(self, folder_id: Optional[str]) -> None:
        self.folder_id = folder_id

    def select_tag(self, tag_id: Optional[str]) -> None:
        self.tag_id = tag_id

    def __repr__(self) -> str:
        return f"WorkspaceContext(team_id={self.team_id!r}, folder_id={self.folder_id!r}, tag_id={self.tag_id!r})"
