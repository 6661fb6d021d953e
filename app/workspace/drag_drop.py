from pydantic import BaseModel
from typing import Any, Awaitable, Callable, List, Optional, Union

from app.modules.prompts.lifecycle import PromptLifecycle
from app.modules.prompts.schemas import PromptResponse
from app.workspace.debounce import call_maybe_async


class DragItem(BaseModel):
    id: str
    type: str
    data: Optional[Any] = None


class DropZone(BaseModel):
    id: str
    type: str
    accepts: List[str]
    folder_id: Optional[str] = None  # None for the team-root zone


DropHandler = Callable[[DragItem, DropZone], Union[Any, Awaitable[Any]]]


class DragAndDropState:
    def __init__(self):
        self.dragged_item: Optional[DragItem] = None
        self.drag_over_zone: Optional[str] = None

    def start(self, item: DragItem) -> None:
        self.dragged_item = item

    def end(self) -> None:
        self.dragged_item = None
        self.drag_over_zone = None

    def over(self, zone_id: str) -> None:
        self.drag_over_zone = zone_id

    def leave(self) -> None:
        self.drag_over_zone = None

    def can_drop(self, zone: DropZone) -> bool:
        if self.dragged_item is None:
            return False
        return self.dragged_item.type in zone.accepts

    async def drop(self, zone: DropZone, handler: DropHandler) -> Optional[Any]:
        """Hand the drop to handler if the zone accepts it. Drag state is reset either way."""
        try:
            if not self.can_drop(zone):
                return None
            return await call_maybe_async(handler, self.dragged_item, zone)
        finally:
            self.end()


def move_prompt_handler(lifecycle: PromptLifecycle, user_id: str) -> DropHandler:
    """Drop handler that moves a dragged prompt into the zone's folder"""
    def handle(item: DragItem, zone: DropZone) -> PromptResponse:
        return lifecycle.move_prompt(item.id, zone.folder_id, user_id)
    return handle
