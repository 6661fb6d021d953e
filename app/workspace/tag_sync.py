import logging
from typing import Iterable, List, Tuple

from app.core.errors import PromptStashError
from app.modules.tags.schemas import TagResponse
from app.modules.tags.service import TagService
from app.workspace.debounce import call_maybe_async

logger = logging.getLogger(__name__)


class TagSyncFailed(PromptStashError):
    status_code = 502
    default_detail = "Tag sync failed"


class TagSync:
    """
    Optimistic tag editing for one prompt.

    apply() shows the new tag set immediately, then pushes the difference to
    the store. If any push fails, the operations that did succeed are undone,
    the local set goes back to the last known-good snapshot, and TagSyncFailed
    is raised.
    """

    def __init__(self, prompt_id: str, service: TagService, tags: Iterable[TagResponse] = ()):
        self.prompt_id = prompt_id
        self.service = service
        self.tags: List[TagResponse] = list(tags)

    @property
    def tag_ids(self) -> List[str]:
        return [t.id for t in self.tags]

    async def add(self, tag: TagResponse) -> List[TagResponse]:
        if tag.id in self.tag_ids:
            return self.tags
        return await self.apply(self.tags + [tag])

    async def remove(self, tag_id: str) -> List[TagResponse]:
        return await self.apply([t for t in self.tags if t.id != tag_id])

    async def apply(self, new_tags: Iterable[TagResponse]) -> List[TagResponse]:
        snapshot = list(self.tags)
        new_tags = list(new_tags)
        before = {t.id for t in snapshot}
        after = {t.id for t in new_tags}
        self.tags = new_tags

        done: List[Tuple[str, str]] = []
        try:
            for tag_id in [t.id for t in snapshot if t.id not in after]:
                await call_maybe_async(self.service.remove_tag_from_prompt, self.prompt_id, tag_id)
                done.append(("removed", tag_id))
            for tag_id in [t.id for t in new_tags if t.id not in before]:
                await call_maybe_async(self.service.add_tag_to_prompt, self.prompt_id, tag_id)
                done.append(("added", tag_id))
        except Exception as e:
            self.tags = snapshot
            await self._undo(done)
            detail = e.detail if isinstance(e, PromptStashError) else str(e)
            raise TagSyncFailed(f"Tag sync failed: {detail}") from e
        return self.tags

    async def _undo(self, done: List[Tuple[str, str]]) -> None:
        for action, tag_id in reversed(done):
            try:
                if action == "added":
                    await call_maybe_async(self.service.remove_tag_from_prompt, self.prompt_id, tag_id)
                else:
                    await call_maybe_async(self.service.add_tag_to_prompt, self.prompt_id, tag_id)
            except Exception as e:
                logger.error(f"Could not undo {action} tag {tag_id} on prompt {self.prompt_id}: {e}")
