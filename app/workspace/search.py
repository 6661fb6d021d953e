import asyncio
import logging
from typing import Callable, List, Optional

from app.config import settings
from app.modules.prompts.schemas import PromptResponse
from app.modules.prompts.service import PromptService
from app.workspace.context import WorkspaceContext
from app.workspace.debounce import Debouncer, SequenceGuard, call_maybe_async

logger = logging.getLogger(__name__)


class SearchController:
    """Search-as-you-type over the dashboard list."""

    def __init__(self, search_fn: Callable[[str], List[PromptResponse]], delay: Optional[float] = None):
        self.search_fn = search_fn
        self.query = ""
        self.results: List[PromptResponse] = []
        self._guard = SequenceGuard()
        self._debouncer = Debouncer(
            settings.search_debounce_seconds if delay is None else delay,
            self.search_now
        )

    @classmethod
    def for_context(cls, service: PromptService, context: WorkspaceContext, delay: Optional[float] = None) -> "SearchController":
        def search(query: str) -> List[PromptResponse]:
            return service.list_prompts(context.team_id, folder_id=context.folder_id, search=query)
        return cls(search, delay)

    def on_input(self, query: str) -> asyncio.Task:
        self.query = query
        return self._debouncer.schedule(query)

    async def search_now(self, query: str) -> bool:
        """Run a search; returns False when a newer search superseded this one"""
        sequence = self._guard.issue()
        results = await call_maybe_async(self.search_fn, query)
        if not self._guard.is_latest(sequence):
            logger.debug(f"Dropping stale search results for {query!r}")
            return False
        self.results = results
        return True
