import asyncio
import logging
from typing import Callable, Optional

from app.config import settings
from app.modules.prompts.lifecycle import PromptLifecycle
from app.modules.prompts.schemas import PromptResponse, PromptSave
from app.workspace.debounce import Debouncer, RevisionGate, call_maybe_async

logger = logging.getLogger(__name__)

SaveFn = Callable[[PromptSave, bool], PromptResponse]


class AutosaveController:
    """
    Editor save coordination.

    Keystrokes schedule a debounced autosave; the Save button saves at once.
    Both draw revisions from the same counter, and a result whose revision is
    older than one already applied is discarded, so the newest edit wins no
    matter which response arrives last. A manual save first waits for an
    autosave that already left its window, so the older write cannot land
    after it. Autosave errors are logged and kept in last_error, manual save
    errors propagate to the caller.
    """

    def __init__(self, save_fn: SaveFn, delay: Optional[float] = None):
        self.save_fn = save_fn
        self.last_saved: Optional[PromptResponse] = None
        self.last_error: Optional[Exception] = None
        self._gate = RevisionGate()
        self._in_flight: Optional[asyncio.Task] = None
        self._debouncer = Debouncer(
            settings.autosave_debounce_seconds if delay is None else delay,
            self._autosave
        )

    @classmethod
    def for_prompt(cls, lifecycle: PromptLifecycle, prompt_id: str, user_id: str, delay: Optional[float] = None) -> "AutosaveController":
        def save(data: PromptSave, autosave: bool) -> PromptResponse:
            return lifecycle.save_prompt(prompt_id, data, user_id, autosave=autosave)
        return cls(save, delay)

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    def on_change(self, data: PromptSave) -> asyncio.Task:
        return self._debouncer.schedule(data, self._gate.next())

    async def save_now(self, data: PromptSave) -> Optional[PromptResponse]:
        self._debouncer.cancel()
        revision = self._gate.next()
        in_flight = self._in_flight
        if in_flight is not None and not in_flight.done() and in_flight is not asyncio.current_task():
            # An autosave already past its window must reach the store before this write
            await asyncio.wait([in_flight])
        result = await call_maybe_async(self.save_fn, data, False)
        return self._apply(revision, result)

    async def _autosave(self, data: PromptSave, revision: int) -> Optional[PromptResponse]:
        if not (data.title or "").strip():
            # Nothing to save until the prompt has a title
            return None
        self._in_flight = asyncio.current_task()
        try:
            result = await call_maybe_async(self.save_fn, data, True)
        except Exception as e:
            logger.warning(f"Autosave of revision {revision} failed: {e}")
            self.last_error = e
            return None
        finally:
            if self._in_flight is asyncio.current_task():
                self._in_flight = None
        return self._apply(revision, result)

    def _apply(self, revision: int, result: PromptResponse) -> Optional[PromptResponse]:
        if not self._gate.accept(revision):
            return None
        self.last_saved = result
        self.last_error = None
        return result
