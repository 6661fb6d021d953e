"""
Debouncing and response ordering for client-side interactions.

A Debouncer only ever runs the most recent call scheduled within its quiet
window. Calls that already left the window run to completion; their results
are filtered by a SequenceGuard or RevisionGate instead of being aborted.
"""

import asyncio
import inspect
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


async def call_maybe_async(fn: Callable, *args, **kwargs) -> Any:
    """Await coroutine functions; run blocking ones (the Supabase services) in a thread."""
    if inspect.iscoroutinefunction(fn):
        return await fn(*args, **kwargs)
    result = await asyncio.to_thread(fn, *args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


class Debouncer:
    def __init__(self, delay: float, callback: Callable):
        self.delay = delay
        self.callback = callback
        self._waiting: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._waiting is not None and not self._waiting.done()

    def schedule(self, *args, **kwargs) -> asyncio.Task:
        """Cancel the waiting call, if any, and restart the quiet window with these arguments"""
        self.cancel()
        task = asyncio.create_task(self._run(args, kwargs))
        self._waiting = task
        return task

    def cancel(self) -> None:
        if self._waiting is not None and not self._waiting.done():
            self._waiting.cancel()
        self._waiting = None

    async def _run(self, args, kwargs):
        await asyncio.sleep(self.delay)
        # Past the window: this call is committed and no longer cancellable
        if self._waiting is asyncio.current_task():
            self._waiting = None
        return await call_maybe_async(self.callback, *args, **kwargs)


class SequenceGuard:
    """Numbers outgoing requests; only the newest one may apply its response."""

    def __init__(self):
        self._issued = 0

    @property
    def latest(self) -> int:
        return self._issued

    def issue(self) -> int:
        self._issued += 1
        return self._issued

    def is_latest(self, sequence: int) -> bool:
        return sequence == self._issued


class RevisionGate:
    """Logical clock for saves: a result older than one already applied is dropped."""

    def __init__(self):
        self._counter = 0
        self.applied = 0

    def next(self) -> int:
        self._counter += 1
        return self._counter

    def accept(self, revision: int) -> bool:
        if revision < self.applied:
            logger.debug(f"Discarding revision {revision}; {self.applied} already applied")
            return False
        self.applied = revision
        return True
