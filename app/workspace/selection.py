from typing import Callable, Iterable, List, Set

from app.modules.prompts.schemas import BulkDeleteResponse
from app.workspace.debounce import call_maybe_async


class BulkSelection:
    """Dashboard multi-select over the currently listed prompt ids."""

    def __init__(self, prompt_ids: Iterable[str] = ()):
        self.visible: List[str] = list(prompt_ids)
        self.selected: Set[str] = set()

    @property
    def count(self) -> int:
        return len(self.visible)

    @property
    def all_selected(self) -> bool:
        return bool(self.visible) and self.selected.issuperset(self.visible)

    def replace(self, prompt_ids: Iterable[str]) -> None:
        """New listing: keep the selection only for ids still shown"""
        self.visible = list(prompt_ids)
        self.selected &= set(self.visible)

    def toggle(self, prompt_id: str) -> None:
        if prompt_id in self.selected:
            self.selected.discard(prompt_id)
        elif prompt_id in self.visible:
            self.selected.add(prompt_id)

    def toggle_all(self) -> None:
        if self.all_selected:
            self.selected.clear()
        else:
            self.selected = set(self.visible)

    def clear(self) -> None:
        self.selected.clear()

    def reconcile(self, result: BulkDeleteResponse) -> None:
        """Drop only the ids the store confirmed as deleted; failures stay listed and selected"""
        removed = set(result.deleted)
        self.visible = [pid for pid in self.visible if pid not in removed]
        self.selected -= removed

    async def delete_selected(self, bulk_delete: Callable[[List[str]], BulkDeleteResponse]) -> BulkDeleteResponse:
        ids = [pid for pid in self.visible if pid in self.selected]
        result = await call_maybe_async(bulk_delete, ids)
        self.reconcile(result)
        return result
