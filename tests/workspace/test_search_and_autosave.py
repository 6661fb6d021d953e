"""Tests for SearchController and AutosaveController."""

import asyncio

import pytest

from app.core.errors import StoreError, ValidationError
from app.modules.prompts.schemas import PromptSave
from app.workspace.autosave import AutosaveController
from app.workspace.context import WorkspaceContext
from app.workspace.search import SearchController


@pytest.mark.asyncio
async def test_search_debounces_typing(prompt_service, team, titled_prompts):
    queries = []

    def search(query):
        queries.append(query)
        return prompt_service.list_prompts(team.id, search=query)

    controller = SearchController(search, delay=0.03)
    controller.on_input("e")
    controller.on_input("em")
    await controller.on_input("email")

    assert queries == ["email"]
    assert sorted(p.title for p in controller.results) == ["Cold email opener", "Email writer"]


@pytest.mark.asyncio
async def test_search_drops_stale_response():
    gates = {"slow": asyncio.Event(), "fast": asyncio.Event()}

    async def search(query):
        await gates[query].wait()
        return [query]

    controller = SearchController(search, delay=0)
    slow = asyncio.create_task(controller.search_now("slow"))
    await asyncio.sleep(0)
    fast = asyncio.create_task(controller.search_now("fast"))
    await asyncio.sleep(0)

    gates["fast"].set()
    assert await fast is True
    gates["slow"].set()
    assert await slow is False
    assert controller.results == ["fast"]


@pytest.mark.asyncio
async def test_search_for_context_uses_folder(prompt_service, team, folder, titled_prompts):
    context = WorkspaceContext(team_id=team.id, folder_id=folder.id)
    controller = SearchController.for_context(prompt_service, context, delay=0)
    await controller.search_now("")
    assert {p.title for p in controller.results} == {"Blog outline", "Cold email opener"}


@pytest.mark.asyncio
async def test_autosave_runs_once_after_quiet_window(lifecycle, prompt, user):
    controller = AutosaveController.for_prompt(lifecycle, prompt.id, user["id"], delay=0.03)
    controller.on_change(PromptSave(title="T", body_md="a"))
    task = controller.on_change(PromptSave(title="T", body_md="ab"))
    await task

    assert controller.last_saved.body_md == "ab"
    assert lifecycle.get_prompt(prompt.id).body_md == "ab"
    assert lifecycle.versions.list_versions(prompt.id) == []


@pytest.mark.asyncio
async def test_manual_save_cancels_pending_autosave(lifecycle, prompt, user):
    controller = AutosaveController.for_prompt(lifecycle, prompt.id, user["id"], delay=0.05)
    pending = controller.on_change(PromptSave(title="T", body_md="draft"))
    saved = await controller.save_now(PromptSave(title="T", body_md="final"))

    assert saved.body_md == "final"
    assert pending.cancelled() or pending.done()
    assert not controller.pending
    assert [v.body_md for v in lifecycle.versions.list_versions(prompt.id)] == ["final"]


@pytest.mark.asyncio
async def test_manual_save_waits_for_autosave_in_flight():
    autosave_started = asyncio.Event()
    release_autosave = asyncio.Event()
    store = []

    async def save(data, autosave):
        if autosave:
            autosave_started.set()
            await release_autosave.wait()
        store.append(data.body_md)
        return data

    controller = AutosaveController(save, delay=0)
    autosave = controller.on_change(PromptSave(title="T", body_md="typed"))
    await autosave_started.wait()

    manual = asyncio.create_task(controller.save_now(PromptSave(title="T", body_md="final")))
    await asyncio.sleep(0.01)
    assert store == []
    release_autosave.set()

    assert (await manual).body_md == "final"
    assert (await autosave).body_md == "typed"
    assert store == ["typed", "final"]
    assert controller.last_saved.body_md == "final"


@pytest.mark.asyncio
async def test_manual_save_after_slow_autosave_keeps_latest_body(lifecycle, prompt, user):
    started = asyncio.Event()
    release = asyncio.Event()

    async def save(data, autosave):
        if autosave:
            started.set()
            await release.wait()
        return await asyncio.to_thread(lifecycle.save_prompt, prompt.id, data, user["id"], autosave=autosave)

    controller = AutosaveController(save, delay=0)
    controller.on_change(PromptSave(title="T", body_md="stale"))
    await started.wait()
    manual = asyncio.create_task(controller.save_now(PromptSave(title="T", body_md="latest")))
    await asyncio.sleep(0.01)
    release.set()
    await manual

    assert lifecycle.get_prompt(prompt.id).body_md == "latest"


@pytest.mark.asyncio
async def test_older_save_finishing_last_is_discarded():
    release_old = asyncio.Event()
    applied = []

    async def save(data, autosave):
        if data.body_md == "old":
            await release_old.wait()
        applied.append(data.body_md)
        return data

    controller = AutosaveController(save, delay=0)
    old = asyncio.create_task(controller.save_now(PromptSave(title="T", body_md="old")))
    await asyncio.sleep(0)
    new = await controller.save_now(PromptSave(title="T", body_md="new"))
    release_old.set()

    assert new.body_md == "new"
    assert await old is None
    assert controller.last_saved.body_md == "new"
    assert applied == ["new", "old"]


@pytest.mark.asyncio
async def test_autosave_failure_is_logged_not_raised(caplog):
    def save(data, autosave):
        raise StoreError("network down")

    controller = AutosaveController(save, delay=0)
    result = await controller.on_change(PromptSave(title="T", body_md="x"))

    assert result is None
    assert isinstance(controller.last_error, StoreError)
    assert "network down" in caplog.text


@pytest.mark.asyncio
async def test_autosave_skips_untitled_drafts():
    calls = []
    controller = AutosaveController(lambda data, autosave: calls.append(data), delay=0)
    assert await controller.on_change(PromptSave(title="  ", body_md="x")) is None
    assert calls == []


@pytest.mark.asyncio
async def test_manual_save_failure_propagates(lifecycle, prompt, user):
    controller = AutosaveController.for_prompt(lifecycle, prompt.id, user["id"], delay=0)
    with pytest.raises(ValidationError):
        await controller.save_now(PromptSave(title="", body_md="x"))
