import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from app.core.dependencies import get_current_user_id, get_user_supabase
from app.database.supabase_client import get_client_factory, get_supabase
from app.main import app, limiter
from app.modules.auth.service import clear_auth_cache
from tests.fakes import FakeSupabase

pytest_plugins = [
    "tests.fixtures.store_fixtures",
    "tests.fixtures.prompt_fixtures",
]


@pytest.fixture(scope="function")
def supabase():
    """Fresh in-memory store for every test"""
    return FakeSupabase()


@pytest.fixture(autouse=True)
def _reset_auth_cache():
    clear_auth_cache()
    yield
    clear_auth_cache()


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    """Every TestClient request comes from the same address"""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture(scope="function")
def auth_token(supabase, user):
    token = "test-token"
    supabase.auth.add_user(token, user_id=user["id"], email=user["email"])
    return token


@pytest.fixture(scope="function")
def client(supabase):
    """TestClient bound to the fake store"""
    app.dependency_overrides[get_supabase] = lambda: supabase
    app.dependency_overrides[get_client_factory] = lambda: supabase.session_client

    def user_supabase(user_data=Depends(get_current_user_id)):
        return supabase

    app.dependency_overrides[get_user_supabase] = user_supabase
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def auth_headers(auth_token):
    return {"Authorization": f"Bearer {auth_token}"}
