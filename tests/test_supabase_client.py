"""Tests for Supabase client construction and session isolation."""

from types import SimpleNamespace

import pytest

from app.config import settings
from app.core.errors import StoreError
from app.database import supabase_client
from app.database.supabase_client import SupabaseClient
from app.modules.auth.schemas import LoginRequest, RegisterRequest
from app.modules.auth.service import AuthService


class RecordingPostgrest:
    def __init__(self):
        self.token = None

    def auth(self, token):
        self.token = token


@pytest.fixture
def configured(monkeypatch):
    created = []

    def fake_create_client(url, key, options=None):
        client = SimpleNamespace(url=url, key=key, options=options, postgrest=RecordingPostgrest())
        created.append(client)
        return client

    monkeypatch.setattr(settings, "supabase_url", "https://project.supabase.co")
    monkeypatch.setattr(settings, "supabase_key", "anon-key")
    monkeypatch.setattr(supabase_client, "create_client", fake_create_client)
    SupabaseClient.reset_client()
    yield created
    SupabaseClient.reset_client()


def test_shared_client_is_created_once(configured):
    assert SupabaseClient.get_client() is SupabaseClient.get_client()
    assert len(configured) == 1


def test_for_token_scopes_a_new_client_to_the_caller(configured):
    shared = SupabaseClient.get_client()
    scoped = SupabaseClient.for_token("user-jwt")
    assert scoped is not shared
    assert scoped.postgrest.token == "user-jwt"
    assert shared.postgrest.token is None


def test_isolated_client_is_never_the_shared_one(configured):
    shared = SupabaseClient.get_client()
    first = SupabaseClient.isolated()
    second = SupabaseClient.isolated()
    assert first is not shared and second is not first
    assert first.options.auto_refresh_token is False
    assert first.options.persist_session is False
    assert shared.options is None


def test_auth_service_signs_in_on_a_throwaway_client(supabase, faker):
    email = faker.email()
    service = AuthService(supabase, supabase.session_client)
    service.register(RegisterRequest(email=email, password="s3cret!"))
    token = service.login(LoginRequest(email=email, password="s3cret!")).access_token

    assert supabase.headers["Authorization"] == "Bearer anon-key"
    assert len(supabase.session_clients) == 2
    assert service.get_current_user(token)["email"] == email


def test_missing_configuration_is_a_store_error(monkeypatch):
    monkeypatch.setattr(settings, "supabase_url", "")
    SupabaseClient.reset_client()
    with pytest.raises(StoreError):
        SupabaseClient.get_client()
