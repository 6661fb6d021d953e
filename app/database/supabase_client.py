from supabase import create_client, Client, ClientOptions
from app.config import settings
from app.core.errors import StoreError
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class SupabaseClient:
    _client: Client = None

    @classmethod
    def _create(cls, options: ClientOptions = None) -> Client:
        if not settings.supabase_url or not settings.supabase_key:
            raise StoreError("Supabase is not configured (set SUPABASE_URL and SUPABASE_KEY)")
        if options is None:
            return create_client(settings.supabase_url, settings.supabase_key)
        return create_client(settings.supabase_url, settings.supabase_key, options=options)

    @classmethod
    def get_client(cls) -> Client:
        """
        Shared anon-key client for token lookups and anonymous public reads.
        It must never hold a user session: a sign-in on a client rewrites its
        table Authorization header to that user's JWT.
        """
        if cls._client is None:
            cls._client = cls._create()
            logger.info(f"Supabase client created for {settings.supabase_url}")
        return cls._client

    @classmethod
    def for_token(cls, access_token: str) -> Client:
        """
        Fresh client whose table queries carry the caller's JWT, so row-level
        security policies see auth.uid(). Never cached: one per request.
        """
        client = cls._create()
        client.postgrest.auth(access_token)
        return client

    @classmethod
    def isolated(cls) -> Client:
        """Throwaway client for sign-up and sign-in; the session dies with it"""
        return cls._create(ClientOptions(auto_refresh_token=False, persist_session=False))

    @classmethod
    def reset_client(cls):
        cls._client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()


def get_client_factory() -> Callable[[], Client]:
    """Dependency handing out the constructor for session-holding clients"""
    return SupabaseClient.isolated
