"""
Core dependencies for authentication and request-scoped state
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.database.supabase_client import SupabaseClient, get_client_factory, get_supabase
from app.modules.auth.service import AuthService
from app.core.errors import Unauthenticated
from supabase import Client
from typing import Any, Callable, Dict, Optional
import logging

logger = logging.getLogger(__name__)

# auto_error=False so a missing header surfaces as Unauthenticated (401), not a bare 403
security = HTTPBearer(auto_error=False)


def get_auth_service(
    supabase: Client = Depends(get_supabase),
    client_factory: Callable[[], Client] = Depends(get_client_factory)
) -> AuthService:
    return AuthService(supabase, client_factory)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> Optional[Dict[str, Any]]:
    """Resolve the bearer token if one was sent; anonymous callers get None"""
    if credentials is None or not credentials.credentials:
        return None
    return auth_service.get_current_user(credentials.credentials)


def get_current_user_id(
    user_data: Optional[Dict[str, Any]] = Depends(get_optional_user)
) -> Dict[str, Any]:
    """Extract current user info from JWT token"""
    if user_data is None:
        raise Unauthenticated()
    return user_data


def get_user_supabase(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    user_data: Dict[str, Any] = Depends(get_current_user_id)
) -> Client:
    """Store client acting as the authenticated caller"""
    return SupabaseClient.for_token(credentials.credentials)


class RequestSession:
    """Per-request bundle of the store client and the caller's identity."""

    def __init__(self, supabase: Client, user: Optional[Dict[str, Any]] = None):
        self.supabase = supabase
        self.user = user

    @property
    def user_id(self) -> Optional[str]:
        return self.user["id"] if self.user else None


def get_session(
    user_data: Dict[str, Any] = Depends(get_current_user_id),
    supabase: Client = Depends(get_user_supabase)
) -> RequestSession:
    return RequestSession(supabase, user_data)
