import hashlib
import time
from supabase import Client
from app.database.supabase_client import SupabaseClient
from app.modules.auth.schemas import LoginRequest, RegisterRequest, TokenResponse, RegisterResponse
from app.core.errors import Conflict, StoreError, Unauthenticated
from typing import Callable, Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

# Short-lived cache for get_current_user; a page load fans out into many requests with one token
_AUTH_USER_CACHE: Dict[str, tuple] = {}
_AUTH_CACHE_TTL_SEC = 60
_AUTH_CACHE_MAX_SIZE = 500


def clear_auth_cache() -> None:
    _AUTH_USER_CACHE.clear()


class AuthService:
    def __init__(self, supabase: Client, client_factory: Optional[Callable[[], Client]] = None):
        # Sign-up and sign-in run on their own client so the shared one stays anonymous
        self.supabase = supabase
        self.client_factory = client_factory or SupabaseClient.isolated

    def register(self, register_data: RegisterRequest) -> RegisterResponse:
        """Register a new user using Supabase Auth"""
        user_metadata = {}
        if register_data.full_name:
            user_metadata["full_name"] = register_data.full_name
        client = self.client_factory()
        try:
            auth_response = client.auth.sign_up({
                "email": register_data.email,
                "password": register_data.password,
                "options": {
                    "data": user_metadata
                }
            })
        except Exception as e:
            error_message = str(e)
            if "already registered" in error_message.lower() or "already exists" in error_message.lower():
                raise Conflict("User already exists")
            raise StoreError(f"Registration failed: {error_message}")

        if not auth_response.user:
            raise StoreError("Failed to register user")

        return RegisterResponse(
            user_id=auth_response.user.id,
            email=auth_response.user.email or register_data.email,
            message="User registered successfully"
        )

    def login(self, login_data: LoginRequest) -> TokenResponse:
        """Authenticate user using Supabase Auth"""
        client = self.client_factory()
        try:
            auth_response = client.auth.sign_in_with_password({
                "email": login_data.email,
                "password": login_data.password
            })
        except Exception as e:
            error_message = str(e)
            if "invalid" in error_message.lower() or "credentials" in error_message.lower():
                raise Unauthenticated("Invalid email or password")
            raise StoreError(f"Login failed: {error_message}")

        if not auth_response.user or not auth_response.session:
            raise Unauthenticated("Invalid email or password")

        return TokenResponse(
            access_token=auth_response.session.access_token,
            token_type="bearer",
            user_id=auth_response.user.id,
            email=auth_response.user.email or login_data.email
        )

    def get_current_user(self, token: str) -> Dict[str, Any]:
        """Resolve a Supabase access token to the user it belongs to"""
        cache_key = hashlib.sha256(token.encode()).hexdigest()
        now = time.monotonic()
        if cache_key in _AUTH_USER_CACHE:
            user_data, expiry = _AUTH_USER_CACHE[cache_key]
            if now < expiry:
                return user_data
            del _AUTH_USER_CACHE[cache_key]
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            logger.info(f"Token rejected by auth provider: {e}")
            raise Unauthenticated("Invalid or expired token")

        if not user_response or not user_response.user:
            raise Unauthenticated("Invalid or expired token")
        user = user_response.user
        user_data = {
            "id": user.id,
            "email": user.email,
            "user_metadata": user.user_metadata or {},
            "created_at": user.created_at,
        }
        if len(_AUTH_USER_CACHE) < _AUTH_CACHE_MAX_SIZE:
            _AUTH_USER_CACHE[cache_key] = (user_data, now + _AUTH_CACHE_TTL_SEC)
        return user_data

    def logout(self, token: str) -> bool:
        """Revoke the caller's session and drop its cache entry"""
        _AUTH_USER_CACHE.pop(hashlib.sha256(token.encode()).hexdigest(), None)
        try:
            # Keyed on the caller's JWT; the shared client holds no session to sign out
            self.supabase.auth.admin.sign_out(token)
            return True
        except Exception as e:
            logger.warning(f"Sign out failed: {e}")
            return False
