"""
Error taxonomy shared by every service.

Services raise these and never catch them; the exception handler registered in
app.main turns them into JSON responses. Store failures coming back from
PostgREST are mapped with store_error().
"""

from postgrest.exceptions import APIError
import logging

logger = logging.getLogger(__name__)

# Postgres / PostgREST error codes we translate
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
NO_ROWS = "PGRST116"


class PromptStashError(Exception):
    status_code = 500
    default_detail = "Internal error"

    def __init__(self, detail: str = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class Unauthenticated(PromptStashError):
    status_code = 401
    default_detail = "Not authenticated"


class NotFound(PromptStashError):
    status_code = 404
    default_detail = "Not found"


class Conflict(PromptStashError):
    status_code = 409
    default_detail = "Conflict"


class ValidationError(PromptStashError):
    status_code = 422
    default_detail = "Invalid input"


class StoreError(PromptStashError):
    status_code = 500
    default_detail = "Store request failed"


def store_error(exc: APIError, not_found: str = None) -> PromptStashError:
    """Map a PostgREST APIError onto the taxonomy. The store message is kept verbatim."""
    code = getattr(exc, "code", None)
    message = getattr(exc, "message", None) or str(exc)
    if code in (UNIQUE_VIOLATION, FOREIGN_KEY_VIOLATION):
        return Conflict(message)
    if code == NO_ROWS:
        return NotFound(not_found or message)
    logger.error(f"Store error {code}: {message}")
    return StoreError(message)


def require_user(user_id: str) -> str:
    if not user_id:
        raise Unauthenticated()
    return user_id
