"""
Thin helpers around PostgREST query execution.

Every service issues its queries through execute() so store failures come back
as taxonomy errors instead of raw APIErrors.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError

from app.core.errors import NotFound, PromptStashError, StoreError, store_error


def execute(query, not_found: Optional[str] = None):
    try:
        return query.execute()
    except PromptStashError:
        raise
    except APIError as e:
        raise store_error(e, not_found)
    except Exception as e:
        raise StoreError(str(e))


def rows(result) -> List[Dict[str, Any]]:
    if result is None or not result.data:
        return []
    return list(result.data)


def first_row(result, not_found: str) -> Dict[str, Any]:
    data = rows(result)
    if not data:
        raise NotFound(not_found)
    return data[0]


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
