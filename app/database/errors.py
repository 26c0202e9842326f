import logging

from fastapi import HTTPException
from postgrest.exceptions import APIError

from app.database.types import FOREIGN_KEY_VIOLATION

logger = logging.getLogger(__name__)


def http_error_from_api_error(e: APIError, conflict_detail: str) -> HTTPException:
    """Map a Supabase data API error to the HTTP error returned to the admin UI."""
    if e.code == FOREIGN_KEY_VIOLATION:
        return HTTPException(status_code=409, detail=conflict_detail)
    logger.error(f"Supabase data API error {e.code}: {e.message}")
    return HTTPException(status_code=500, detail=e.message or "Database error")
