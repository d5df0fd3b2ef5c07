"""Shared execution of Supabase queries with error translation."""

import logging
from datetime import datetime
from typing import Any, Protocol

import httpx
from postgrest.exceptions import APIError

from diet_tracker.errors import ConflictError, StoreUnavailableError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


class ExecutableQuery(Protocol):
    """Any Supabase request builder that can be executed."""

    def execute(self) -> Any:
        """Run the request against the store."""


def execute(query: ExecutableQuery, operation: str) -> Any:
    """Execute a query, converting store failures into domain errors."""
    try:
        return query.execute()
    except APIError as exc:
        if exc.code == UNIQUE_VIOLATION:
            raise ConflictError() from exc
        logger.exception("Supabase request failed", extra={"operation": operation})
        raise StoreUnavailableError() from exc
    except httpx.HTTPError as exc:
        logger.exception("Supabase unreachable", extra={"operation": operation})
        raise StoreUnavailableError() from exc


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column, returning None for empty values."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None
