"""
API Dependencies Module

Request-level helpers shared by the endpoint modules. Tenancy comes from the
clientId query parameter or, for verbs with a body, from the body.
"""
from typing import Optional
from fastapi import Query

from has_status.core.config import settings


def resolve_client_id(*candidates: Optional[str]) -> str:
    """First non-empty clientId among the candidates, else the default tenant."""
    for candidate in candidates:
        if candidate:
            return candidate
    return settings.DEFAULT_CLIENT_ID


def get_client_id(clientId: Optional[str] = Query(default=None)) -> str:
    """Dependency for endpoints that only read clientId from the query string."""
    return resolve_client_id(clientId)
