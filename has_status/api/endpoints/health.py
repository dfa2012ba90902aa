from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import Any, Optional

from has_status.db.session import check_connection, get_db_or_none

router = APIRouter()


@router.get("/health", response_model=dict[str, Any])
def health_check(db: Optional[Session] = Depends(get_db_or_none)) -> Any:
    """
    Store connectivity: dbState is 1 when the database answers, 0 otherwise,
    including when no engine could be built.
    """
    return {"dbState": 1 if check_connection(db) else 0}


@router.get("/healthz", response_model=dict[str, Any])
def liveness() -> Any:
    """
    Liveness check.
    """
    return {"status": "ok"}
