from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session

from has_status.db.session import get_db
from has_status.models.audit import AuditEntry
from has_status.services import audit

router = APIRouter()


@router.get("", response_model=List[AuditEntry])
def list_audit_trail(clientId: Optional[str] = None, db: Session = Depends(get_db)):
    """
    Retrieve audit entries, newest first. Without clientId, all tenants are listed.
    """
    return audit.list_entries(db, clientId)


@router.get("/{client_id}", response_model=List[AuditEntry])
def list_client_audit_trail(client_id: str, db: Session = Depends(get_db)):
    return audit.list_entries(db, client_id)
