"""
Audit Logger

Appends immutable AuditEntry rows after destructive or bulk-mutating operations
and lists them back newest-first.
"""
import logging
from typing import List, Optional

from sqlmodel import Session, select

from has_status.models.audit import AuditEntry

logger = logging.getLogger(__name__)

# Actor recorded when the caller does not say who performed the action
DEFAULT_ACTOR = "admin"


def record(
    db: Session,
    client_id: str,
    action: str,
    target_id: str,
    target_name: Optional[str],
    details: Optional[str] = None,
    performed_by: Optional[str] = None,
    commit: bool = True,
) -> AuditEntry:
    """
    Append one audit entry with a server-assigned timestamp.

    Called after the mutation it describes. With commit=False the entry joins the
    caller's open transaction and is persisted by the caller's commit.

    Args:
        db: Database session
        client_id: Tenant the action was performed in
        action: Action kind, e.g. "delete_task"
        target_id: Id of the affected record
        target_name: Display name of the affected record
        details: Free-text description
        performed_by: Actor string (unverified)
        commit: Whether to commit immediately

    Returns:
        AuditEntry: The stored entry
    """
    entry = AuditEntry(
        clientId=client_id,
        action=action,
        targetId=str(target_id),
        targetName=target_name or "Unknown",
        details=details,
        performedBy=performed_by or DEFAULT_ACTOR,
    )
    db.add(entry)
    if commit:
        db.commit()
        db.refresh(entry)

    logger.info(
        "audit client=%s action=%s target=%s by=%s: %s",
        entry.clientId, entry.action, entry.targetName, entry.performedBy, entry.details,
    )
    return entry


def list_entries(db: Session, client_id: Optional[str] = None) -> List[AuditEntry]:
    """Return audit entries, optionally for one client, newest first."""
    statement = select(AuditEntry)
    if client_id:
        statement = statement.where(AuditEntry.clientId == client_id)
    statement = statement.order_by(AuditEntry.timestamp.desc())
    return list(db.exec(statement).all())
