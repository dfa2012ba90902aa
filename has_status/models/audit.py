"""
Audit Trail Model Module

Append-only records of destructive and bulk-mutating operations. The service
layer only ever inserts and reads these rows.
"""
from typing import Optional
from sqlmodel import SQLModel, Field
import uuid

from datetime import datetime


class AuditEntry(SQLModel, table=True):
    """
    Audit entry table model.

    Attributes:
        id: Unique identifier (UUID)
        clientId: Tenant the action was performed in
        action: Kind of action, e.g. "delete_team_member", "delete_task", "mass_update"
        targetId: Id of the affected record (or a synthetic id for bulk actions)
        targetName: Human readable name of the affected record
        details: Free text, e.g. reassignment target and counts
        performedBy: Unverified actor string supplied by the caller
        timestamp: Server-assigned ISO timestamp
    """
    __tablename__ = "audit_trail"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    clientId: str = Field(nullable=False, index=True)
    action: str = Field(nullable=False)
    targetId: str = Field(nullable=False)
    targetName: str = Field(nullable=False)
    details: Optional[str] = None
    performedBy: str = Field(nullable=False)
    timestamp: str = Field(default_factory=lambda: datetime.utcnow().isoformat(), index=True)
