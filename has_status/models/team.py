"""
Team Member Model Module

Team members belong to one client. Their display name (username) is what tasks
store in `assigned_to`, so renaming or deleting a member has to keep tasks in step.
"""
import re
from typing import Optional
from sqlmodel import SQLModel, Field
import uuid

# Superficial shape check only: something@something.tld
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Organization label given to new members when none is supplied
DEFAULT_ORG = "PHG"


class TeamMember(SQLModel, table=True):
    """
    Team member table model.

    Attributes:
        id: Unique identifier (UUID)
        clientId: Tenant partition the member belongs to
        username: Display name, used as the join key by Task.assigned_to
        email: Contact email
        org: Organization label (default "PHG")
        not_working: Set when the member is deactivated instead of deleted
    """
    __tablename__ = "team"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    clientId: str = Field(default="demo", index=True)
    username: str = Field(nullable=False, index=True)
    email: Optional[str] = None
    org: str = Field(default=DEFAULT_ORG)
    not_working: bool = Field(default=False)


class TeamInvite(SQLModel):
    """Schema for inviting a new team member. Validated by the team service."""
    username: Optional[str] = None
    email: Optional[str] = None
    org: Optional[str] = None
    clientId: Optional[str] = None


class DeactivateRequest(SQLModel):
    """Body of the not-working endpoint."""
    reassign_to: Optional[str] = None
    performedBy: Optional[str] = None
