"""
Client Model Module

This module defines the Client model representing tenant organizations. The
3-character facCode is the tenant identifier used everywhere else as clientId.
"""
from typing import Optional
from sqlmodel import SQLModel, Field
import uuid

from datetime import datetime


class ClientBase(SQLModel):
    """Editable client details."""
    name: Optional[str] = None
    color: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    contactPerson: Optional[str] = None
    phoneNumber: Optional[str] = None


class Client(ClientBase, table=True):
    """
    Client model representing a tenant organization.

    Attributes:
        id: Unique identifier (UUID) automatically generated for each client
        facCode: Unique 3-character alphanumeric tenant code
        clientId: Legacy alias of the tenant code, kept for records created
            before the rename to facCode
        name: Display name of the client
        color: Badge color used by the dashboard
        city, state: Location
        contactPerson, phoneNumber: Primary contact
        createdAt: ISO timestamp of when the client record was created
    """
    __tablename__ = "clients"

    # Primary key - auto-generated UUID for global uniqueness
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)

    # Tenant code; legacy rows may only carry the clientId alias
    facCode: Optional[str] = Field(default=None, unique=True, index=True)
    clientId: Optional[str] = Field(default=None, index=True)

    color: Optional[str] = Field(default="#2563eb")

    # Audit timestamp - automatically set to current UTC time on creation
    createdAt: Optional[str] = Field(default_factory=lambda: datetime.utcnow().isoformat())


class ClientCreate(ClientBase):
    """Schema for creating a client. Older front-ends send the code as clientId."""
    name: str
    facCode: Optional[str] = None
    clientId: Optional[str] = None


class ClientUpdate(ClientBase):
    """Schema for updating a client. The tenant code itself is immutable."""
    pass
