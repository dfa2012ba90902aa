"""
Task Model Module

This module defines the Task model. Tasks (historically called "phases") are the
work items shown on the status board, grouped by workflow stage and partitioned
by client.
"""
from typing import Optional, List
from sqlmodel import SQLModel, Field
import uuid


class TaskBase(SQLModel):
    """
    Base Task model containing the editable fields.

    Field names use camelCase where the front-end already does, so documents
    round-trip without renaming.
    """
    # Workflow position - e.g. "Outstanding", "In Process", "Resolved"
    phase: Optional[str] = None
    stage: Optional[str] = None

    # Task content
    goal: Optional[str] = None
    need: Optional[str] = None
    comments: Optional[str] = None
    execute: Optional[str] = None  # Cadence: "One-Time", "Weekly", "Monthly"
    commentArea: Optional[str] = None

    # Display name of the team member; not a foreign key
    assigned_to: Optional[str] = None


class Task(TaskBase, table=True):
    """
    Task table model.
    """
    __tablename__ = "phases"

    # Primary key - opaque UUID string
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)

    # Tenant partition
    clientId: str = Field(default="demo", index=True)


class TaskCreate(TaskBase):
    """Schema for creating a task. clientId may also arrive in the query string."""
    clientId: Optional[str] = None


class TaskUpdate(TaskBase):
    """Schema for a partial task update."""
    pass


# Fields that bulk operations may set
UPDATABLE_FIELDS: List[str] = list(TaskBase.model_fields.keys())
