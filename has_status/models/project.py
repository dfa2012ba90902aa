"""
Singleton Models Module

Project and WhiteboardState each hold exactly one row (id = 1) per deployment.
Writes are upserts, so the last writer wins.
"""
from typing import Any, Optional
from sqlmodel import SQLModel, Field, JSON, Column

# Primary key of the single row in each singleton table
SINGLETON_ID = 1


class Project(SQLModel, table=True):
    """Display name of the project shown in the dashboard header."""
    __tablename__ = "project"

    id: int = Field(default=SINGLETON_ID, primary_key=True)
    name: Optional[str] = ""


class WhiteboardState(SQLModel, table=True):
    """Freeform canvas state, stored as an opaque JSON document."""
    __tablename__ = "whiteboard_state"

    id: int = Field(default=SINGLETON_ID, primary_key=True)
    state_json: Any = Field(default_factory=dict, sa_column=Column(JSON))


class ProjectUpdate(SQLModel):
    name: Optional[str] = None
