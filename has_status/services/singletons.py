import copy
from typing import Any, Optional

from sqlmodel import Session

from has_status.models.project import Project, WhiteboardState, SINGLETON_ID


def get_project_name(db: Session) -> str:
    project = db.get(Project, SINGLETON_ID)
    return project.name if project and project.name else ""


def set_project_name(db: Session, name: Optional[str]) -> None:
    # Upsert; concurrent writers overwrite each other
    project = db.get(Project, SINGLETON_ID) or Project(id=SINGLETON_ID)
    project.name = name
    db.add(project)
    db.commit()


def get_whiteboard(db: Session) -> Any:
    state = db.get(WhiteboardState, SINGLETON_ID)
    return state.state_json if state and state.state_json is not None else {}


def save_whiteboard(db: Session, state_json: Any) -> None:
    """Store any JSON document (object, array or scalar) as the whiteboard state."""
    state = db.get(WhiteboardState, SINGLETON_ID) or WhiteboardState(id=SINGLETON_ID)
    # Assign a new object so the JSON column is flagged dirty
    state.state_json = copy.deepcopy(state_json)
    db.add(state)
    db.commit()
