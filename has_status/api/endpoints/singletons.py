from typing import Any
from fastapi import APIRouter, Body, Depends
from sqlmodel import Session

from has_status.db.session import get_db
from has_status.models.project import ProjectUpdate
from has_status.services import singletons

router = APIRouter()


@router.get("/project")
def read_project(db: Session = Depends(get_db)):
    return {"name": singletons.get_project_name(db)}


@router.post("/project")
def save_project(project: ProjectUpdate, db: Session = Depends(get_db)):
    """
    Set the project name. Last writer wins.
    """
    singletons.set_project_name(db, project.name)
    return {"success": True}


@router.get("/whiteboard")
def read_whiteboard(db: Session = Depends(get_db)):
    return singletons.get_whiteboard(db)


@router.post("/whiteboard")
def save_whiteboard(state: Any = Body(...), db: Session = Depends(get_db)):
    """
    Replace the whiteboard document with the request body.
    """
    singletons.save_whiteboard(db, state)
    return {"success": True}
