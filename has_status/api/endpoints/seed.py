from fastapi import APIRouter, Depends
from sqlmodel import Session

from has_status.db.session import get_db
from has_status.services.seed import reset_demo_data

router = APIRouter()


@router.post("")
def reseed(db: Session = Depends(get_db)):
    """
    Wipe tasks, team, project and whiteboard, then load the demo fixtures.
    """
    reset_demo_data(db)
    return {"seeded": True}
