"""
Client Endpoints Module

CRUD endpoints for the client registry. Clients are addressed by their tenant
code; records created before the facCode rename are still found through their
legacy clientId alias.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session

from has_status.db.session import get_db
from has_status.models.client import Client, ClientCreate, ClientUpdate
from has_status.services import clients as client_service

router = APIRouter()


@router.get("", response_model=List[Client])
def list_clients(db: Session = Depends(get_db)):
    """
    Retrieve all clients, newest first.
    """
    return client_service.list_clients(db)


@router.post("")
def create_client(client_in: ClientCreate, db: Session = Depends(get_db)):
    """
    Create a client and its default team member.

    Raises:
        ConflictError: If the code already exists
        BadRequestError: If the code is not 3 alphanumeric characters
    """
    client = client_service.create_client(db, client_in.model_dump(exclude_unset=True))
    return {"success": True, "client": client}


@router.get("/{code}", response_model=Client)
def read_client(code: str, db: Session = Depends(get_db)):
    """
    Get a client by facCode or legacy clientId.
    """
    return client_service.get_client(db, code)


@router.put("/{code}")
def update_client(code: str, client_update: ClientUpdate, db: Session = Depends(get_db)):
    """
    Update a client's details. The code itself cannot change.
    """
    client = client_service.update_client(db, code, client_update.model_dump(exclude_unset=True))
    return {"success": True, "client": client}


@router.delete("/{code}")
def delete_client(code: str, performedBy: Optional[str] = None, db: Session = Depends(get_db)):
    """
    Delete a client record. Its tasks and team are left in place.
    """
    client_service.delete_client(db, code, performed_by=performedBy)
    return {"success": True}
