"""
Task (Phase) Endpoints Module

CRUD and bulk update endpoints for tasks. Tasks are partitioned by clientId,
which is read from the query string or, on create and bulk updates, the body.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session

from has_status.api.deps import get_client_id, resolve_client_id
from has_status.db.session import get_db
from has_status.models.task import Task, TaskCreate, TaskUpdate
from has_status.schemas.tasks import MassUpdateRequest, MassUpdateResult, UnifiedMassUpdateRequest
from has_status.services import tasks as task_service

router = APIRouter()


@router.get("", response_model=List[Task])
def list_tasks(
    client_id: str = Depends(get_client_id),
    db: Session = Depends(get_db),
):
    """
    Retrieve all tasks of one client.
    """
    return task_service.list_tasks(db, client_id)


@router.post("")
def create_task(
    task_in: TaskCreate,
    clientId: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    Create a new task.

    The tenant comes from the clientId query parameter, then the body, then the
    default tenant.

    Returns:
        dict: The id of the new task
    """
    client_id = resolve_client_id(clientId, task_in.clientId)
    task = task_service.create_task(db, client_id, task_in.model_dump(exclude_unset=True))
    return {"id": task.id}


@router.put("/mass-update", response_model=MassUpdateResult)
def mass_update(
    request: MassUpdateRequest,
    clientId: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    Set one field to one value on all of a client's tasks, or on the given ids.
    """
    client_id = resolve_client_id(clientId, request.clientId)
    modified = task_service.mass_update(
        db,
        client_id,
        request.field,
        request.value,
        task_ids=request.taskIds,
        performed_by=request.performedBy,
    )
    return {"success": True, "modifiedCount": modified}


@router.put("/unified-mass-update", response_model=MassUpdateResult)
def unified_mass_update(
    request: UnifiedMassUpdateRequest,
    clientId: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    Set any of stage, assigned_to and need on a client's tasks in one pass.
    """
    client_id = resolve_client_id(clientId, request.clientId)
    modified = task_service.unified_mass_update(
        db,
        client_id,
        request.model_dump(include={"stage", "assigned_to", "need"}),
        task_ids=request.taskIds,
        performed_by=request.performedBy,
    )
    return {"success": True, "modifiedCount": modified}


@router.put("/{task_id}")
def update_task(
    task_id: str,
    task_update: TaskUpdate,
    db: Session = Depends(get_db),
):
    """
    Update the supplied fields of a task.

    Returns:
        dict: updated is False when the task does not exist
    """
    updated = task_service.update_task(db, task_id, task_update.model_dump(exclude_unset=True))
    return {"updated": updated}


@router.delete("/{task_id}")
def delete_task(
    task_id: str,
    clientId: Optional[str] = None,
    performedBy: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    Delete a task and record it in the audit trail.

    Raises:
        NotFoundError: If the task doesn't exist
    """
    task_service.delete_task(db, task_id, client_id=clientId, performed_by=performedBy)
    return {"deleted": True}


@router.delete("")
def clear_tasks(
    client_id: str = Depends(get_client_id),
    performedBy: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    Delete every task of one client.
    """
    deleted = task_service.clear_tasks(db, client_id, performed_by=performedBy)
    return {"success": True, "deletedCount": deleted}
