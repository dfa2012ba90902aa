"""
Task Service

CRUD and bulk update operations on tasks. Bulk and destructive operations
leave an entry in the audit trail.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlmodel import Session, select

from has_status.core.errors import BadRequestError, NotFoundError
from has_status.models.task import Task, UPDATABLE_FIELDS
from has_status.services import audit

logger = logging.getLogger(__name__)

# Fields the unified mass update may set in one pass
UNIFIED_FIELDS = ("stage", "assigned_to", "need")


def _check_fields(fields: Iterable[str]) -> None:
    unknown = [name for name in fields if name not in UPDATABLE_FIELDS]
    if unknown:
        raise BadRequestError(f"Unknown task field(s): {', '.join(unknown)}")


def _client_tasks(db: Session, client_id: str, task_ids: Optional[List[str]] = None) -> List[Task]:
    statement = select(Task).where(Task.clientId == client_id)
    if task_ids is not None:
        statement = statement.where(Task.id.in_(task_ids))
    return list(db.exec(statement).all())


def list_tasks(db: Session, client_id: str) -> List[Task]:
    return _client_tasks(db, client_id)


def create_task(db: Session, client_id: str, data: Dict[str, Any]) -> Task:
    data = {key: value for key, value in data.items() if key not in ("id", "clientId")}
    _check_fields(data.keys())
    task = Task(**data, clientId=client_id)
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def update_task(db: Session, task_id: str, changes: Dict[str, Any]) -> bool:
    """
    Apply a partial update to one task.

    Returns:
        bool: False when the task does not exist
    """
    _check_fields(changes.keys())
    task = db.get(Task, task_id)
    if not task:
        return False

    for key, value in changes.items():
        setattr(task, key, value)

    db.add(task)
    db.commit()
    return True


def delete_task(
    db: Session,
    task_id: str,
    client_id: Optional[str] = None,
    performed_by: Optional[str] = None,
) -> None:
    task = db.get(Task, task_id)
    if not task:
        raise NotFoundError("Task not found")

    tenant = client_id or task.clientId
    phase = task.phase or "Unknown"
    name = task.goal or "Unknown Task"
    db.delete(task)
    db.commit()

    audit.record(
        db,
        client_id=tenant,
        action="delete_task",
        target_id=task_id,
        target_name=name,
        details=f"Task deleted from phase: {phase}",
        performed_by=performed_by,
    )


def clear_tasks(db: Session, client_id: str, performed_by: Optional[str] = None) -> int:
    """Delete every task of one client. Returns the number removed."""
    tasks = _client_tasks(db, client_id)
    for task in tasks:
        db.delete(task)
    db.commit()

    audit.record(
        db,
        client_id=client_id,
        action="clear_tasks",
        target_id=client_id,
        target_name=client_id,
        details=f"Deleted {len(tasks)} task(s)",
        performed_by=performed_by,
    )
    logger.info("Cleared %d task(s) for client %s", len(tasks), client_id)
    return len(tasks)


def _apply(db: Session, tasks: List[Task], updates: Dict[str, Any]) -> int:
    for task in tasks:
        for key, value in updates.items():
            setattr(task, key, value)
        db.add(task)
    db.commit()
    return len(tasks)


def mass_update(
    db: Session,
    client_id: str,
    field: str,
    value: Any,
    task_ids: Optional[List[str]] = None,
    performed_by: Optional[str] = None,
) -> int:
    """
    Set one field to one value across a client's tasks.

    Args:
        db: Database session
        client_id: Tenant whose tasks are updated
        field: Name of the task field to set
        value: New value
        task_ids: Restrict the update to these ids (all tasks when None, none when empty)
        performed_by: Actor recorded in the audit trail

    Returns:
        int: Number of modified tasks

    Raises:
        BadRequestError: If the field is missing or not a task field
    """
    if not field:
        raise BadRequestError("field is required")
    _check_fields([field])

    modified = _apply(db, _client_tasks(db, client_id, task_ids), {field: value})

    audit.record(
        db,
        client_id=client_id,
        action="mass_update",
        target_id=",".join(task_ids) if task_ids is not None else "all",
        target_name=field,
        details=f"Set {field} to '{value}' on {modified} task(s)",
        performed_by=performed_by,
    )
    return modified


def unified_mass_update(
    db: Session,
    client_id: str,
    updates: Dict[str, Any],
    task_ids: Optional[List[str]] = None,
    performed_by: Optional[str] = None,
) -> int:
    """
    Set any of stage, assigned_to and need in one pass.

    Empty values count as not supplied.

    Raises:
        BadRequestError: If none of the three fields is supplied
    """
    supplied = {key: updates[key] for key in UNIFIED_FIELDS if updates.get(key)}
    if not supplied:
        raise BadRequestError("At least one of stage, assigned_to or need is required")

    modified = _apply(db, _client_tasks(db, client_id, task_ids), supplied)

    summary = ", ".join(f"{key}='{value}'" for key, value in supplied.items())
    audit.record(
        db,
        client_id=client_id,
        action="unified_mass_update",
        target_id=",".join(task_ids) if task_ids is not None else "all",
        target_name=", ".join(supplied.keys()),
        details=f"Set {summary} on {modified} task(s)",
        performed_by=performed_by,
    )
    return modified
