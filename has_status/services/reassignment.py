"""
Reassignment Engine

Keeps Task.assigned_to consistent with the team roster when a member is
removed or deactivated.

Deletion is irreversible, so it refuses to proceed while the member still owns
tasks unless the caller names a reassignment target. Deactivation keeps the
member record, so it always reassigns and proceeds.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlmodel import Session, select

from has_status.core.errors import NeedsReassignmentError, NotFoundError
from has_status.models.task import Task
from has_status.models.team import TeamMember
from has_status.services import audit

logger = logging.getLogger(__name__)

# Assignee used when a deactivated member's work has no explicit new owner
UNASSIGNED_SENTINEL = "team"


class TaskAssignments:
    """
    The join between tasks and team members.

    Tasks reference their assignee by display name. All lookups and rewrites of
    that reference go through this class so the join strategy can change in one
    place.
    """

    def __init__(self, db: Session):
        self.db = db

    def tasks_for(self, member: TeamMember) -> List[Task]:
        statement = select(Task).where(
            Task.clientId == member.clientId,
            Task.assigned_to == member.username,
        )
        return list(self.db.exec(statement).all())

    def repoint(self, tasks: List[Task], assignee: str) -> int:
        """Stage the new assignee on each task. The caller commits."""
        for task in tasks:
            task.assigned_to = assignee
            self.db.add(task)
        return len(tasks)


def describe_tasks(tasks: List[Task]) -> List[Dict[str, Optional[str]]]:
    """Summaries handed back to the caller when deletion is blocked."""
    return [
        {
            "taskId": task.id,
            "taskName": task.goal,
            "phaseName": task.phase or task.stage,
        }
        for task in tasks
    ]


def remove_team_member(
    db: Session,
    client_id: str,
    member_id: str,
    reassign_to: Optional[str] = None,
    performed_by: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Delete a team member, reassigning their tasks when a target is given.

    The reassignment, the deletion and the audit entry are committed together.

    Args:
        db: Database session
        client_id: Tenant the member belongs to
        member_id: Id of the member to delete
        reassign_to: Display name that inherits the member's tasks
        performed_by: Actor recorded in the audit trail

    Returns:
        dict: success flag, number of reassigned tasks and the target

    Raises:
        NotFoundError: If no member with this id exists for the client
        NeedsReassignmentError: If the member owns tasks and no target is given
    """
    member = db.exec(
        select(TeamMember).where(TeamMember.id == member_id, TeamMember.clientId == client_id)
    ).first()
    if not member:
        raise NotFoundError("Team member not found")

    assignments = TaskAssignments(db)
    tasks = assignments.tasks_for(member)

    if tasks and not reassign_to:
        raise NeedsReassignmentError(member.username, describe_tasks(tasks))

    username = member.username
    try:
        reassigned = assignments.repoint(tasks, reassign_to) if tasks else 0
        db.delete(member)
        if reassigned:
            details = f"Reassigned {reassigned} task(s) to: {reassign_to}"
        else:
            details = "No tasks to reassign"
        audit.record(
            db,
            client_id=client_id,
            action="delete_team_member",
            target_id=member_id,
            target_name=username,
            details=details,
            performed_by=performed_by,
            commit=False,
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Removed team member %s (%s), reassigned %d task(s)", username, client_id, reassigned)
    return {
        "success": True,
        "reassignedTasks": reassigned,
        "reassignedTo": reassign_to,
    }


def deactivate_team_member(
    db: Session,
    member_id: str,
    reassign_to: Optional[str] = None,
    performed_by: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Mark a member as not working and hand all of their tasks to someone else.

    Never blocks: tasks go to reassign_to, or to the "team" pool when it is unset.
    The target is not checked against the roster, and an already inactive member
    is processed again.

    Raises:
        NotFoundError: If the member does not exist
    """
    member = db.get(TeamMember, member_id)
    if not member:
        raise NotFoundError("Team member not found")

    target = reassign_to or UNASSIGNED_SENTINEL
    assignments = TaskAssignments(db)
    try:
        reassigned = assignments.repoint(assignments.tasks_for(member), target)
        member.not_working = True
        db.add(member)
        audit.record(
            db,
            client_id=member.clientId,
            action="deactivate_team_member",
            target_id=member.id,
            target_name=member.username,
            details=f"Reassigned {reassigned} task(s) to: {target}",
            performed_by=performed_by,
            commit=False,
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Deactivated team member %s, reassigned %d task(s) to %s", member.username, reassigned, target)
    return {"updated": True, "reassignedTasks": reassigned, "reassignedTo": target}
