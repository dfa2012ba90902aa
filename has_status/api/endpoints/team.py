"""
Team Endpoints Module

Listing, inviting, deactivating and removing team members. Removal and
deactivation delegate to the reassignment engine so that tasks never point at
a member who is gone.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session

from has_status.api.deps import get_client_id, resolve_client_id
from has_status.db.session import get_db
from has_status.models.team import TeamMember, TeamInvite, DeactivateRequest
from has_status.services import reassignment
from has_status.services import team as team_service

router = APIRouter()


@router.get("/team", response_model=List[TeamMember])
def list_team(
    client_id: str = Depends(get_client_id),
    db: Session = Depends(get_db),
):
    """
    Retrieve the team members of one client.
    """
    return team_service.list_team(db, client_id)


@router.post("/invite")
def invite_member(
    invite: TeamInvite,
    clientId: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    Add a team member.

    Raises:
        BadRequestError: If the username is missing or the email is malformed
    """
    client_id = resolve_client_id(clientId, invite.clientId)
    member = team_service.invite_member(db, client_id, invite.username, invite.email, invite.org)
    return {"message": "User added", "username": member.username}


@router.patch("/team/{member_id}/not-working")
def deactivate_member(
    member_id: str,
    request: Optional[DeactivateRequest] = None,
    db: Session = Depends(get_db),
):
    """
    Mark a member as not working and hand their tasks to reassign_to
    (or the "team" pool). Never blocks.
    """
    request = request or DeactivateRequest()
    return reassignment.deactivate_team_member(
        db,
        member_id,
        reassign_to=request.reassign_to,
        performed_by=request.performedBy,
    )


@router.delete("/team/{member_id}")
def remove_member(
    member_id: str,
    client_id: str = Depends(get_client_id),
    reassignTo: Optional[str] = None,
    performedBy: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    Delete a team member.

    When the member still owns tasks and no reassignTo is given, the response is
    a 400 carrying needsReassignment, the affected tasks and the member's name.

    Raises:
        NotFoundError: If the member doesn't exist for this client
        NeedsReassignmentError: If tasks need a new owner first
    """
    return reassignment.remove_team_member(
        db,
        client_id,
        member_id,
        reassign_to=reassignTo,
        performed_by=performedBy,
    )
