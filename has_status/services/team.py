import logging
from typing import List, Optional

from sqlmodel import Session, select

from has_status.core.errors import BadRequestError
from has_status.models.team import TeamMember, EMAIL_PATTERN, DEFAULT_ORG

logger = logging.getLogger(__name__)


def list_team(db: Session, client_id: str) -> List[TeamMember]:
    statement = select(TeamMember).where(TeamMember.clientId == client_id)
    return list(db.exec(statement).all())


def invite_member(
    db: Session,
    client_id: str,
    username: Optional[str],
    email: Optional[str],
    org: Optional[str] = None,
) -> TeamMember:
    """
    Add a member to a client's team.

    Raises:
        BadRequestError: If the username is empty or the email is malformed
    """
    if not username or not email or not EMAIL_PATTERN.match(email):
        raise BadRequestError("Invalid username or email")

    member = TeamMember(clientId=client_id, username=username, email=email, org=org or DEFAULT_ORG)
    db.add(member)
    db.commit()
    db.refresh(member)
    logger.info("Added team member %s to client %s", username, client_id)
    return member
