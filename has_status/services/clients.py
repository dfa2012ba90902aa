"""
Client Registry

Clients are looked up by their facCode, falling back to the legacy clientId
alias carried by records created before the rename. Creating a client also
provisions its default team member.
"""
import logging
import re
from typing import Any, Callable, Dict, List, Optional

from sqlmodel import Session, select

from has_status.core.errors import BadRequestError, ConflictError, NotFoundError
from has_status.models.client import Client
from has_status.models.team import TeamMember, DEFAULT_ORG
from has_status.services import audit

logger = logging.getLogger(__name__)

FAC_CODE_PATTERN = re.compile(r"^[A-Za-z0-9]{3}$")

# Team member every new client starts with
DEFAULT_MEMBER_NAME = "PHGHAS"


def _by_fac_code(db: Session, code: str) -> Optional[Client]:
    return db.exec(select(Client).where(Client.facCode == code)).first()


def _by_legacy_alias(db: Session, code: str) -> Optional[Client]:
    return db.exec(select(Client).where(Client.clientId == code)).first()


# Lookup strategies, tried in order
RESOLVERS: List[Callable[[Session, str], Optional[Client]]] = [
    _by_fac_code,
    _by_legacy_alias,
]


def resolve_client(db: Session, code: str) -> Optional[Client]:
    """Return the first client matched by any resolver, or None."""
    for resolver in RESOLVERS:
        client = resolver(db, code)
        if client:
            return client
    return None


def _require(db: Session, code: str) -> Client:
    client = resolve_client(db, code)
    if not client:
        raise NotFoundError("Client not found")
    return client


def list_clients(db: Session) -> List[Client]:
    statement = select(Client).order_by(Client.createdAt.desc())
    return list(db.exec(statement).all())


def get_client(db: Session, code: str) -> Client:
    return _require(db, code)


def create_client(db: Session, data: Dict[str, Any]) -> Client:
    """
    Register a client and its default "PHGHAS" team member.

    The code may arrive as facCode or, from older front-ends, as clientId.
    Client and team member are written in two commits, so a failure in between
    leaves a client without its default member.

    Raises:
        BadRequestError: If the code is not 3 alphanumeric characters
        BadRequestError: If the name is missing
        ConflictError: If the code is already used as a facCode or legacy alias
    """
    data = dict(data)
    code = data.pop("facCode", None) or data.pop("clientId", None)
    data.pop("clientId", None)
    if not code or not FAC_CODE_PATTERN.match(code):
        raise BadRequestError("facCode must be 3 alphanumeric characters")
    if not data.get("name"):
        raise BadRequestError("name is required")

    if resolve_client(db, code):
        raise ConflictError("Client ID already exists")

    client = Client(**data, facCode=code, clientId=code)
    db.add(client)
    db.commit()
    db.refresh(client)

    member = TeamMember(clientId=code, username=DEFAULT_MEMBER_NAME, email="", org=DEFAULT_ORG)
    db.add(member)
    db.commit()

    logger.info("Created client %s (%s)", code, client.name)
    return client


def update_client(db: Session, code: str, changes: Dict[str, Any]) -> Client:
    client = _require(db, code)
    for key, value in changes.items():
        setattr(client, key, value)
    db.add(client)
    db.commit()
    db.refresh(client)
    return client


def delete_client(db: Session, code: str, performed_by: Optional[str] = None) -> None:
    client = _require(db, code)
    tenant = client.facCode or client.clientId
    client_pk = client.id
    name = client.name
    db.delete(client)
    db.commit()

    audit.record(
        db,
        client_id=tenant,
        action="delete_client",
        target_id=client_pk,
        target_name=name,
        details=f"Client {tenant} deleted",
        performed_by=performed_by,
    )
