# tests/test_clients.py - Client registry
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, select

from has_status.core.errors import BadRequestError, ConflictError
from has_status.models import Client, TeamMember
from has_status.services import clients as client_service

CLIENT = {
    "facCode": "ABC",
    "name": "Acme Hospital",
    "city": "Dallas",
    "state": "TX",
    "contactPerson": "Jo Park",
    "phoneNumber": "555-0100",
}


def test_create_client_provisions_default_member(db: Session):
    client = client_service.create_client(db, CLIENT)

    assert client.facCode == "ABC"
    assert client.color == "#2563eb"
    members = db.exec(select(TeamMember).where(TeamMember.clientId == "ABC")).all()
    assert [m.username for m in members] == ["PHGHAS"]


def test_duplicate_fac_code_conflicts(db: Session):
    client_service.create_client(db, CLIENT)

    with pytest.raises(ConflictError):
        client_service.create_client(db, {**CLIENT, "name": "Other"})

    assert len(db.exec(select(Client)).all()) == 1
    assert len(db.exec(select(TeamMember)).all()) == 1


def test_legacy_alias_conflicts(db: Session):
    """A record created before the rename only carries clientId"""
    db.add(Client(clientId="OLD", name="Legacy"))
    db.commit()

    with pytest.raises(ConflictError):
        client_service.create_client(db, {**CLIENT, "facCode": "OLD"})
    assert db.exec(select(TeamMember)).all() == []


def test_fac_code_shape(db: Session):
    with pytest.raises(BadRequestError):
        client_service.create_client(db, {**CLIENT, "facCode": "ABCD"})
    with pytest.raises(BadRequestError):
        client_service.create_client(db, {**CLIENT, "facCode": "A-C"})


def test_code_accepted_as_client_id(db: Session):
    data = {k: v for k, v in CLIENT.items() if k != "facCode"}
    client = client_service.create_client(db, {**data, "clientId": "XYZ"})
    assert client.facCode == "XYZ"


def test_resolve_prefers_fac_code_then_alias(db: Session):
    legacy = Client(clientId="OLD", name="Legacy")
    current = Client(facCode="NEW", clientId="NEW", name="Current")
    db.add_all([legacy, current])
    db.commit()

    assert client_service.resolve_client(db, "NEW").name == "Current"
    assert client_service.resolve_client(db, "OLD").name == "Legacy"
    assert client_service.resolve_client(db, "NOP") is None


def test_client_endpoints(client: TestClient):
    resp = client.post("/api/clients", json=CLIENT)
    assert resp.status_code == 200
    assert resp.json()["success"] is True

    resp = client.post("/api/clients", json=CLIENT)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Client ID already exists"}

    assert client.get("/api/clients/ABC").json()["name"] == "Acme Hospital"

    resp = client.put("/api/clients/ABC", json={"city": "Austin"})
    assert resp.json()["client"]["city"] == "Austin"
    assert resp.json()["client"]["name"] == "Acme Hospital"

    team = client.get("/api/team", params={"clientId": "ABC"}).json()
    assert [m["username"] for m in team] == ["PHGHAS"]

    assert client.delete("/api/clients/ABC").json() == {"success": True}
    assert client.get("/api/clients/ABC").status_code == 404
    assert client.get("/api/audit-trail/ABC").json()[0]["action"] == "delete_client"


def test_legacy_client_lookup_endpoint(client: TestClient, db: Session):
    db.add(Client(clientId="OLD", name="Legacy"))
    db.commit()

    resp = client.get("/api/clients/OLD")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Legacy"


def test_list_clients(client: TestClient):
    client.post("/api/clients", json=CLIENT)
    client.post("/api/clients", json={**CLIENT, "facCode": "DEF", "name": "Second"})

    names = [c["name"] for c in client.get("/api/clients").json()]
    assert names == ["Second", "Acme Hospital"]


def test_missing_client(client: TestClient):
    resp = client.put("/api/clients/NOP", json={"city": "Austin"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Client not found"}


def test_client_name_required(client: TestClient, db: Session):
    data = {k: v for k, v in CLIENT.items() if k != "name"}

    resp = client.post("/api/clients", json=data)
    assert resp.status_code == 400
    assert "error" in resp.json()

    with pytest.raises(BadRequestError):
        client_service.create_client(db, {**data, "name": ""})
    assert db.exec(select(Client)).all() == []
