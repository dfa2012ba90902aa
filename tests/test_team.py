# tests/test_team.py - Team listing and invites
from fastapi.testclient import TestClient

from tests.conftest import add_member


def test_invite_member(client: TestClient):
    resp = client.post(
        "/api/invite",
        params={"clientId": "ABC"},
        json={"username": "Dana Cruz", "email": "dana@phg.com"},
    )

    assert resp.status_code == 200
    assert resp.json() == {"message": "User added", "username": "Dana Cruz"}
    team = client.get("/api/team", params={"clientId": "ABC"}).json()
    assert team[0]["org"] == "PHG"
    assert team[0]["not_working"] is False


def test_invite_rejects_bad_email(client: TestClient):
    resp = client.post("/api/invite", json={"username": "Dana", "email": "dana.phg.com"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid username or email"}


def test_invite_requires_username(client: TestClient):
    resp = client.post("/api/invite", json={"email": "dana@phg.com"})
    assert resp.status_code == 400


def test_team_is_partitioned(client: TestClient, db):
    add_member(db, "Alice")
    add_member(db, "Zed", client_id="ABC")

    names = [m["username"] for m in client.get("/api/team").json()]
    assert names == ["Alice"]
