# tests/test_misc.py - Singletons, audit listing, seeding and health
from fastapi.testclient import TestClient
from sqlmodel import Session, select

from has_status.db import session as db_session
from has_status.db.session import get_db_or_none
from has_status.models import Task, TeamMember
from has_status.services import audit
from has_status.services.seed import seed_if_empty


def test_project_name_upsert(client: TestClient):
    assert client.get("/api/project").json() == {"name": ""}

    assert client.post("/api/project", json={"name": "FY25 Close"}).json() == {"success": True}
    client.post("/api/project", json={"name": "FY26 Close"})

    assert client.get("/api/project").json() == {"name": "FY26 Close"}


def test_whiteboard_upsert(client: TestClient):
    assert client.get("/api/whiteboard").json() == {}

    board = {"shapes": [{"type": "rect", "x": 1}], "zoom": 2}
    assert client.post("/api/whiteboard", json=board).json() == {"success": True}
    assert client.get("/api/whiteboard").json() == board

    client.post("/api/whiteboard", json={"zoom": 1})
    assert client.get("/api/whiteboard").json() == {"zoom": 1}


def test_audit_entries_newest_first(db: Session):
    first = audit.record(db, "demo", "delete_task", "1", "First")
    second = audit.record(db, "demo", "delete_task", "2", "Second")
    audit.record(db, "ABC", "delete_task", "3", "Other")
    # Same-microsecond inserts would tie
    first.timestamp = "2020-01-01T00:00:00"
    db.add(first)
    db.commit()

    entries = audit.list_entries(db, "demo")
    assert [e.targetName for e in entries] == ["Second", "First"]
    assert second.performedBy == "admin"
    assert len(audit.list_entries(db)) == 3


def test_audit_trail_endpoints(client: TestClient, db: Session):
    audit.record(db, "demo", "clear_tasks", "demo", "demo", performed_by="lee")
    audit.record(db, "ABC", "clear_tasks", "ABC", "ABC")

    assert len(client.get("/api/audit-trail").json()) == 2
    data = client.get("/api/audit-trail", params={"clientId": "demo"}).json()
    assert [e["performedBy"] for e in data] == ["lee"]
    assert len(client.get("/api/audit-trail/ABC").json()) == 1


def test_seed_endpoint(client: TestClient, db: Session):
    client.post("/api/phases", json={"goal": "stale"})
    audit.record(db, "demo", "clear_tasks", "demo", "demo")

    assert client.post("/api/seed").json() == {"seeded": True}

    team = client.get("/api/team").json()
    tasks = client.get("/api/phases").json()
    assert len(team) == 4
    assert len(tasks) == 16
    names = {m["username"] for m in team}
    assert {t["assigned_to"] for t in tasks} == names
    assert all(t["stage"] == t["phase"] for t in tasks)
    # Audit trail survives a reseed
    assert len(client.get("/api/audit-trail").json()) == 1


def test_seed_if_empty_only_once(db: Session):
    assert seed_if_empty(db) is True
    assert seed_if_empty(db) is False
    assert len(db.exec(select(TeamMember)).all()) == 4
    assert len(db.exec(select(Task)).all()) == 16


def test_health(client: TestClient):
    assert client.get("/health").json() == {"dbState": 1}
    assert client.get("/healthz").json() == {"status": "ok"}


def test_whiteboard_accepts_any_json_document(client: TestClient):
    shapes = [{"type": "rect"}, {"type": "line", "points": [0, 1]}]

    assert client.post("/api/whiteboard", json=shapes).json() == {"success": True}
    assert client.get("/api/whiteboard").json() == shapes


def test_health_without_engine(client: TestClient, monkeypatch):
    """An engine that cannot be built reports dbState 0 instead of failing"""

    def broken_engine():
        raise RuntimeError("tunnel refused")

    client.app.dependency_overrides.pop(get_db_or_none)
    monkeypatch.setattr(db_session, "get_engine", broken_engine)

    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"dbState": 0}


def test_engine_built_lazily_from_database_url(monkeypatch):
    monkeypatch.setattr(db_session, "_engine", None)

    engine = db_session.get_engine()

    assert engine.dialect.name == "sqlite"
    assert db_session.get_engine() is engine
