# tests/conftest.py - Shared test fixtures
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

os.environ["SEED_ON_STARTUP"] = "false"
os.environ["DATABASE_URL"] = "sqlite://"

from has_status.db.session import get_db, get_db_or_none, init_db
from has_status.main import app
from has_status.models import Task, TeamMember


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="db")
def db_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(engine):
    """HTTP test client with the DB dependency pointed at the test engine"""

    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_db_or_none] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def add_member(db: Session, username: str, client_id: str = "demo", **fields) -> TeamMember:
    member = TeamMember(clientId=client_id, username=username, email=f"{username.lower()}@demo.com", **fields)
    db.add(member)
    db.commit()
    db.refresh(member)
    return member


def add_tasks(db: Session, assigned_to: str, count: int, client_id: str = "demo", stage: str = "Outstanding"):
    tasks = [
        Task(clientId=client_id, goal=f"{assigned_to} task {i}", phase=stage, stage=stage, need="", assigned_to=assigned_to)
        for i in range(count)
    ]
    db.add_all(tasks)
    db.commit()
    for task in tasks:
        db.refresh(task)
    return tasks
