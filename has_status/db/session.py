import logging
from typing import Optional

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine, make_url
from sqlmodel import SQLModel, create_engine, Session

from has_status.core.config import settings

logger = logging.getLogger(__name__)

# Built lazily by get_engine()
_tunnel = None
_engine = None

DEFAULT_SQLITE_URL = "sqlite:///./has_status.db"
MYSQL_PORT = 3306


def _open_tunnel():
    """Forward a local port to the MySQL host through the SSH bastion."""
    from sshtunnel import SSHTunnelForwarder

    tunnel = SSHTunnelForwarder(
        (settings.SSH_HOST, 22),
        ssh_username=settings.SSH_USER,
        ssh_password=settings.SSH_PASSWORD,
        remote_bind_address=(settings.DB_HOST, MYSQL_PORT),
        set_keepalive=60,
    )
    tunnel.start()
    logger.info("SSH tunnel to %s open on local port %s", settings.DB_HOST, tunnel.local_bind_port)
    return tunnel


def _database_url() -> str:
    global _tunnel

    if settings.USE_SSH:
        if _tunnel is None:
            _tunnel = _open_tunnel()
        return (
            f"mysql+pymysql://{settings.DB_USER}:{settings.DB_PASSWORD}"
            f"@127.0.0.1:{_tunnel.local_bind_port}/{settings.DB_NAME}"
        )
    return settings.DATABASE_URL or DEFAULT_SQLITE_URL


def get_engine() -> Engine:
    """Build the engine on first use; nothing connects at import time."""
    global _engine

    if _engine is None:
        url = _database_url()
        if url.startswith("sqlite"):
            # Request handlers run on a thread pool
            _engine = create_engine(url, connect_args={"check_same_thread": False})
        else:
            _engine = create_engine(url, pool_pre_ping=True)
        logger.info("Database engine ready (%s)", make_url(url).get_backend_name())
    return _engine


def drop_legacy_indexes(engine: Engine) -> None:
    """
    Best-effort removal of the unique index on the legacy clients.clientId alias.

    Older deployments enforced uniqueness on clientId before facCode took over as
    the tenant code. Failures are logged and ignored.
    """
    inspector = inspect(engine)
    if "clients" not in inspector.get_table_names():
        return

    for index in inspector.get_indexes("clients"):
        if index.get("unique") and index.get("column_names") == ["clientId"]:
            if engine.dialect.name == "mysql":
                statement = f"DROP INDEX `{index['name']}` ON `clients`"
            else:
                statement = f'DROP INDEX "{index["name"]}"'
            try:
                with engine.connect() as connection:
                    connection.execute(text(statement))
                    connection.commit()
                logger.info("Dropped legacy index %s", index["name"])
            except Exception as e:
                logger.warning("Could not drop legacy index %s: %s", index["name"], e)


def init_db(engine: Engine) -> None:
    """Create tables and apply best-effort index cleanup. Called once at startup."""
    # Register table models on the metadata
    import has_status.models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    drop_legacy_indexes(engine)


def check_connection(db: Optional[Session]) -> bool:
    if db is None:
        return False
    try:
        db.connection().execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning("Database connectivity check failed: %s", e)
        return False


def get_db():
    with Session(get_engine()) as session:
        yield session


def get_db_or_none():
    """Like get_db, but yields None when the engine (or its SSH tunnel) cannot be built."""
    try:
        engine = get_engine()
    except Exception as e:
        logger.warning("Database engine unavailable: %s", e)
        yield None
        return
    with Session(engine) as session:
        yield session
