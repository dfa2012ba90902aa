import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session

from has_status.core.config import settings
from has_status.core.errors import register_exception_handlers
from has_status.core.logging_config import configure_logging
from has_status.db.session import get_engine, init_db
from has_status.services.seed import seed_if_empty
from has_status.api.api import api_router
from has_status.api.endpoints import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    engine = get_engine()
    init_db(engine)
    logger.info("Database initialized")
    if settings.SEED_ON_STARTUP:
        with Session(engine) as session:
            seed_if_empty(session)
    logger.info("%s running", settings.PROJECT_NAME)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        openapi_url=f"{settings.API_STR}/openapi.json",
        lifespan=lifespan,
    )

    # Set up CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Health checks live outside the API prefix
    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix=settings.API_STR)
    return app


app = create_app()
