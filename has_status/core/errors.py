"""
Error Taxonomy Module

Domain exceptions raised by the service layer and the FastAPI handlers that turn
them into the `{"error": <message>}` envelope the front-end expects.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for expected, client-facing failures."""
    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class NotFoundError(ServiceError):
    """The requested id does not resolve to a record."""
    status_code = 404


class ConflictError(ServiceError):
    """A unique key (e.g. facCode) is already taken."""
    status_code = 400


class BadRequestError(ServiceError):
    """Missing or invalid request fields."""
    status_code = 400


class NeedsReassignmentError(ServiceError):
    """
    Blocking precondition raised when a team member still owns tasks.

    This is an expected control path: the payload lists the affected tasks so the
    caller can pick a reassignment target and retry.
    """
    status_code = 400

    def __init__(self, team_member_name: str, assigned_tasks: List[Dict[str, Optional[str]]]):
        super().__init__("Team member has assigned tasks")
        self.team_member_name = team_member_name
        self.assigned_tasks = assigned_tasks

    def payload(self) -> Dict[str, Any]:
        return {
            "error": self.message,
            "needsReassignment": True,
            "assignedTasks": self.assigned_tasks,
            "teamMemberName": self.team_member_name,
        }


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on the application."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return JSONResponse(status_code=exc.status_code, content=exc.payload())

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = str(errors[0].get("msg", "Invalid request")) if errors else "Invalid request"
        # pydantic prefixes messages raised from validators
        message = message.removeprefix("Value error, ")
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def store_failure_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc)})
