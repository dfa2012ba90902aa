from fastapi import APIRouter
from has_status.api.endpoints import (
    phases, team, clients, singletons, audit_trail, seed
)

api_router = APIRouter()

api_router.include_router(phases.router, prefix="/phases", tags=["phases"])
api_router.include_router(team.router, tags=["team"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(singletons.router, tags=["project", "whiteboard"])
api_router.include_router(audit_trail.router, prefix="/audit-trail", tags=["audit"])
api_router.include_router(seed.router, prefix="/seed", tags=["seed"])
