from .task import Task, TaskCreate, TaskUpdate
from .team import TeamMember, TeamInvite, DeactivateRequest
from .client import Client, ClientCreate, ClientUpdate
from .audit import AuditEntry
from .project import Project, ProjectUpdate, WhiteboardState

__all__ = [
    "Task", "TaskCreate", "TaskUpdate",
    "TeamMember", "TeamInvite", "DeactivateRequest",
    "Client", "ClientCreate", "ClientUpdate",
    "AuditEntry",
    "Project", "ProjectUpdate", "WhiteboardState",
]
