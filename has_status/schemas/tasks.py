from pydantic import BaseModel
from typing import Any, List, Optional


# Properties shared by bulk task operations
class BulkTaskBase(BaseModel):
    clientId: Optional[str] = None
    taskIds: Optional[List[str]] = None
    performedBy: Optional[str] = None


# Set one named field across the selected tasks
class MassUpdateRequest(BulkTaskBase):
    field: Optional[str] = None
    value: Any = None


# Set any of the three fixed fields in one pass
class UnifiedMassUpdateRequest(BulkTaskBase):
    stage: Optional[str] = None
    assigned_to: Optional[str] = None
    need: Optional[str] = None


class MassUpdateResult(BaseModel):
    success: bool
    modifiedCount: int
