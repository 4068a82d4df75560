from datetime import datetime
from typing import Any, Literal, Optional
from pydantic import BaseModel

Priority = Literal["low", "medium", "high"]
Status = Literal["pending", "completed"]

class TaskDraft(BaseModel):
    """A parsed task, not yet stored."""
    title: str
    description: str = ""
    priority: Priority = "medium"

class ParseRequest(BaseModel):
    # left untyped: non-string text yields no drafts instead of a 422
    text: Any = None
    use_ai: bool = True

class TaskIn(BaseModel):
    title: str
    description: str = ""
    priority: Priority = "medium"
    due_date: Optional[datetime] = None

class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[Priority] = None
    status: Optional[Status] = None
    due_date: Optional[datetime] = None

class TaskOut(TaskIn):
    id: int
    status: Status
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
