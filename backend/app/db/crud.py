from datetime import datetime
from typing import Iterable, List, Optional
from sqlmodel import select
from .models import Task
from sqlmodel import Session
from ..schemas.tasks import TaskDraft, TaskUpdate

def create_task(session: Session, task: Task) -> Task:
    session.add(task)
    session.commit()
    session.refresh(task)
    return task

def create_tasks_from_drafts(session: Session, drafts: Iterable[TaskDraft]) -> List[Task]:
    tasks = [Task(**d.model_dump()) for d in drafts]
    session.add_all(tasks)
    session.commit()
    for t in tasks:
        session.refresh(t)
    return tasks

def get_task(session: Session, task_id: int) -> Optional[Task]:
    return session.get(Task, task_id)

def list_tasks(session: Session, limit: int = 100) -> List[Task]:
    stmt = select(Task).order_by(Task.created_at.desc(), Task.id.desc()).limit(limit)
    return session.exec(stmt).all()

def update_task(session: Session, task: Task, changes: TaskUpdate) -> Task:
    # null clears the due date; other null fields are ignored
    data = {k: v for k, v in changes.model_dump(exclude_unset=True).items()
            if v is not None or k == "due_date"}
    status = data.get("status")
    if status == "completed" and task.status != "completed":
        task.completed_at = datetime.utcnow()
    elif status == "pending":
        task.completed_at = None
    for key, value in data.items():
        setattr(task, key, value)
    task.updated_at = datetime.utcnow()
    return create_task(session, task)

def delete_task(session: Session, task: Task) -> None:
    session.delete(task)
    session.commit()
