from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from ...core.config import settings
from ...db.session import get_session
from ...db.models import Task
from ...db.crud import create_task, create_tasks_from_drafts, delete_task, get_task, list_tasks, update_task
from ...schemas.tasks import ParseRequest, TaskDraft, TaskIn, TaskOut, TaskUpdate
from ...services.nlp_parse import parse_tasks_with_model
from ...services.provider import CompletionProvider, get_provider
from ...services.task_parser import parse_tasks
from typing import List, Optional

router = APIRouter()

def provider_dependency() -> Optional[CompletionProvider]:
    return get_provider(settings)

def _drafts(body: ParseRequest, provider: Optional[CompletionProvider]) -> List[TaskDraft]:
    if body.use_ai:
        return parse_tasks_with_model(body.text, provider)
    return parse_tasks(body.text)

@router.post("/tasks/parse", response_model=List[TaskOut])
def parse_and_save(body: ParseRequest, session: Session = Depends(get_session),
                   provider: Optional[CompletionProvider] = Depends(provider_dependency)):
    return create_tasks_from_drafts(session, _drafts(body, provider))

@router.post("/tasks/parse/preview", response_model=List[TaskDraft])
def parse_preview(body: ParseRequest,
                  provider: Optional[CompletionProvider] = Depends(provider_dependency)):
    return _drafts(body, provider)

@router.post("/tasks", response_model=TaskOut)
def create(body: TaskIn, session: Session = Depends(get_session)):
    t = Task(**body.model_dump())
    return create_task(session, t)

@router.get("/tasks", response_model=List[TaskOut])
def list_all(session: Session = Depends(get_session)):
    return list_tasks(session)

def _get_or_404(session: Session, task_id: int) -> Task:
    task = get_task(session, task_id)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return task

@router.patch("/tasks/{task_id}", response_model=TaskOut)
def update(task_id: int, body: TaskUpdate, session: Session = Depends(get_session)):
    return update_task(session, _get_or_404(session, task_id), body)

@router.delete("/tasks/{task_id}", status_code=204)
def delete(task_id: int, session: Session = Depends(get_session)):
    delete_task(session, _get_or_404(session, task_id))
