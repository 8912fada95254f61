# File: taskboard/api/v1/routes_tasks.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskboard.api.deps import get_current_user, get_db
from taskboard.models.user import User
from taskboard.schemas.task import (
    MessageResponse,
    TaskCreate,
    TaskRead,
    TaskResponse,
    TaskUpdate,
)
from taskboard.services import task_service

# Every task route requires a bearer token.
router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=list[TaskRead], summary="List the caller's tasks")
def list_tasks(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return task_service.list_tasks(db, current_user.id)


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
)
def create_task(
    payload: TaskCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Create a task owned by the caller. Any owner supplied in the body is
    ignored.
    """
    task = task_service.create_task(db, current_user.id, payload)
    return TaskResponse(task=TaskRead.model_validate(task))


@router.get("/{task_id}", response_model=TaskResponse, summary="Get one task")
def read_task(
    task_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    task = task_service.get_owned_task(db, current_user.id, task_id)
    return TaskResponse(task=TaskRead.model_validate(task))


@router.put("/{task_id}", response_model=TaskResponse, summary="Update a task")
def update_task(
    task_id: str,
    payload: TaskUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    task = task_service.update_task(db, current_user.id, task_id, payload)
    return TaskResponse(task=TaskRead.model_validate(task))


@router.delete("/{task_id}", response_model=MessageResponse, summary="Delete a task")
def delete_task(
    task_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    task_service.delete_task(db, current_user.id, task_id)
    return MessageResponse(message="Task removed")
