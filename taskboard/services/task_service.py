# File: taskboard/services/task_service.py

"""
Task lifecycle and ownership rules.

Status is a plain label: any of todo / in-progress / completed may follow
any other, including re-opening a completed task.
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from taskboard.core.errors import ForbiddenError, NotFoundError, ValidationError
from taskboard.models.task import Task, TaskPriority, TaskStatus
from taskboard.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)

_TEXT_FIELDS = ("title", "description")
_NON_NULLABLE = _TEXT_FIELDS + ("status", "priority")


def can_modify(task: Task, caller_id: str) -> bool:
    """Only the owner may read, change or delete a task."""
    return task.owner_id == caller_id


def list_tasks(db: Session, owner_id: str) -> list[Task]:
    stmt = select(Task).where(Task.owner_id == owner_id).order_by(Task.created_at)
    return list(db.scalars(stmt))


def get_owned_task(db: Session, caller_id: str, task_id: str) -> Task:
    """
    Load a task the caller owns.

    Raises NotFoundError when the id is unknown and ForbiddenError when it
    belongs to someone else.
    """
    task = db.get(Task, task_id)
    if task is None:
        raise NotFoundError("Task not found")
    if not can_modify(task, caller_id):
        raise ForbiddenError("User not authorized")
    return task


def create_task(db: Session, owner_id: str, payload: TaskCreate) -> Task:
    title = (payload.title or "").strip()
    description = (payload.description or "").strip()
    if not title or not description:
        raise ValidationError("Please add title and description")

    task = Task(
        owner_id=owner_id,
        title=title,
        description=description,
        status=payload.status or TaskStatus.TODO,
        priority=payload.priority or TaskPriority.MEDIUM,
        due_date=payload.due_date,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("Created task %s for user %s", task.id, owner_id)
    return task


def _applicable_changes(payload: TaskUpdate) -> dict[str, Any]:
    changes = payload.model_dump(exclude_unset=True)
    for field in _NON_NULLABLE:
        value = changes.get(field)
        if field in _TEXT_FIELDS and isinstance(value, str):
            value = value.strip()
            changes[field] = value
        if field in changes and not value:
            # Empty means "not supplied": keep what is stored.
            del changes[field]
    return changes


def update_task(db: Session, caller_id: str, task_id: str, payload: TaskUpdate) -> Task:
    """
    Apply a partial update.

    Only fields present and non-empty in the request body change;
    ``due_date: null`` clears the due date. The owner is never changed.
    """
    task = get_owned_task(db, caller_id, task_id)
    changes = _applicable_changes(payload)

    for field, value in changes.items():
        setattr(task, field, value)

    db.commit()
    db.refresh(task)
    return task


def delete_task(db: Session, caller_id: str, task_id: str) -> None:
    task = get_owned_task(db, caller_id, task_id)
    db.delete(task)
    db.commit()
    logger.info("Deleted task %s", task_id)
