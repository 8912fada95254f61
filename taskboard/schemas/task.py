# File: taskboard/schemas/task.py

from typing import Optional

from pydantic import field_validator, model_validator

from taskboard.models.task import TaskPriority, TaskStatus
from taskboard.schemas.base import APIModel, UTCDateTime

_NULLABLE_KEYS = ("dueDate", "due_date")


class _DueDateMixin(APIModel):
    due_date: Optional[UTCDateTime] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due_date(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class TaskCreate(_DueDateMixin):
    # Presence is checked by the service so the error reads like the rest
    # of the API ("Please add title and description").
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None


class TaskUpdate(_DueDateMixin):
    """
    Partial update: fields not present in the body are left alone, and so
    are fields sent empty (``""``, or ``null`` for anything but the due
    date). Only ``dueDate: null`` clears a value.
    Unknown keys (``owner``, ``id``...) are ignored.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None

    @model_validator(mode="before")
    @classmethod
    def drop_empty_values(cls, data):
        if not isinstance(data, dict):
            return data
        kept = {}
        for key, value in data.items():
            if isinstance(value, str) and not value.strip():
                continue
            if value is None and key not in _NULLABLE_KEYS:
                continue
            kept[key] = value
        return kept


class TaskRead(APIModel):
    id: str
    owner_id: str
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[UTCDateTime] = None
    created_at: UTCDateTime
    updated_at: UTCDateTime


class TaskResponse(APIModel):
    task: TaskRead


class MessageResponse(APIModel):
    message: str
