# File: tests/test_task_service.py

import pytest

from taskboard.core.errors import ForbiddenError, NotFoundError, ValidationError
from taskboard.models.task import TaskPriority, TaskStatus
from taskboard.schemas.task import TaskCreate, TaskUpdate
from taskboard.schemas.user import UserCreate
from taskboard.services import auth_service, task_service


@pytest.fixture()
def owner(db):
    return auth_service.register_user(
        db, UserCreate(name="Alice", email="alice@x.com", password="secret1")
    )


@pytest.fixture()
def stranger(db):
    return auth_service.register_user(
        db, UserCreate(name="Bob", email="bob@x.com", password="hunter22")
    )


def test_can_modify(db, owner, stranger):
    task = task_service.create_task(db, owner.id, TaskCreate(title="t", description="d"))
    assert task_service.can_modify(task, owner.id)
    assert not task_service.can_modify(task, stranger.id)


def test_defaults(db, owner):
    task = task_service.create_task(db, owner.id, TaskCreate(title="t", description="d"))
    assert task.status == TaskStatus.TODO
    assert task.priority == TaskPriority.MEDIUM
    assert task.due_date is None


def test_create_validation(db, owner):
    with pytest.raises(ValidationError):
        task_service.create_task(db, owner.id, TaskCreate(title="t"))


def test_update_only_applies_present_fields(db, owner):
    task = task_service.create_task(
        db, owner.id, TaskCreate(title="t", description="d", priority="high")
    )
    updated = task_service.update_task(db, owner.id, task.id, TaskUpdate(status="completed"))
    assert updated.status == TaskStatus.COMPLETED
    assert updated.title == "t"
    assert updated.description == "d"
    assert updated.priority == TaskPriority.HIGH


def test_update_and_delete_checks(db, owner, stranger):
    task = task_service.create_task(db, owner.id, TaskCreate(title="t", description="d"))

    with pytest.raises(ForbiddenError):
        task_service.update_task(db, stranger.id, task.id, TaskUpdate(title="x"))
    with pytest.raises(ForbiddenError):
        task_service.delete_task(db, stranger.id, task.id)

    task_service.delete_task(db, owner.id, task.id)
    with pytest.raises(NotFoundError):
        task_service.delete_task(db, owner.id, task.id)


def test_login_iff_password_matches(db, owner):
    assert auth_service.authenticate_user(db, email="Alice@X.com", password="secret1").id == owner.id
