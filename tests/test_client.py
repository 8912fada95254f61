# File: tests/test_client.py

import json

import pytest

from taskboard.client import APIError, Session, SessionExpiredError, TaskboardClient


@pytest.fixture()
def session_file(tmp_path):
    return tmp_path / "session.json"


@pytest.fixture()
def api(client, session_file):
    return TaskboardClient(http=client, session=Session.load(session_file))


def test_session_load_missing_file(session_file):
    session = Session.load(session_file)
    assert not session.is_authenticated
    assert session.path == session_file


def test_session_load_corrupt_file(session_file):
    session_file.write_text("{oops", encoding="utf-8")
    assert not Session.load(session_file).is_authenticated


def test_session_save_load_clear(session_file):
    session = Session(token="t", user={"id": "1", "name": "A"})
    session.save(session_file)

    restored = Session.load(session_file)
    assert restored.is_authenticated
    assert restored.token == "t"
    assert restored.user == {"id": "1", "name": "A"}

    restored.clear()
    assert not restored.is_authenticated
    assert not session_file.exists()


def test_register_persists_session(api, session_file):
    user = api.register("Alice", "alice@x.com", "secret1")
    assert user["email"] == "alice@x.com"
    assert api.session.is_authenticated

    stored = json.loads(session_file.read_text(encoding="utf-8"))
    assert stored["user"]["id"] == user["id"]
    assert stored["token"] == api.session.token


def test_hydrated_session_can_call_api(client, api, session_file):
    api.register("Alice", "alice@x.com", "secret1")
    api.create_task("Buy milk", "2%")

    fresh = TaskboardClient(http=client, session=Session.load(session_file))
    tasks = fresh.list_tasks()
    assert [t["title"] for t in tasks] == ["Buy milk"]


def test_task_lifecycle(api):
    api.register("Alice", "alice@x.com", "secret1")
    task = api.create_task("Buy milk", "2%", priority="high")
    assert task["priority"] == "high"

    updated = api.update_task(task["id"], status="completed")
    assert updated["status"] == "completed"
    assert updated["title"] == "Buy milk"

    assert api.delete_task(task["id"]) == "Task removed"
    assert api.list_tasks() == []

    with pytest.raises(APIError) as exc_info:
        api.delete_task(task["id"])
    assert exc_info.value.status_code == 404


def test_update_profile_refreshes_cached_user(api):
    api.register("Alice", "alice@x.com", "secret1")
    api.update_profile(name="Alice B")
    assert api.session.user["name"] == "Alice B"


def test_bad_login_raises_and_keeps_session_empty(api):
    api.register("Alice", "alice@x.com", "secret1")
    api.logout()

    with pytest.raises(APIError) as exc_info:
        api.login("alice@x.com", "wrongpass")
    assert exc_info.value.status_code == 401
    assert not api.session.is_authenticated


def test_rejected_token_clears_session(api, session_file):
    api.session.set("not.a.jwt", {"id": "x"})
    with pytest.raises(SessionExpiredError):
        api.list_tasks()
    assert not api.session.is_authenticated
    assert not session_file.exists()


def test_protected_call_without_session(api):
    with pytest.raises(SessionExpiredError):
        api.list_tasks()


def test_logout_clears_persisted_session(api, session_file):
    api.register("Alice", "alice@x.com", "secret1")
    assert session_file.exists()
    api.logout()
    assert not session_file.exists()
    assert not api.session.is_authenticated
