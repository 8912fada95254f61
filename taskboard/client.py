"""API client for the Taskboard service.

``Session`` replaces the dashboard's local-storage cache: it is hydrated
from a JSON file at startup, passed explicitly to ``TaskboardClient`` and
cleared on logout. It is a convenience only; the server re-checks the token
on every protected call.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")


class SessionExpiredError(APIError):
    """A protected call was rejected with 401; the session has been cleared."""


@dataclass
class Session:
    token: Optional[str] = None
    user: Optional[dict[str, Any]] = None
    path: Optional[Path] = field(default=None, repr=False)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token) and self.user is not None

    @classmethod
    def load(cls, path: str | Path) -> "Session":
        """Hydrate from ``path``; a missing or unreadable file gives an empty session."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return cls(path=path)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable session file %s: %s", path, exc)
            return cls(path=path)

        if not isinstance(data, dict):
            return cls(path=path)
        return cls(token=data.get("token"), user=data.get("user"), path=path)

    def save(self, path: str | Path | None = None) -> None:
        target = Path(path) if path is not None else self.path
        if target is None:
            return
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps({"token": self.token, "user": self.user}), encoding="utf-8")
        self.path = target

    def set(self, token: str, user: dict[str, Any]) -> None:
        self.token = token
        self.user = user
        self.save()

    def update_user(self, user: dict[str, Any]) -> None:
        self.user = user
        self.save()

    def clear(self, path: str | Path | None = None) -> None:
        """Forget the token and user and remove the persisted copy."""
        self.token = None
        self.user = None
        target = Path(path) if path is not None else self.path
        if target is not None:
            target.unlink(missing_ok=True)


class TaskboardClient:
    """HTTP client for the Taskboard API.

    Pass either ``base_url`` or a ready ``http`` client (any ``httpx.Client``,
    including FastAPI's TestClient).
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        session: Optional[Session] = None,
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
        api_prefix: str = "/api",
    ):
        if http is None:
            if base_url is None:
                raise ValueError("base_url or http is required")
            http = httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout)
        self.http = http
        self.session = session if session is not None else Session()
        self.api_prefix = api_prefix.rstrip("/")

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "TaskboardClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ---------- plumbing ----------

    def _headers(self, auth: bool) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if auth:
            if not self.session.token:
                raise SessionExpiredError(401, "Not logged in")
            headers["Authorization"] = f"Bearer {self.session.token}"
        return headers

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[dict[str, Any]] = None,
        auth: bool = True,
    ) -> Any:
        response = self.http.request(
            method,
            f"{self.api_prefix}{path}",
            json=json,
            headers=self._headers(auth),
        )
        if response.is_success:
            return response.json()

        try:
            detail = response.json().get("detail", response.text)
        except ValueError:
            detail = response.text

        if auth and response.status_code == 401:
            self.session.clear()
            raise SessionExpiredError(response.status_code, str(detail))
        raise APIError(response.status_code, str(detail))

    # ---------- users ----------

    def register(self, name: str, email: str, password: str) -> dict[str, Any]:
        data = self._request(
            "POST",
            "/users",
            json={"name": name, "email": email, "password": password},
            auth=False,
        )
        self.session.set(data["token"], data["user"])
        return data["user"]

    def login(self, email: str, password: str) -> dict[str, Any]:
        data = self._request(
            "POST",
            "/users/login",
            json={"email": email, "password": password},
            auth=False,
        )
        self.session.set(data["token"], data["user"])
        return data["user"]

    def logout(self) -> None:
        self.session.clear()

    def update_profile(self, **fields: Any) -> dict[str, Any]:
        data = self._request("PUT", "/users/profile", json=fields)
        self.session.update_user(data["user"])
        return data["user"]

    # ---------- tasks ----------

    def list_tasks(self) -> list[dict[str, Any]]:
        return self._request("GET", "/tasks")

    def create_task(self, title: str, description: str, **fields: Any) -> dict[str, Any]:
        body = {"title": title, "description": description, **fields}
        return self._request("POST", "/tasks", json=body)["task"]

    def update_task(self, task_id: str, **fields: Any) -> dict[str, Any]:
        return self._request("PUT", f"/tasks/{task_id}", json=fields)["task"]

    def delete_task(self, task_id: str) -> str:
        return self._request("DELETE", f"/tasks/{task_id}")["message"]
