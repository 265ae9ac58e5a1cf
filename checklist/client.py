"""Async client for the ``/api/tasks`` endpoints.

Every call returns an :class:`ApiResult` instead of raising, so callers can
branch on success without using exceptions for control flow.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from checklist.auth import AuthContext
from checklist.config import Settings
from checklist.models import TaskCreate, TaskId

logger = logging.getLogger(__name__)

TASKS_PATH = "/api/tasks"


class FailureKind(str, Enum):
    TRANSPORT = "transport"
    STATUS = "status"


@dataclass(frozen=True, slots=True)
class ApiResult:
    """Outcome of one HTTP call."""

    ok: bool
    status_code: int | None = None
    data: Any = None
    failure: FailureKind | None = None
    error: str | None = None

    @classmethod
    def success(cls, status_code: int, data: Any) -> "ApiResult":
        return cls(ok=True, status_code=status_code, data=data)

    @classmethod
    def transport_error(cls, error: str) -> "ApiResult":
        return cls(ok=False, failure=FailureKind.TRANSPORT, error=error)

    @classmethod
    def status_error(cls, status_code: int, error: str) -> "ApiResult":
        return cls(ok=False, status_code=status_code, failure=FailureKind.STATUS, error=error)


class TasksApi:
    """Thin wrapper over an ``httpx.AsyncClient`` bound to the task endpoints."""

    def __init__(self, http: httpx.AsyncClient, auth: AuthContext) -> None:
        self._http = http
        self._auth = auth

    @classmethod
    def from_settings(cls, settings: Settings, auth: AuthContext) -> "TasksApi":
        """Build a client pointed at ``settings.api_base_url``."""
        kwargs: dict[str, Any] = {"base_url": settings.api_base_url}
        if settings.request_timeout_s is not None:
            kwargs["timeout"] = settings.request_timeout_s
        return cls(httpx.AsyncClient(**kwargs), auth)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def list_tasks(self) -> ApiResult:
        """GET the full task list."""
        return await self._request("GET", TASKS_PATH)

    async def create_task(self, data: TaskCreate) -> ApiResult:
        """POST a new task."""
        return await self._request("POST", TASKS_PATH, json=data.model_dump())

    async def toggle_task(self, task_id: TaskId) -> ApiResult:
        """PUT to flip a task's done flag server-side (no body is sent)."""
        return await self._request("PUT", f"{TASKS_PATH}/{task_id}")

    async def delete_task(self, task_id: TaskId) -> ApiResult:
        """DELETE a task."""
        return await self._request("DELETE", f"{TASKS_PATH}/{task_id}")

    async def _request(self, method: str, path: str, *, json: Any = None) -> ApiResult:
        try:
            response = await self._http.request(method, path, json=json, headers=self._auth.headers())
        except httpx.HTTPError as exc:
            logger.debug("%s %s failed: %r", method, path, exc)
            return ApiResult.transport_error(f"{method} {path}: {exc!r}")

        if not response.is_success:
            return ApiResult.status_error(
                response.status_code,
                f"{method} {path} returned HTTP {response.status_code}",
            )

        try:
            data = response.json()
        except ValueError:
            # 204 or a non-JSON body still counts as success
            data = None
        return ApiResult.success(response.status_code, data)
