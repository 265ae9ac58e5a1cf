"""State holder for the checklist panel.

The controller keeps a local, disposable copy of the server's task list.
Toggles and deletes are applied locally first and then sent to the server;
when the server call fails the local copy is rebuilt from a fresh list
request rather than rolled back by hand.
"""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError

from checklist.auth import AuthContext
from checklist.client import TasksApi
from checklist.config import Settings, get_settings
from checklist.models import Task, TaskCreate, TaskId, TaskList
from checklist.notifications import LoggingNotifier, Notifier, Toast, ToastStatus

logger = logging.getLogger(__name__)

ChangeListener = Callable[[], Awaitable[None] | None]

SUBMIT_KEY = "Enter"


def parse_task_list(data: Any) -> list[Task]:
    """Turn a list response body into tasks; anything malformed becomes an empty list."""
    if not isinstance(data, list):
        logger.debug("Task list response is not a list (%s); using empty list", type(data).__name__)
        return []
    try:
        return TaskList.validate_python(data)
    except ValidationError as exc:
        logger.debug("Task list response has malformed items: %s", exc)
        return []


class TaskListController:
    """Mirror of the remote task list with optimistic toggle and delete."""

    def __init__(
        self,
        api: TasksApi,
        auth: AuthContext,
        *,
        notifier: Notifier | None = None,
        on_change: ChangeListener | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._api = api
        self._auth = auth
        self._notifier = notifier or LoggingNotifier()
        self._on_change = on_change
        self._settings = settings or get_settings()

        self.tasks: list[Task] = []
        self.loading = False
        self.pending_name = ""

        self._background: set[asyncio.Task[None]] = set()
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def is_visible(self) -> bool:
        """The panel is only shown while a credential is present."""
        return self._auth.is_authenticated

    def find(self, task_id: TaskId) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def refresh(self) -> None:
        """Replace the local list with the server's list."""
        if not self._auth.is_authenticated:
            return

        self.loading = True
        try:
            result = await self._api.list_tasks()
            if result.ok:
                self.tasks = parse_task_list(result.data)
            else:
                logger.warning("Loading tasks failed: %s", result.error)
                self.tasks = []
        finally:
            self.loading = False

    async def add_task(self, name: str | None = None) -> bool:
        """Create a task from ``name`` (or the pending input) and reload the list.

        Returns True when the server accepted the task.
        """
        raw = self.pending_name if name is None else name
        trimmed = raw.strip()
        if not trimmed or not self._auth.is_authenticated:
            return False

        result = await self._api.create_task(TaskCreate(name=trimmed))
        if not result.ok:
            logger.warning("Adding task %r failed: %s", trimmed, result.error)
            self._notifier.notify(
                Toast(
                    title="Error",
                    status=ToastStatus.ERROR,
                    description="Could not add the task",
                    duration_ms=self._settings.error_toast_ms,
                )
            )
            return False

        self.pending_name = ""
        await self.refresh()
        await self._notify_change()
        self._notifier.notify(
            Toast(title="Task added", status=ToastStatus.SUCCESS, duration_ms=self._settings.success_toast_ms)
        )
        return True

    async def toggle_task(self, task_id: TaskId) -> bool:
        """Flip ``is_done`` locally, then on the server; reload on failure."""
        if not self._auth.is_authenticated or self.find(task_id) is None:
            return False

        self.tasks = [task.toggled() if task.id == task_id else task for task in self.tasks]

        result = await self._api.toggle_task(task_id)
        if not result.ok:
            logger.warning("Toggling task %r failed: %s; reloading", task_id, result.error)
            await self.refresh()
            return False

        await self._notify_change()
        return True

    async def delete_task(self, task_id: TaskId) -> bool:
        """Drop the task locally, then on the server; reload on failure."""
        if not self._auth.is_authenticated or self.find(task_id) is None:
            return False

        self.tasks = [task for task in self.tasks if task.id != task_id]

        result = await self._api.delete_task(task_id)
        if not result.ok:
            logger.warning("Deleting task %r failed: %s; reloading", task_id, result.error)
            await self.refresh()
            return False

        await self._notify_change()
        return True

    # ------------------------------------------------------------------
    # Input field
    # ------------------------------------------------------------------

    def set_pending_name(self, text: str) -> None:
        self.pending_name = text

    async def submit_key(self, key: str) -> bool:
        """Enter in the input field submits the pending name."""
        if key != SUBMIT_KEY:
            return False
        return await self.add_task()

    # ------------------------------------------------------------------
    # Credential binding
    # ------------------------------------------------------------------

    def mount(self) -> None:
        """Start following the credential; load right away if one is present.

        Must be called from inside a running event loop.
        """
        if self._unsubscribe is not None:
            return
        self._unsubscribe = self._auth.subscribe(self._on_token_changed)
        if self._auth.is_authenticated:
            self._schedule_refresh()

    def unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def wait_idle(self) -> None:
        """Wait until every scheduled background refresh has finished."""
        while self._background:
            await asyncio.gather(*list(self._background))

    def _on_token_changed(self, token: str | None) -> None:
        if token:
            self._schedule_refresh()

    def _schedule_refresh(self) -> None:
        task = asyncio.get_running_loop().create_task(self.refresh())
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    async def _notify_change(self) -> None:
        if self._on_change is None:
            return
        try:
            outcome = self._on_change()
            if inspect.isawaitable(outcome):
                await outcome
        except Exception:
            logger.exception("Task change listener failed")
