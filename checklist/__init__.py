"""Client-side checklist panel over the ``/api/tasks`` HTTP API."""

from checklist.auth import AuthContext
from checklist.client import ApiResult, FailureKind, TasksApi
from checklist.controller import TaskListController
from checklist.logging_setup import configure_logging
from checklist.models import Task, TaskCreate
from checklist.view import PanelView, TaskRow, render_panel

__all__ = [
    "ApiResult",
    "AuthContext",
    "FailureKind",
    "PanelView",
    "Task",
    "TaskCreate",
    "TaskListController",
    "TaskRow",
    "TasksApi",
    "configure_logging",
    "render_panel",
]
