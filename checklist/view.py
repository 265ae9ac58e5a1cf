"""Render model for the checklist panel."""

from dataclasses import dataclass

from checklist.config import Settings, get_settings
from checklist.controller import TaskListController
from checklist.models import TaskId

DONE_OPACITY = 0.6


@dataclass(frozen=True, slots=True)
class TaskRow:
    task_id: TaskId
    name: str
    is_done: bool
    struck_through: bool
    opacity: float


@dataclass(frozen=True, slots=True)
class PanelView:
    title: str
    input_placeholder: str
    input_value: str
    show_spinner: bool
    show_empty_message: bool
    empty_message: str
    rows: tuple[TaskRow, ...]


def render_panel(controller: TaskListController, settings: Settings | None = None) -> PanelView | None:
    """Build the panel's view, or None when there is no credential (panel hidden)."""
    if not controller.is_visible:
        return None

    settings = settings or get_settings()
    empty = not controller.tasks
    rows = tuple(
        TaskRow(
            task_id=task.id,
            name=task.name,
            is_done=task.is_done,
            struck_through=task.is_done,
            opacity=DONE_OPACITY if task.is_done else 1.0,
        )
        for task in controller.tasks
    )
    return PanelView(
        title=settings.panel_title,
        input_placeholder=settings.input_placeholder,
        input_value=controller.pending_name,
        show_spinner=controller.loading and empty,
        show_empty_message=not controller.loading and empty,
        empty_message=settings.empty_message,
        rows=rows,
    )
