"""Pydantic models for the checklist panel.

These mirror the JSON shapes exchanged with the ``/api/tasks`` endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

TaskId = int | str


class TaskCreate(BaseModel):
    """Request body for creating a new task."""

    name: str = Field(
        ...,
        min_length=1,
        description="The task name (required, non-empty after trimming)",
    )


class Task(BaseModel):
    """A task item as returned by the server."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: TaskId = Field(..., description="Server-assigned identifier")
    name: str = Field(..., description="The task name")
    is_done: bool = Field(default=False, description="Whether the task has been checked off")

    def toggled(self) -> "Task":
        """Return a copy with ``is_done`` flipped."""
        return self.model_copy(update={"is_done": not self.is_done})


TaskList = TypeAdapter(list[Task])
