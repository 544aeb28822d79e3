"""Input models for Taskwarrior Server operations."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from taskwarrior_server.enums import Priority, TaskStatus
from taskwarrior_server.models.task import PROJECT_PATTERN, UUID_PATTERN, Tag

TagList = list[Tag]


# ============================================================================
# Query Input Models
# ============================================================================


class ListTasksInput(BaseModel):
    """Input model for listing tasks with structured filters."""

    model_config = ConfigDict(str_strip_whitespace=True)

    status: TaskStatus | None = Field(default=None, description="Only tasks with this status (default: any status)")
    project: str | None = Field(default=None, description="Only tasks in this project", pattern=PROJECT_PATTERN)
    tags: TagList | None = Field(default=None, description="Only tasks carrying all of these tags (without '+')")
    description_contains: str | None = Field(default=None, description="Substring the description must contain")
    due_before: str | None = Field(default=None, description="Due before this date (e.g. 'eow', '2024-12-31')")
    due_after: str | None = Field(default=None, description="Due after this date")
    scheduled_before: str | None = Field(default=None, description="Scheduled before this date")
    scheduled_after: str | None = Field(default=None, description="Scheduled after this date")
    modified_before: str | None = Field(default=None, description="Last modified before this date")
    modified_after: str | None = Field(default=None, description="Last modified after this date")
    limit: int | None = Field(default=None, description="Maximum number of tasks to return", ge=1)


class NextTasksInput(BaseModel):
    """Input model for the most urgent pending tasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    project: str | None = Field(default=None, description="Only tasks in this project", pattern=PROJECT_PATTERN)
    tags: TagList | None = Field(default=None, description="Only tasks carrying all of these tags (without '+')")
    limit: int = Field(default=10, description="Maximum number of tasks to return", ge=1, le=500)


class GetTaskInput(BaseModel):
    """Input model for getting a single task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    uuid: str = Field(..., description="UUID of the task to retrieve", pattern=UUID_PATTERN)


# ============================================================================
# Mutation Input Models
# ============================================================================


class AddTaskInput(BaseModel):
    """Input model for adding a new task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    description: str = Field(..., description="Task description (required)", min_length=1)
    due: str | None = Field(default=None, description="Due date (e.g., 'today', 'tomorrow', '2024-12-31', 'eow')")
    priority: Priority | None = Field(default=None, description="Task priority: H (high), M (medium), L (low)")
    project: str | None = Field(default=None, description="Project name to assign the task to", pattern=PROJECT_PATTERN)
    tags: TagList | None = Field(default=None, description="List of tags to apply (without '+' prefix)")


class ModifyTaskInput(BaseModel):
    """Input model for modifying a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    uuid: str = Field(..., description="UUID of the task to modify", pattern=UUID_PATTERN)
    description: str | None = Field(default=None, description="New task description", min_length=1)
    status: TaskStatus | None = Field(default=None, description="New status")
    due: str | None = Field(default=None, description="New due date (use empty string to remove)")
    priority: Priority | Literal[""] | None = Field(
        default=None, description="New priority: H, M, L, or empty string to remove"
    )
    project: str | None = Field(
        default=None, description="New project name (use empty string to remove)", pattern=r"^[a-zA-Z0-9 ._-]*$"
    )
    add_tags: TagList | None = Field(default=None, description="Tags to add (without '+' prefix)")
    remove_tags: TagList | None = Field(default=None, description="Tags to remove (without '-' prefix)")


class CompleteTaskInput(BaseModel):
    """Input model for marking a task done."""

    model_config = ConfigDict(str_strip_whitespace=True)

    uuid: str = Field(..., description="UUID of the task to complete", pattern=UUID_PATTERN)


class StartTaskInput(BaseModel):
    """Input model for starting a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    uuid: str = Field(..., description="UUID of the task to start", pattern=UUID_PATTERN)


class StopTaskInput(BaseModel):
    """Input model for stopping a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    uuid: str = Field(..., description="UUID of the task to stop", pattern=UUID_PATTERN)


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    uuid: str = Field(..., description="UUID of the task to delete", pattern=UUID_PATTERN)
    skip_confirmation: bool = Field(
        default=False, description="Pass rc.confirmation=off so Taskwarrior does not ask for confirmation"
    )


class AnnotateTaskInput(BaseModel):
    """Input model for adding an annotation to a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    uuid: str = Field(..., description="UUID of the task to annotate", pattern=UUID_PATTERN)
    annotation: str = Field(..., description="Annotation text to add", min_length=1)


class DenotateTaskInput(BaseModel):
    """Input model for removing an annotation from a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    uuid: str = Field(..., description="UUID of the task", pattern=UUID_PATTERN)
    annotation: str = Field(..., description="Exact text of the annotation to remove", min_length=1)
