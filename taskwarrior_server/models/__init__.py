"""Pydantic models for Taskwarrior Server."""

from taskwarrior_server.models.inputs import (
    AddTaskInput,
    AnnotateTaskInput,
    CompleteTaskInput,
    DeleteTaskInput,
    DenotateTaskInput,
    GetTaskInput,
    ListTasksInput,
    ModifyTaskInput,
    NextTasksInput,
    StartTaskInput,
    StopTaskInput,
)
from taskwarrior_server.models.outcomes import DeleteConfirmation, ErrorOutcome, Outcome, is_error
from taskwarrior_server.models.task import TaskAnnotation, TaskModel, is_valid_uuid

__all__ = [
    # Task models
    "TaskAnnotation",
    "TaskModel",
    "is_valid_uuid",
    # Query input models
    "ListTasksInput",
    "NextTasksInput",
    "GetTaskInput",
    # Mutation input models
    "AddTaskInput",
    "ModifyTaskInput",
    "CompleteTaskInput",
    "StartTaskInput",
    "StopTaskInput",
    "DeleteTaskInput",
    "AnnotateTaskInput",
    "DenotateTaskInput",
    # Outcomes
    "ErrorOutcome",
    "DeleteConfirmation",
    "Outcome",
    "is_error",
]
