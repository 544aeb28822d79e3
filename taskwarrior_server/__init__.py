"""
MCP Server for Taskwarrior.

This server exposes Taskwarrior task management (list, add, modify, complete,
start, stop, delete and annotate) as MCP tools. Every operation shells out to
the `task` CLI and normalizes its output into validated task records or a
classified error.
"""

# Re-export enums
from taskwarrior_server.enums import ErrorKind, Priority, ResponseFormat, TaskStatus

# Re-export errors
from taskwarrior_server.errors import (
    AnnotationNotFoundError,
    CommandExecutionError,
    ConfirmationRequiredError,
    InvalidIdentifierError,
    PostConditionError,
    RequestValidationError,
    TaskNotFoundError,
    TaskwarriorError,
)

# Re-export models
from taskwarrior_server.models import (
    AddTaskInput,
    AnnotateTaskInput,
    CompleteTaskInput,
    DeleteConfirmation,
    DeleteTaskInput,
    DenotateTaskInput,
    ErrorOutcome,
    GetTaskInput,
    ListTasksInput,
    ModifyTaskInput,
    NextTasksInput,
    Outcome,
    StartTaskInput,
    StopTaskInput,
    TaskAnnotation,
    TaskModel,
)

# Re-export operation handlers
from taskwarrior_server.operations import (
    add_task,
    annotate_task,
    complete_task,
    delete_task,
    denotate_task,
    get_task,
    list_tasks,
    modify_task,
    next_tasks,
    start_task,
    stop_task,
)

# Re-export MCP server instance
from taskwarrior_server.server import mcp

# Re-export tools
from taskwarrior_server.tools import (
    taskwarrior_add,
    taskwarrior_annotate,
    taskwarrior_delete,
    taskwarrior_denotate,
    taskwarrior_done,
    taskwarrior_get,
    taskwarrior_list,
    taskwarrior_modify,
    taskwarrior_next,
    taskwarrior_start,
    taskwarrior_stop,
)

# Re-export utilities (including private functions used by tests)
from taskwarrior_server.utils import (
    _export_tasks,
    _format_outcome,
    _get_task_by_uuid,
    _parse_task,
    _parse_task_output,
    _run_task_command,
)

__all__ = [
    # Enums
    "ErrorKind",
    "ResponseFormat",
    "TaskStatus",
    "Priority",
    # Errors
    "TaskwarriorError",
    "RequestValidationError",
    "TaskNotFoundError",
    "AnnotationNotFoundError",
    "ConfirmationRequiredError",
    "InvalidIdentifierError",
    "CommandExecutionError",
    "PostConditionError",
    # Task models
    "TaskAnnotation",
    "TaskModel",
    # Input models
    "ListTasksInput",
    "NextTasksInput",
    "GetTaskInput",
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
    # Operation handlers
    "list_tasks",
    "next_tasks",
    "get_task",
    "add_task",
    "modify_task",
    "complete_task",
    "start_task",
    "stop_task",
    "delete_task",
    "annotate_task",
    "denotate_task",
    # Utility functions
    "_run_task_command",
    "_export_tasks",
    "_get_task_by_uuid",
    "_parse_task",
    "_parse_task_output",
    "_format_outcome",
    # MCP tools
    "taskwarrior_list",
    "taskwarrior_next",
    "taskwarrior_get",
    "taskwarrior_add",
    "taskwarrior_modify",
    "taskwarrior_done",
    "taskwarrior_start",
    "taskwarrior_stop",
    "taskwarrior_delete",
    "taskwarrior_annotate",
    "taskwarrior_denotate",
    # MCP server instance
    "mcp",
]
