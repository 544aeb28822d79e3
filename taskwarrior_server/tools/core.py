"""Core MCP tool definitions for Taskwarrior.

Each tool runs its operation handler in a worker thread, since the handler
blocks on the task subprocess, and renders the Outcome as text.
"""

import asyncio

from mcp.types import ToolAnnotations

from taskwarrior_server.enums import ResponseFormat
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
from taskwarrior_server.server import mcp
from taskwarrior_server.utils.formatters import _format_outcome


@mcp.tool(
    name="taskwarrior_list",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskwarrior_list(params: ListTasksInput, response_format: ResponseFormat = ResponseFormat.JSON) -> str:
    """
    Search tasks with structured filters.

    USE THIS WHEN:
    - Searching for tasks by project, tags, status or description text
    - Finding tasks due, scheduled or modified within a date range

    DO NOT USE WHEN:
    - You have a specific task UUID → use taskwarrior_get instead
    - You want the most urgent pending work → use taskwarrior_next instead

    An empty match is a successful empty list, not an error.

    Args:
        params: ListTasksInput with optional project, tags, status, description_contains,
            due/scheduled/modified before/after bounds and limit
        response_format: 'json' (default), 'markdown' or 'concise'

    Returns:
        Matching tasks

    Examples:
        - Pending work tasks: params with project="work", status="pending"
        - Due this week: params with due_before="eow"
    """
    outcome = await asyncio.to_thread(list_tasks, params)
    return _format_outcome(outcome, response_format, "Tasks")


@mcp.tool(
    name="taskwarrior_next",
    annotations=ToolAnnotations(
        title="Next Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskwarrior_next(params: NextTasksInput, response_format: ResponseFormat = ResponseFormat.JSON) -> str:
    """
    Get the most urgent pending tasks, highest urgency first.

    Args:
        params: NextTasksInput with optional project, tags and limit (default 10)
        response_format: 'json' (default), 'markdown' or 'concise'

    Returns:
        Pending tasks ranked by Taskwarrior urgency
    """
    outcome = await asyncio.to_thread(next_tasks, params)
    return _format_outcome(outcome, response_format, "Next tasks")


@mcp.tool(
    name="taskwarrior_get",
    annotations=ToolAnnotations(
        title="Get Task Details",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskwarrior_get(params: GetTaskInput, response_format: ResponseFormat = ResponseFormat.JSON) -> str:
    """
    Retrieve full details for a single task by UUID, including annotations.

    Args:
        params: GetTaskInput containing the task uuid
        response_format: 'json' (default), 'markdown' or 'concise'

    Returns:
        The task, or a not_found / invalid_identifier error
    """
    outcome = await asyncio.to_thread(get_task, params)
    return _format_outcome(outcome, response_format)


@mcp.tool(
    name="taskwarrior_add",
    annotations=ToolAnnotations(
        title="Add Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def taskwarrior_add(params: AddTaskInput, response_format: ResponseFormat = ResponseFormat.JSON) -> str:
    """
    Create a new task.

    USE THIS WHEN:
    - Adding a new task to track, optionally with due date, priority, project and tags

    DO NOT USE WHEN:
    - Updating an existing task → use taskwarrior_modify instead
    - Adding notes to a task → use taskwarrior_annotate instead

    Args:
        params: AddTaskInput containing description and optional attributes
        response_format: 'json' (default), 'markdown' or 'concise'

    Returns:
        The created task, including its UUID

    Examples:
        - Simple task: params with description="Buy groceries"
        - Task with tags: params with description="Call mom", tags=["personal", "important"]
    """
    outcome = await asyncio.to_thread(add_task, params)
    return _format_outcome(outcome, response_format)


@mcp.tool(
    name="taskwarrior_modify",
    annotations=ToolAnnotations(
        title="Modify Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskwarrior_modify(params: ModifyTaskInput, response_format: ResponseFormat = ResponseFormat.JSON) -> str:
    """
    Update an existing task's attributes.

    CLEARING VALUES: Use empty string to clear project, due or priority (e.g., due="" removes the due date).
    A request that changes nothing returns the task as it is.

    Args:
        params: ModifyTaskInput containing uuid and attributes to change
        response_format: 'json' (default), 'markdown' or 'concise'

    Returns:
        The updated task
    """
    outcome = await asyncio.to_thread(modify_task, params)
    return _format_outcome(outcome, response_format)


@mcp.tool(
    name="taskwarrior_done",
    annotations=ToolAnnotations(
        title="Mark Task Done",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskwarrior_done(params: CompleteTaskInput, response_format: ResponseFormat = ResponseFormat.JSON) -> str:
    """
    Mark a task as completed. Completing an already completed task changes nothing.

    Args:
        params: CompleteTaskInput containing the task uuid
        response_format: 'json' (default), 'markdown' or 'concise'

    Returns:
        The completed task
    """
    outcome = await asyncio.to_thread(complete_task, params)
    return _format_outcome(outcome, response_format)


@mcp.tool(
    name="taskwarrior_start",
    annotations=ToolAnnotations(
        title="Start Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskwarrior_start(params: StartTaskInput, response_format: ResponseFormat = ResponseFormat.JSON) -> str:
    """
    Start working on a task. This sets the task's start time (the 'active' state).

    Args:
        params: StartTaskInput containing the task uuid
        response_format: 'json' (default), 'markdown' or 'concise'

    Returns:
        The started task
    """
    outcome = await asyncio.to_thread(start_task, params)
    return _format_outcome(outcome, response_format)


@mcp.tool(
    name="taskwarrior_stop",
    annotations=ToolAnnotations(
        title="Stop Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskwarrior_stop(params: StopTaskInput, response_format: ResponseFormat = ResponseFormat.JSON) -> str:
    """
    Stop working on a task. Stopping a task that is not started is allowed.

    Args:
        params: StopTaskInput containing the task uuid
        response_format: 'json' (default), 'markdown' or 'concise'

    Returns:
        The stopped task
    """
    outcome = await asyncio.to_thread(stop_task, params)
    return _format_outcome(outcome, response_format)


@mcp.tool(
    name="taskwarrior_delete",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskwarrior_delete(params: DeleteTaskInput, response_format: ResponseFormat = ResponseFormat.JSON) -> str:
    """
    Delete a task.

    If Taskwarrior asks for confirmation the result is a confirmation_required
    error; retry with skip_confirmation=true to delete anyway.

    Args:
        params: DeleteTaskInput containing the task uuid and skip_confirmation flag
        response_format: 'json' (default), 'markdown' or 'concise'

    Returns:
        Deletion confirmation with the deleted UUID
    """
    outcome = await asyncio.to_thread(delete_task, params)
    return _format_outcome(outcome, response_format)


@mcp.tool(
    name="taskwarrior_annotate",
    annotations=ToolAnnotations(
        title="Annotate Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def taskwarrior_annotate(params: AnnotateTaskInput, response_format: ResponseFormat = ResponseFormat.JSON) -> str:
    """
    Add an annotation (note) to a task.

    Args:
        params: AnnotateTaskInput containing uuid and annotation text
        response_format: 'json' (default), 'markdown' or 'concise'

    Returns:
        The task with the new annotation

    Examples:
        - Add note: params with uuid="...", annotation="Discussed with John, needs review"
    """
    outcome = await asyncio.to_thread(annotate_task, params)
    return _format_outcome(outcome, response_format)


@mcp.tool(
    name="taskwarrior_denotate",
    annotations=ToolAnnotations(
        title="Remove Annotation",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def taskwarrior_denotate(params: DenotateTaskInput, response_format: ResponseFormat = ResponseFormat.JSON) -> str:
    """
    Remove an annotation from a task. The annotation text must match exactly.

    Args:
        params: DenotateTaskInput containing uuid and the exact annotation text
        response_format: 'json' (default), 'markdown' or 'concise'

    Returns:
        The task without the annotation, or an annotation_not_found error
    """
    outcome = await asyncio.to_thread(denotate_task, params)
    return _format_outcome(outcome, response_format)
