"""
Operation handlers for Taskwarrior Server.

Each handler takes a validated request (or a plain mapping, validated on
entry), issues at most one mutating Taskwarrior command, re-reads the task
to confirm the result and returns an Outcome. Handlers hold no state between
calls: every record comes fresh from `task export`.

All handlers accept an optional ``runner`` so callers (and tests) can swap
the real task executable for another command runner.
"""

import functools
import logging
import re
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from taskwarrior_server.enums import ErrorKind, TaskStatus
from taskwarrior_server.errors import (
    AnnotationNotFoundError,
    CommandExecutionError,
    ConfirmationRequiredError,
    PostConditionError,
    RequestValidationError,
    TaskNotFoundError,
    TaskwarriorError,
)
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
from taskwarrior_server.models.outcomes import DeleteConfirmation, ErrorOutcome, Outcome
from taskwarrior_server.models.task import TaskModel
from taskwarrior_server.utils.cli import (
    CommandRunner,
    _export_tasks,
    _get_task_by_uuid,
    _quote,
    _run_task_command,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_EMBEDDED_UUID_RE = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")
_CREATED_ID_RE = re.compile(r"Created task (\d+)", re.IGNORECASE)
_CONFIRMATION_PATTERNS = ("confirm", "(yes/no)", "not deleted")


# ============================================================================
# Handler Boundary
# ============================================================================


def _validate(model: type[M], params: M | Mapping[str, Any]) -> M:
    if isinstance(params, model):
        return params
    try:
        return model.model_validate(params)
    except ValidationError as e:
        raise RequestValidationError(f"Invalid {model.__name__} request.", str(e)) from e


def _handler(model: type[M]) -> Callable[[Callable[[M, CommandRunner], Outcome]], Callable[..., Outcome]]:
    """Wrap an operation so every failure leaves it as an ErrorOutcome."""

    def decorator(func: Callable[[M, CommandRunner], Outcome]) -> Callable[..., Outcome]:
        @functools.wraps(func)
        def wrapper(params: M | Mapping[str, Any], runner: CommandRunner | None = None) -> Outcome:
            try:
                request = _validate(model, params)
                return func(request, runner or _run_task_command)
            except TaskwarriorError as e:
                logger.warning("%s failed [%s]: %s", func.__name__, e.kind.value, e.message)
                return e.to_outcome()
            except Exception as e:
                logger.exception("Unexpected error in %s", func.__name__)
                return ErrorOutcome(
                    kind=ErrorKind.EXECUTION_FAILURE,
                    message=f"Unexpected error - {type(e).__name__}: {e}",
                )

        return wrapper

    return decorator


def _tag_filters(tags: list[str] | None, prefix: str = "+") -> list[str]:
    return [f"{prefix}{tag}" for tag in tags or []]


# ============================================================================
# Queries
# ============================================================================


@_handler(ListTasksInput)
def list_tasks(params: ListTasksInput, run: CommandRunner) -> list[TaskModel]:
    """List tasks matching structured filters. No match is an empty list."""
    filters: list[str] = []

    if params.project:
        filters.append(f"project:{_quote(params.project)}")
    filters.extend(_tag_filters(params.tags))
    if params.status:
        filters.append(f"status:{params.status.value}")
    if params.description_contains:
        filters.append(f"description.contains:{_quote(params.description_contains)}")

    date_bounds = [
        ("due.before", params.due_before),
        ("due.after", params.due_after),
        ("scheduled.before", params.scheduled_before),
        ("scheduled.after", params.scheduled_after),
        ("modified.before", params.modified_before),
        ("modified.after", params.modified_after),
    ]
    for attribute, value in date_bounds:
        if value:
            filters.append(f"{attribute}:{_quote(value)}")

    if params.limit:
        filters.append(f"limit:{params.limit}")

    tasks = _export_tasks(filters, run)
    # export ignores limit: on some Taskwarrior versions
    if params.limit and len(tasks) > params.limit:
        tasks = tasks[: params.limit]
    return tasks


@_handler(NextTasksInput)
def next_tasks(params: NextTasksInput, run: CommandRunner) -> list[TaskModel]:
    """Pending tasks ranked by urgency, most urgent first."""
    filters = ["status:pending"]
    if params.project:
        filters.append(f"project:{_quote(params.project)}")
    filters.extend(_tag_filters(params.tags))

    tasks = _export_tasks(filters, run)
    tasks.sort(key=lambda t: t.urgency or 0.0, reverse=True)
    return tasks[: params.limit]


@_handler(GetTaskInput)
def get_task(params: GetTaskInput, run: CommandRunner) -> TaskModel:
    """Fetch a single task by UUID."""
    return _get_task_by_uuid(params.uuid, run)


# ============================================================================
# Mutations
# ============================================================================


def _recover_created_uuid(description: str, output: str, run: CommandRunner) -> str:
    """
    Work out the UUID of the task that `task add` just created.

    Tries, in order: a UUID printed in the output, the numeric id from
    "Created task N." re-exported by id, and finally an exact description
    match. The last step is unreliable when descriptions are not unique.
    """
    if match := _EMBEDDED_UUID_RE.search(output):
        logger.debug("Extracted new task UUID directly from output: %s", match.group(0))
        return match.group(0)

    if match := _CREATED_ID_RE.search(output):
        task_id = match.group(1)
        created = _export_tasks([task_id], run)
        if created:
            return created[0].uuid
        logger.warning("Could not get UUID for task ID %s after creation.", task_id)

    logger.warning("Could not parse new task ID or UUID from 'add' output. Falling back to description match.")
    matches = _export_tasks([f"description:{_quote(description)}"], run)
    if matches:
        if len(matches) > 1:
            logger.warning("%d tasks share the description %r; using the first.", len(matches), description)
        return matches[0].uuid

    raise PostConditionError(
        "Failed to determine UUID of the newly created task.",
        f"Task might have been added, but its UUID could not be retrieved. Taskwarrior output: {output}",
    )


@_handler(AddTaskInput)
def add_task(params: AddTaskInput, run: CommandRunner) -> TaskModel:
    """Create a task and return it as re-read from Taskwarrior."""
    args = ["add", _quote(params.description)]

    if params.due:
        args.append(f"due:{_quote(params.due)}")
    if params.priority:
        args.append(f"priority:{params.priority.value}")
    if params.project:
        args.append(f"project:{_quote(params.project)}")
    args.extend(_tag_filters(params.tags))

    output = run(args)
    uuid = _recover_created_uuid(params.description, output, run)
    return _get_task_by_uuid(uuid, run)


@_handler(ModifyTaskInput)
def modify_task(params: ModifyTaskInput, run: CommandRunner) -> TaskModel:
    """Apply field changes. A request without changes returns the task untouched."""
    existing = _get_task_by_uuid(params.uuid, run)

    changes: list[str] = []
    if params.description is not None:
        changes.append(f"description:{_quote(params.description)}")
    if params.status is not None:
        changes.append(f"status:{params.status.value}")
    if params.due is not None:
        changes.append(f"due:{_quote(params.due)}" if params.due else "due:")
    if params.priority is not None:
        changes.append(f"priority:{params.priority.value}" if params.priority else "priority:")
    if params.project is not None:
        changes.append(f"project:{_quote(params.project)}" if params.project else "project:")
    changes.extend(_tag_filters(params.add_tags, "+"))
    changes.extend(_tag_filters(params.remove_tags, "-"))

    if not changes:
        logger.info("modify_task called for '%s' without modifications; returning task unchanged.", params.uuid)
        return existing

    run([params.uuid, "modify", *changes])
    return _get_task_by_uuid(params.uuid, run)


@_handler(CompleteTaskInput)
def complete_task(params: CompleteTaskInput, run: CommandRunner) -> TaskModel:
    """Mark a task done. Already completed tasks are returned without a command."""
    task = _get_task_by_uuid(params.uuid, run)
    if task.status == TaskStatus.COMPLETED:
        logger.info("Task '%s' is already completed.", params.uuid)
        return task

    run([params.uuid, "done"])

    updated = _get_task_by_uuid(params.uuid, run)
    if updated.status != TaskStatus.COMPLETED:
        raise PostConditionError(
            f"Task with UUID '{params.uuid}' was attempted to be marked done, "
            f"but its status is still '{updated.status.value}'.",
            "This might indicate an issue with Taskwarrior hooks or a race condition.",
        )
    return updated


@_handler(StartTaskInput)
def start_task(params: StartTaskInput, run: CommandRunner) -> TaskModel:
    """Mark a task as actively worked on."""
    task = _get_task_by_uuid(params.uuid, run)
    if task.start:
        logger.info("Task '%s' is already started (start date: %s); starting again.", params.uuid, task.start)

    run([params.uuid, "start"])

    updated = _get_task_by_uuid(params.uuid, run)
    if not updated.start:
        raise PostConditionError(
            f"Task with UUID '{params.uuid}' was attempted to be started, but it does not have a start time.",
            "The start command might have failed silently or Taskwarrior state is inconsistent.",
        )
    return updated


@_handler(StopTaskInput)
def stop_task(params: StopTaskInput, run: CommandRunner) -> TaskModel:
    """Clear a task's active marker."""
    task = _get_task_by_uuid(params.uuid, run)
    if not task.start:
        logger.info("Task '%s' is not started. Stop command will be a no-op.", params.uuid)

    run([params.uuid, "stop"])

    updated = _get_task_by_uuid(params.uuid, run)
    if updated.start:
        logger.warning(
            "Task '%s' still has a start time after stop command (status: %s).",
            params.uuid,
            updated.status.value,
        )
    return updated


def _mentions_confirmation(*texts: str | None) -> bool:
    combined = " ".join(t for t in texts if t).lower()
    return any(pattern in combined for pattern in _CONFIRMATION_PATTERNS)


def _confirmation_required(uuid: str, detail: str | None) -> ConfirmationRequiredError:
    return ConfirmationRequiredError(
        f"Deletion of task '{uuid}' requires confirmation. Use skip_confirmation=true or ensure your "
        f"Taskwarrior configuration allows deletion without confirmation.",
        detail,
    )


@_handler(DeleteTaskInput)
def delete_task(params: DeleteTaskInput, run: CommandRunner) -> DeleteConfirmation:
    """Delete a task and confirm it is gone."""
    _get_task_by_uuid(params.uuid, run)

    args = [params.uuid, "delete"]
    if params.skip_confirmation:
        args.insert(0, "rc.confirmation=off")

    try:
        output = run(args)
    except CommandExecutionError as e:
        if not params.skip_confirmation and _mentions_confirmation(e.message, e.detail):
            raise _confirmation_required(params.uuid, e.detail or e.message) from e
        raise

    confirmation = DeleteConfirmation(
        message=f"Task '{params.uuid}' deleted successfully.",
        deleted_uuid=params.uuid,
    )
    try:
        remaining = _get_task_by_uuid(params.uuid, run)
    except TaskNotFoundError:
        return confirmation

    # Taskwarrior keeps deleted tasks exportable with status "deleted".
    if remaining.status == TaskStatus.DELETED:
        return confirmation

    if not params.skip_confirmation and _mentions_confirmation(output):
        raise _confirmation_required(params.uuid, output)
    raise PostConditionError(
        f"Task with UUID '{params.uuid}' was attempted to be deleted, but it still exists.",
        f"Current status: {remaining.status.value}",
    )


@_handler(AnnotateTaskInput)
def annotate_task(params: AnnotateTaskInput, run: CommandRunner) -> TaskModel:
    """Append an annotation and return the updated task."""
    _get_task_by_uuid(params.uuid, run)

    run([params.uuid, "annotate", _quote(params.annotation)])

    updated = _get_task_by_uuid(params.uuid, run)
    if not updated.has_annotation(params.annotation):
        raise PostConditionError(
            f"Annotation was not found on task '{params.uuid}' after annotate command.",
            "Annotation might have been altered by Taskwarrior or a hook.",
        )
    return updated


@_handler(DenotateTaskInput)
def denotate_task(params: DenotateTaskInput, run: CommandRunner) -> TaskModel:
    """Remove the annotation whose text matches exactly."""
    task = _get_task_by_uuid(params.uuid, run)
    if not task.has_annotation(params.annotation):
        raise AnnotationNotFoundError(params.uuid, params.annotation)

    run([params.uuid, "denotate", _quote(params.annotation)])
    return _get_task_by_uuid(params.uuid, run)
