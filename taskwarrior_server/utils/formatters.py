"""Formatting utilities for operation outcomes."""

import json

from taskwarrior_server.enums import ResponseFormat
from taskwarrior_server.models.outcomes import DeleteConfirmation, ErrorOutcome, Outcome
from taskwarrior_server.models.task import TaskModel


def _format_task_concise(task: TaskModel) -> str:
    """
    Format a single task in concise format for token efficiency.

    Output: "a1b2c3d4 #5: Description (H, due:2024-12-31, proj:work)"
    """
    desc = task.description[:50] if task.description else "No description"

    meta = []
    if task.status.value != "pending":
        meta.append(task.status.value)
    if task.priority:
        meta.append(task.priority.value)
    if task.due:
        meta.append(f"due:{task.due[:8]}")
    if task.project:
        meta.append(f"proj:{task.project}")
    if task.start:
        meta.append("active")

    line = f"{task.uuid[:8]} #{task.id}: {desc}"
    if meta:
        return f"{line} ({', '.join(meta)})"
    return line


def _format_tasks_concise(tasks: list[TaskModel], title: str | None = None) -> str:
    """
    Format a list of tasks in concise format.

    Output:
    2 task(s) | Tasks
    a1b2c3d4 #1: Task one (H, due:20241231)
    e5f6a7b8 #2: Task two (M)
    """
    if not tasks:
        return "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{header} | {title}"

    return "\n".join([header, *(_format_task_concise(task) for task in tasks)])


def _format_task_markdown(task: TaskModel) -> str:
    """Format a single task as markdown."""
    lines = []

    status_icon = {"pending": "[ ]", "completed": "[x]", "deleted": "[-]", "waiting": "[~]", "recurring": "[r]"}
    icon = status_icon.get(task.status.value, "")

    lines.append(f"### {icon} [{task.id}] {task.description or 'No description'}")
    lines.append(f"`{task.uuid}`")

    details = [f"**Status**: {task.status.value}"]
    if task.project:
        details.append(f"**Project**: {task.project}")
    if task.priority:
        priority_map = {"H": "High", "M": "Medium", "L": "Low"}
        details.append(f"**Priority**: {priority_map[task.priority.value]}")
    if task.due:
        details.append(f"**Due**: {task.due}")
    if task.start:
        details.append(f"**Started**: {task.start}")
    if task.tags:
        details.append(f"**Tags**: {', '.join(task.tags)}")
    lines.append(" | ".join(details))

    if task.annotations:
        lines.append("**Notes:**")
        for ann in task.annotations:
            lines.append(f"  - [{ann.entry[:8]}] {ann.description}")

    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[TaskModel], title: str = "Tasks") -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]
    for task in tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")

    return "\n".join(lines)


def _format_error(error: ErrorOutcome, response_format: ResponseFormat) -> str:
    if response_format == ResponseFormat.JSON:
        return json.dumps({"error": error.model_dump(mode="json")}, indent=2)
    text = f"Error ({error.kind.value}): {error.message}"
    if error.detail:
        text += f"\nDetails: {error.detail}"
    return text


def _format_outcome(
    outcome: Outcome,
    response_format: ResponseFormat = ResponseFormat.JSON,
    title: str = "Tasks",
) -> str:
    """
    Render an operation outcome as tool response text.

    Args:
        outcome: Result of an operation handler
        response_format: json (default), markdown or concise
        title: Heading used for task lists in markdown/concise output

    Returns:
        Text to hand back to the MCP client
    """
    if isinstance(outcome, ErrorOutcome):
        return _format_error(outcome, response_format)

    if isinstance(outcome, DeleteConfirmation):
        if response_format == ResponseFormat.JSON:
            return json.dumps(outcome.model_dump(mode="json"), indent=2)
        return outcome.message

    if isinstance(outcome, list):
        if response_format == ResponseFormat.JSON:
            return json.dumps(
                {"count": len(outcome), "tasks": [t.model_dump(mode="json", exclude_none=True) for t in outcome]},
                indent=2,
            )
        if response_format == ResponseFormat.CONCISE:
            return _format_tasks_concise(outcome, title)
        return _format_tasks_markdown(outcome, title)

    if response_format == ResponseFormat.JSON:
        return json.dumps(outcome.model_dump(mode="json", exclude_none=True), indent=2)
    if response_format == ResponseFormat.CONCISE:
        return _format_task_concise(outcome)
    return _format_task_markdown(outcome)
