"""Utility functions for Taskwarrior Server."""

from taskwarrior_server.utils.cli import CommandRunner, _export_tasks, _get_task_by_uuid, _run_task_command
from taskwarrior_server.utils.formatters import (
    _format_outcome,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)
from taskwarrior_server.utils.parsers import _parse_task, _parse_task_output

__all__ = [
    "CommandRunner",
    "_run_task_command",
    "_export_tasks",
    "_get_task_by_uuid",
    "_parse_task",
    "_parse_task_output",
    "_format_outcome",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
]
