"""CLI utilities for Taskwarrior interaction."""

import logging
import shlex
import subprocess
from collections.abc import Callable

from taskwarrior_server.config import get_config
from taskwarrior_server.errors import CommandExecutionError, InvalidIdentifierError, TaskNotFoundError
from taskwarrior_server.models.task import TaskModel, is_valid_uuid
from taskwarrior_server.utils.parsers import _parse_task_output

logger = logging.getLogger(__name__)

# Takes shell-ready tokens (without the 'task' prefix), returns captured stdout.
CommandRunner = Callable[[list[str]], str]

# Some Taskwarrior versions exit non-zero when a filter matches nothing.
BENIGN_EMPTY_PATTERNS = ("no matches", "no tasks specified", "no tasks found")


def _is_benign_empty(text: str) -> bool:
    lowered = text.lower()
    return any(pattern in lowered for pattern in BENIGN_EMPTY_PATTERNS)


def _quote(value: str) -> str:
    """Shell-quote a free-text value for embedding in a command token."""
    return shlex.quote(value)


def _run_task_command(args: list[str]) -> str:
    """
    Execute a Taskwarrior command and return its trimmed standard output.

    The tokens must already be shell-quoted; they are joined after the
    configured task executable and run through the shell. The child never
    sees the server's stdin.

    Args:
        args: List of command tokens (without 'task' prefix)

    Returns:
        Captured stdout, or the captured "no matches" text when Taskwarrior
        reports an empty result through a non-zero exit

    Raises:
        CommandExecutionError: If the command could not run or failed for any other reason
    """
    config = get_config()
    command = " ".join([shlex.quote(config.task_command), *args])
    logger.debug("Executing: %s", command)

    try:
        result = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            text=True,
            stdin=subprocess.DEVNULL,
            timeout=config.timeout,
        )
    except subprocess.TimeoutExpired as e:
        logger.error("Task command timed out after %s seconds: %s", e.timeout, command)
        raise CommandExecutionError(f"Command timed out after {e.timeout} seconds") from e
    except OSError as e:
        logger.error("Could not execute task command %s: %s", command, e)
        raise CommandExecutionError(f"Failed to execute Taskwarrior: {e}") from e

    stdout = (result.stdout or "").strip()
    if result.returncode == 0:
        return stdout

    stderr = (result.stderr or "").strip()
    for captured in (stderr, stdout):
        if captured and _is_benign_empty(captured):
            logger.debug("Treating exit status %d as empty result: %s", result.returncode, captured)
            return captured

    logger.error("Task command failed (exit %d): %s; stderr: %s", result.returncode, command, stderr or "<empty>")
    raise CommandExecutionError(
        f"Command '{command}' returned non-zero exit status {result.returncode}.",
        stderr or stdout or None,
    )


def _export_tasks(filters: list[str], runner: CommandRunner | None = None) -> list[TaskModel]:
    """
    Export tasks matching the filter tokens as validated TaskModel records.

    Args:
        filters: Filter tokens, already shell-quoted
        runner: Command runner to use instead of the real task executable

    Returns:
        List of TaskModel instances in export order, possibly empty
    """
    run = runner or _run_task_command
    return _parse_task_output(run([*filters, "export"]))


def _get_task_by_uuid(uuid: str, runner: CommandRunner | None = None) -> TaskModel:
    """
    Fetch exactly one task by UUID.

    Raises:
        InvalidIdentifierError: If uuid is not a canonical UUID (nothing is executed)
        TaskNotFoundError: If Taskwarrior returns no record for the UUID
    """
    if not is_valid_uuid(uuid):
        raise InvalidIdentifierError(uuid)

    tasks = _export_tasks([uuid], runner)
    if not tasks:
        raise TaskNotFoundError(uuid)
    if len(tasks) > 1:
        logger.warning("Multiple tasks found for UUID '%s'. Returning the first one.", uuid)
    return tasks[0]
