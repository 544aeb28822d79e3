"""Parser helpers for Taskwarrior export output."""

import json
import logging
from typing import Any

from pydantic import ValidationError

from taskwarrior_server.models.task import TaskModel

logger = logging.getLogger(__name__)

# Literal sentences Taskwarrior prints instead of JSON when nothing matched.
NO_RECORDS_SENTINELS = frozenset(
    {
        "No matches.",
        "No tasks found.",
        "No tasks.",
        "No pending tasks.",
    }
)


def _parse_task(task_dict: dict[str, Any]) -> TaskModel:
    """
    Parse a task dictionary into a TaskModel.

    Args:
        task_dict: Dictionary from Taskwarrior JSON export

    Returns:
        TaskModel instance with validated data

    Raises:
        pydantic.ValidationError: If the dictionary does not match the task schema
    """
    return TaskModel.model_validate(task_dict)


def _validate_candidates(candidates: list[Any]) -> list[TaskModel]:
    tasks: list[TaskModel] = []
    for index, candidate in enumerate(candidates):
        if not isinstance(candidate, dict):
            logger.warning("Skipping non-object export record #%d: %r", index, candidate)
            continue
        try:
            tasks.append(_parse_task(candidate))
        except ValidationError as e:
            logger.warning(
                "Skipping export record #%d (uuid=%s) that failed validation: %s",
                index,
                candidate.get("uuid", "?"),
                e,
            )
    return tasks


def _parse_task_output(raw: str) -> list[TaskModel]:
    """
    Normalize raw `task ... export` output into validated TaskModel records.

    Accepts newline-delimited JSON objects (one per line) as well as the JSON
    array that newer Taskwarrior releases emit by default. Lines that are not
    valid JSON and objects that fail validation are logged and skipped; the
    rest of the batch is kept in its original order. Empty output and the
    "no records" sentences yield an empty list. Never raises.

    Args:
        raw: Text captured from the task command

    Returns:
        List of TaskModel instances, possibly empty
    """
    text = raw.strip() if raw else ""
    if not text or text in NO_RECORDS_SENTINELS:
        return []

    try:
        document = json.loads(text)
    except json.JSONDecodeError:
        pass
    else:
        if isinstance(document, list):
            return _validate_candidates(document)
        if isinstance(document, dict):
            return _validate_candidates([document])

    candidates: list[Any] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        # Array layout: bare brackets on their own lines, records end with a comma.
        if line in ("", "[", "]"):
            continue
        if line.endswith(","):
            line = line[:-1]
        try:
            candidates.append(json.loads(line))
        except json.JSONDecodeError as e:
            logger.warning("Skipping unparseable export line %d: %s (%r)", lineno, e, line[:200])

    tasks = _validate_candidates(candidates)
    if not tasks:
        logger.warning("No valid task records in non-empty export output; treating as empty result")
    return tasks
