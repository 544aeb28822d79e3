"""Outcome models returned by every operation handler."""

from pydantic import BaseModel

from taskwarrior_server.enums import ErrorKind
from taskwarrior_server.models.task import TaskModel


class ErrorOutcome(BaseModel):
    """A classified failure: kind, human-readable message and optional detail."""

    kind: ErrorKind
    message: str
    detail: str | None = None


class DeleteConfirmation(BaseModel):
    """Success payload of a delete operation."""

    message: str
    deleted_uuid: str


Outcome = TaskModel | list[TaskModel] | DeleteConfirmation | ErrorOutcome


def is_error(outcome: Outcome) -> bool:
    """Return True if the outcome is an error."""
    return isinstance(outcome, ErrorOutcome)
