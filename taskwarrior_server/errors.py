"""Exception hierarchy for Taskwarrior Server.

Every exception raised below the handler boundary derives from
``TaskwarriorError`` and is pinned to one ``ErrorKind``. Handlers tell
failures apart by type, never by inspecting message text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from taskwarrior_server.enums import ErrorKind

if TYPE_CHECKING:
    from taskwarrior_server.models.outcomes import ErrorOutcome


class TaskwarriorError(Exception):
    """Base class for classified failures."""

    kind: ErrorKind = ErrorKind.EXECUTION_FAILURE

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_outcome(self) -> ErrorOutcome:
        """Convert the exception into the uniform error outcome."""
        from taskwarrior_server.models.outcomes import ErrorOutcome

        return ErrorOutcome(kind=self.kind, message=self.message, detail=self.detail)


class RequestValidationError(TaskwarriorError):
    """An operation request failed its schema constraints."""

    kind = ErrorKind.VALIDATION_ERROR


class TaskNotFoundError(TaskwarriorError):
    """An identifier-based fetch returned no records."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, uuid: str, detail: str | None = None) -> None:
        super().__init__(f"Task with UUID '{uuid}' not found.", detail)
        self.uuid = uuid


class AnnotationNotFoundError(TaskwarriorError):
    """No annotation on the task matches the requested text exactly."""

    kind = ErrorKind.ANNOTATION_NOT_FOUND

    def __init__(self, uuid: str, annotation: str) -> None:
        super().__init__(
            f'Annotation "{annotation}" not found on task \'{uuid}\'.',
            "No changes made as the specified annotation does not exist on the task.",
        )
        self.uuid = uuid
        self.annotation = annotation


class ConfirmationRequiredError(TaskwarriorError):
    """Taskwarrior refused a mutation pending interactive confirmation."""

    kind = ErrorKind.CONFIRMATION_REQUIRED


class InvalidIdentifierError(TaskwarriorError):
    """The identifier is not a canonical UUID."""

    kind = ErrorKind.INVALID_IDENTIFIER

    def __init__(self, identifier: str) -> None:
        super().__init__("Invalid UUID format provided.", f"Got: {identifier!r}")
        self.identifier = identifier


class CommandExecutionError(TaskwarriorError):
    """The task command terminated abnormally."""

    kind = ErrorKind.EXECUTION_FAILURE


class PostConditionError(TaskwarriorError):
    """A mutation ran but the re-read record does not reflect it."""

    kind = ErrorKind.POST_CONDITION_MISMATCH
