"""Enums for Taskwarrior Server."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # Minimal output for chaining
    MARKDOWN = "markdown"  # Human-readable
    JSON = "json"  # Machine-readable with all fields (default)


class TaskStatus(str, Enum):
    """Task status as reported by Taskwarrior."""

    PENDING = "pending"
    COMPLETED = "completed"
    DELETED = "deleted"
    WAITING = "waiting"
    RECURRING = "recurring"


class Priority(str, Enum):
    """Task priority levels."""

    HIGH = "H"
    MEDIUM = "M"
    LOW = "L"


class ErrorKind(str, Enum):
    """Classification carried by every error outcome."""

    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    ANNOTATION_NOT_FOUND = "annotation_not_found"
    CONFIRMATION_REQUIRED = "confirmation_required"
    INVALID_IDENTIFIER = "invalid_identifier"
    EXECUTION_FAILURE = "execution_failure"
    POST_CONDITION_MISMATCH = "post_condition_mismatch"
