"""MCP tool definitions for Taskwarrior."""

# Import all tools to register them with the MCP server
from taskwarrior_server.tools.core import (
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

__all__ = [
    # Query tools
    "taskwarrior_list",
    "taskwarrior_next",
    "taskwarrior_get",
    # Mutation tools
    "taskwarrior_add",
    "taskwarrior_modify",
    "taskwarrior_done",
    "taskwarrior_start",
    "taskwarrior_stop",
    "taskwarrior_delete",
    "taskwarrior_annotate",
    "taskwarrior_denotate",
]
