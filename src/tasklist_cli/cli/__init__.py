"""Numbered-menu command line front end."""

from tasklist_cli.cli.app import TaskListApp, main
from tasklist_cli.cli.commands import (
    Command,
    CommandRegistry,
    ParsedTaskId,
    SENTINEL_TASK_ID,
    parse_task_id,
)

__all__ = [
    "TaskListApp",
    "main",
    "Command",
    "CommandRegistry",
    "ParsedTaskId",
    "SENTINEL_TASK_ID",
    "parse_task_id",
]
