"""Tasklist CLI - a single-user task list driven by a numbered text menu.

This package provides:

- TaskStore: ordered in-memory tasks with whole-file JSON persistence
- TaskListApp: the interactive menu loop over a TaskStore
- Layered settings (env vars, JSON config files, .env)
- Structured logging via structlog
"""

from tasklist_cli.cli.app import TaskListApp, main
from tasklist_cli.config import TaskListSettings, get_settings, reload_settings, set_settings
from tasklist_cli.errors import (
    SerializationError,
    StorageError,
    TaskParseError,
    TaskStoreError,
)
from tasklist_cli.messages import Messages, get_messages
from tasklist_cli.tasks import IdPolicy, Task, TaskStore

__version__ = "0.1.0"

__all__ = [
    "TaskListApp",
    "main",
    "TaskListSettings",
    "get_settings",
    "reload_settings",
    "set_settings",
    "SerializationError",
    "StorageError",
    "TaskParseError",
    "TaskStoreError",
    "Messages",
    "get_messages",
    "IdPolicy",
    "Task",
    "TaskStore",
]
