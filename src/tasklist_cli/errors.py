"""Error taxonomy for task storage.

NotFound is deliberately absent: a missing task id is reported to the user
and treated as a no-op, never raised.
"""

from pathlib import Path


class TaskStoreError(Exception):
    """Base class for failures while loading or saving the task file."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class StorageError(TaskStoreError):
    """The task file could not be opened, read or written."""

    pass


class SerializationError(TaskStoreError):
    """The task list could not be encoded."""

    pass


class TaskParseError(SerializationError):
    """The task file does not contain a valid task document."""

    pass
