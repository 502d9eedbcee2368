"""Task record and the on-disk task document.

The document is a JSON object::

    {"tasks": [{"id": 1, "title": "Buy milk", "completed": false}]}

with an optional integer ``next_id`` written under the monotonic id policy.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from tasklist_cli.errors import TaskParseError


# Ids are unsigned 32-bit values
MAX_TASK_ID = 2**32 - 1


class IdPolicy(str, Enum):
    """How new task ids are chosen."""

    COUNT = "count"  # len(tasks) + 1, ids can repeat after a delete
    MONOTONIC = "monotonic"  # persisted counter, never reused


@dataclass
class Task:
    """A single to-do entry."""

    id: int
    title: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Task":
        """Build a task from a decoded JSON record.

        Raises:
            TaskParseError: If a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise TaskParseError(f"task record must be an object, got {type(data).__name__}")
        for key in ("id", "title", "completed"):
            if key not in data:
                raise TaskParseError(f"task record is missing '{key}'")

        task_id = data["id"]
        # bool is an int subclass; JSON true must not pass as an id
        if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id < 0:
            raise TaskParseError(f"task id must be a non-negative integer, got {task_id!r}")
        if task_id > MAX_TASK_ID:
            raise TaskParseError(f"task id {task_id} exceeds the maximum of {MAX_TASK_ID}")
        title = data["title"]
        if not isinstance(title, str):
            raise TaskParseError(f"task {task_id}: title must be a string")
        try:
            title.encode("utf-8")
        except UnicodeEncodeError as e:
            raise TaskParseError(f"task {task_id}: title is not valid UTF-8 text") from e
        if not isinstance(data["completed"], bool):
            raise TaskParseError(f"task {task_id}: completed must be a boolean")

        return cls(id=task_id, title=title, completed=data["completed"])


def encode_document(tasks: list[Task], next_id: int | None = None) -> dict[str, Any]:
    """Encode tasks into the document written to disk."""
    data: dict[str, Any] = {"tasks": [task.to_dict() for task in tasks]}
    if next_id is not None:
        data["next_id"] = next_id
    return data


def decode_document(data: Any) -> tuple[list[Task], int | None]:
    """Decode a parsed JSON document into tasks and the stored id counter.

    Raises:
        TaskParseError: If the document does not have the expected shape.
    """
    if not isinstance(data, dict):
        raise TaskParseError("task file must contain a JSON object")
    if "tasks" not in data:
        raise TaskParseError("task file is missing 'tasks'")
    records = data["tasks"]
    if not isinstance(records, list):
        raise TaskParseError("'tasks' must be a list")

    next_id = data.get("next_id")
    if next_id is not None and (not isinstance(next_id, int) or isinstance(next_id, bool)):
        raise TaskParseError(f"'next_id' must be an integer, got {next_id!r}")
    if next_id is not None and next_id > MAX_TASK_ID + 1:
        raise TaskParseError(f"'next_id' {next_id} exceeds the maximum of {MAX_TASK_ID + 1}")

    return [Task.from_dict(record) for record in records], next_id
