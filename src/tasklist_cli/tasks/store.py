"""In-memory task store backed by a single JSON file.

The store is loaded once at startup, mutated in place by the menu commands,
and written back as a whole at exit. Operations report their outcome through
an optional ``notify`` callback so the caller decides where feedback goes.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path

from tasklist_cli.errors import SerializationError, StorageError, TaskParseError
from tasklist_cli.logging import Loggers
from tasklist_cli.messages import ENGLISH, Messages
from tasklist_cli.persistence import atomic_write_json, write_json
from tasklist_cli.tasks.models import IdPolicy, Task, decode_document, encode_document

logger = Loggers.store()

Notifier = Callable[[str], None]


class TaskStore:
    """Ordered collection of tasks with whole-file persistence.

    Insertion order is display order. Under the default ``IdPolicy.COUNT``
    a new task gets ``len(tasks) + 1``, so after a delete a new task may
    share its id with a surviving one; edit, complete and delete then act on
    the first match.

    Example:
        >>> store = TaskStore.load(Path("tasks.json"), notify=print)
        >>> task = store.add("Buy milk")
        Task added.
        >>> store.complete(task.id)
        Task marked as completed.
        True
        >>> store.save(Path("tasks.json"))
        Tasks saved.
    """

    def __init__(
        self,
        tasks: list[Task] | None = None,
        *,
        id_policy: IdPolicy = IdPolicy.COUNT,
        next_id: int | None = None,
        notify: Notifier | None = None,
        messages: Messages | None = None,
    ) -> None:
        self._tasks: list[Task] = list(tasks or [])
        self._id_policy = IdPolicy(id_policy)
        self._notify = notify
        self._messages = messages or ENGLISH

        highest = max((t.id for t in self._tasks), default=0)
        self._next_id = max(next_id or 1, highest + 1)

    # ---- feedback ----

    def _emit(self, message: str) -> None:
        if self._notify is not None:
            self._notify(message)

    @property
    def messages(self) -> Messages:
        return self._messages

    @property
    def id_policy(self) -> IdPolicy:
        return self._id_policy

    @property
    def next_id(self) -> int:
        """The id the monotonic policy hands out next."""
        return self._next_id

    # ---- queries ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def list(self) -> list[Task]:
        """Return the tasks in insertion order.

        The returned list is a snapshot; mutating it does not touch the store.
        """
        return list(self._tasks)

    def get(self, task_id: int) -> Task | None:
        """Get the first task with the given id."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def is_empty(self) -> bool:
        return not self._tasks

    def render_lines(self) -> list[str]:
        """Render each task as ``[id] title - status``."""
        return [
            f"[{task.id}] {task.title} - {self._messages.status_label(task.completed)}"
            for task in self._tasks
        ]

    # ---- mutations ----

    def _assign_id(self) -> int:
        if self._id_policy is IdPolicy.MONOTONIC:
            task_id = self._next_id
            self._next_id += 1
            return task_id
        return len(self._tasks) + 1

    def add(self, title: str) -> Task:
        """Append a new, not completed task.

        Args:
            title: Task title; may be empty.

        Returns:
            The created task.
        """
        task = Task(id=self._assign_id(), title=title)
        self._tasks.append(task)
        logger.debug("task_added", task_id=task.id, policy=self._id_policy.value)
        self._emit(self._messages.task_added)
        return task

    def delete(self, task_id: int) -> bool:
        """Remove the first task with the given id.

        A missing id is not an error; the confirmation is emitted either way.

        Returns:
            True if a task was removed.
        """
        removed = False
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[index]
                removed = True
                break
        logger.debug("task_deleted", task_id=task_id, removed=removed)
        self._emit(self._messages.task_deleted)
        return removed

    def edit(self, task_id: int, new_title: str) -> bool:
        """Replace the title of a task, leaving its id and status alone.

        Returns:
            True if the task exists, False if it was not found.
        """
        task = self.get(task_id)
        if task is None:
            logger.debug("task_not_found", task_id=task_id, operation="edit")
            self._emit(self._messages.edit_not_found)
            return False
        task.title = new_title
        logger.debug("task_edited", task_id=task_id)
        self._emit(self._messages.task_edited)
        return True

    def complete(self, task_id: int) -> bool:
        """Mark a task as completed. Completing it again is harmless.

        Returns:
            True if the task exists, False if it was not found.
        """
        task = self.get(task_id)
        if task is None:
            logger.debug("task_not_found", task_id=task_id, operation="complete")
            self._emit(self._messages.complete_not_found)
            return False
        task.completed = True
        logger.debug("task_completed", task_id=task_id)
        self._emit(self._messages.task_completed)
        return True

    # ---- persistence ----

    def to_document(self) -> dict:
        next_id = self._next_id if self._id_policy is IdPolicy.MONOTONIC else None
        return encode_document(self._tasks, next_id)

    def save(self, path: Path, *, atomic: bool = True) -> None:
        """Overwrite the file at ``path`` with the whole store.

        Args:
            path: Destination file; parent directories are created.
            atomic: Write a temporary file and rename it into place instead
                of truncating the destination.

        Raises:
            StorageError: If the file cannot be written.
            SerializationError: If the tasks cannot be encoded as JSON.
        """
        path = Path(path)
        writer = atomic_write_json if atomic else write_json
        try:
            writer(path, self.to_document())
        except OSError as e:
            raise StorageError(f"Cannot write task file {path}: {e}", path) from e
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot encode tasks for {path}: {e}", path) from e

        logger.debug("tasks_saved", path=str(path), count=len(self._tasks), atomic=atomic)
        self._emit(self._messages.tasks_saved)

    @classmethod
    def load(
        cls,
        path: Path,
        *,
        id_policy: IdPolicy = IdPolicy.COUNT,
        notify: Notifier | None = None,
        messages: Messages | None = None,
    ) -> "TaskStore":
        """Load a store from ``path``.

        A missing file yields an empty store.

        Raises:
            StorageError: If the file exists but cannot be read.
            TaskParseError: If the file is not a valid task document.
        """
        path = Path(path)
        if not path.exists():
            logger.debug("tasks_file_absent", path=str(path))
            return cls(id_policy=id_policy, notify=notify, messages=messages)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise TaskParseError(f"Task file {path} is not valid JSON: {e}", path) from e
        except UnicodeDecodeError as e:
            raise TaskParseError(f"Task file {path} is not UTF-8 text: {e}", path) from e
        except (ValueError, RecursionError) as e:
            # Oversized integer literals and excessive nesting
            raise TaskParseError(f"Task file {path} cannot be decoded: {e}", path) from e
        except OSError as e:
            raise StorageError(f"Cannot read task file {path}: {e}", path) from e

        try:
            tasks, next_id = decode_document(data)
        except TaskParseError as e:
            raise TaskParseError(f"Invalid task file {path}: {e}", path) from e

        logger.debug("tasks_loaded", path=str(path), count=len(tasks))
        return cls(
            tasks,
            id_policy=id_policy,
            next_id=next_id,
            notify=notify,
            messages=messages,
        )
