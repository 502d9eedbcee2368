"""Task records and the file-backed task store.

Example:
    >>> store = TaskStore.load(Path("tasks.json"))
    >>> task = store.add("Buy milk")
    >>> store.render_lines()
    ['[1] Buy milk - Not completed']
"""

from tasklist_cli.tasks.models import IdPolicy, Task
from tasklist_cli.tasks.store import TaskStore

__all__ = ["IdPolicy", "Task", "TaskStore"]
