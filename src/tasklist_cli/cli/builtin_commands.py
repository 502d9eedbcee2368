"""Built-in menu commands: one per task store operation."""

from typing import TYPE_CHECKING

from rich.text import Text

from tasklist_cli.cli.commands import Command

if TYPE_CHECKING:
    from tasklist_cli.cli.app import TaskListApp


class AddTaskCommand(Command):
    """Prompt for a title and add a task."""

    def __init__(self) -> None:
        super().__init__(key="1", description="Add a task", menu_label=lambda m: m.menu_add)

    def execute(self, app: "TaskListApp") -> None:
        title = app.ask(app.messages.prompt_title)
        app.store.add(title.strip())


class ListTasksCommand(Command):
    """Show every task with its status."""

    def __init__(self) -> None:
        super().__init__(key="2", description="Show tasks", menu_label=lambda m: m.menu_list)

    def execute(self, app: "TaskListApp") -> None:
        messages = app.messages
        for task in app.store:
            label = messages.status_label(task.completed)
            line = Text.assemble(
                f"[{task.id}] ",
                task.title,
                " - ",
                (label, "green" if task.completed else "yellow"),
            )
            app.console.print(line, emoji=False, highlight=False, soft_wrap=True)


class DeleteTaskCommand(Command):
    """Prompt for an id and delete that task."""

    def __init__(self) -> None:
        super().__init__(key="3", description="Delete a task", menu_label=lambda m: m.menu_delete)

    def execute(self, app: "TaskListApp") -> None:
        task_id = app.ask_task_id(app.messages.prompt_delete_id)
        app.store.delete(task_id)


class EditTaskCommand(Command):
    """Prompt for an id and a new title, then rename the task."""

    def __init__(self) -> None:
        super().__init__(key="4", description="Edit a task", menu_label=lambda m: m.menu_edit)

    def execute(self, app: "TaskListApp") -> None:
        task_id = app.ask_task_id(app.messages.prompt_edit_id)
        new_title = app.ask(app.messages.prompt_new_title)
        app.store.edit(task_id, new_title.strip())


class CompleteTaskCommand(Command):
    """Prompt for an id and mark that task as completed."""

    def __init__(self) -> None:
        super().__init__(
            key="5",
            description="Mark a task as completed",
            menu_label=lambda m: m.menu_complete,
        )

    def execute(self, app: "TaskListApp") -> None:
        task_id = app.ask_task_id(app.messages.prompt_complete_id)
        app.store.complete(task_id)


class SaveAndExitCommand(Command):
    """Write the task file and leave the menu loop."""

    def __init__(self) -> None:
        super().__init__(key="6", description="Save and exit", menu_label=lambda m: m.menu_exit)

    def execute(self, app: "TaskListApp") -> None:
        app.save()
        app.say(app.messages.goodbye)
        app.stop()


BUILTIN_COMMANDS: tuple[type[Command], ...] = (
    AddTaskCommand,
    ListTasksCommand,
    DeleteTaskCommand,
    EditTaskCommand,
    CompleteTaskCommand,
    SaveAndExitCommand,
)
