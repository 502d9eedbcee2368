"""Interactive menu loop for the task list.

This module provides the application that:
1. Shows the numbered menu and reads one command per line
2. Dispatches the command to the task store through the command registry
3. Saves the store on exit (command 6 or end of input)
"""

from __future__ import annotations

import sys
from functools import partial
from typing import TYPE_CHECKING, TextIO

from pydantic import ValidationError
from rich.console import Console

from tasklist_cli.cli.builtin_commands import BUILTIN_COMMANDS
from tasklist_cli.cli.commands import CommandRegistry, parse_task_id
from tasklist_cli.config import TaskListSettings, get_settings
from tasklist_cli.errors import TaskStoreError
from tasklist_cli.logging import Loggers, bind_context, configure_logging
from tasklist_cli.messages import Messages, get_messages
from tasklist_cli.tasks.store import TaskStore

if TYPE_CHECKING:
    from tasklist_cli.cli.commands import Command

logger = Loggers.cli()

EXIT_OK = 0
EXIT_STORAGE_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


def print_plain(console: Console, text: str) -> None:
    """Print user text verbatim: no markup, emoji codes, highlighting or wrapping."""
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


class TaskListApp:
    """Numbered-menu front end over a TaskStore.

    The store is owned by the caller and handed in; the app only drives it.
    Input is read line by line from ``stdin`` so the loop can be scripted.
    """

    def __init__(
        self,
        store: TaskStore,
        settings: TaskListSettings | None = None,
        *,
        console: Console | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        self._store = store
        self._settings = settings or get_settings()
        self._console = console or Console(highlight=False)
        self._stdin = stdin or sys.stdin
        self._running = False

        self.command_registry = CommandRegistry()
        self._register_builtin_commands()
        self.register_commands()

    # ---- accessors ----

    @property
    def store(self) -> TaskStore:
        return self._store

    @property
    def settings(self) -> TaskListSettings:
        return self._settings

    @property
    def console(self) -> Console:
        return self._console

    @property
    def messages(self) -> Messages:
        return self._store.messages

    @property
    def running(self) -> bool:
        return self._running

    # ---- commands ----

    def _register_builtin_commands(self) -> None:
        for command_cls in BUILTIN_COMMANDS:
            self.command_registry.register(command_cls())

    def register_commands(self) -> None:
        """Hook for subclasses to add or replace menu commands."""
        pass

    # ---- I/O helpers used by commands ----

    def say(self, text: str) -> None:
        print_plain(self._console, text)

    def read_line(self) -> str:
        """Read one line of input without its line ending.

        Raises:
            EOFError: If input is exhausted.
        """
        line = self._stdin.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def ask(self, prompt: str) -> str:
        self.say(prompt)
        return self.read_line()

    def ask_task_id(self, prompt: str) -> int:
        """Prompt for a task id; input that is not a number becomes id 0."""
        parsed = parse_task_id(self.ask(prompt))
        if not parsed.is_number:
            logger.debug("task_id_not_a_number", raw=parsed.raw)
        return parsed.or_sentinel()

    def save(self) -> None:
        self._store.save(self._settings.tasks_file, atomic=self._settings.atomic_save)

    def stop(self) -> None:
        self._running = False

    # ---- loop ----

    def show_menu(self) -> None:
        self.say(self.messages.menu_header)
        for command in self.command_registry.all_commands():
            self.say(command.menu_line(self.messages))

    def process_input(self, user_input: str) -> None:
        """Run the command selected by one line of input."""
        key = user_input.strip()
        command: Command | None = self.command_registry.get(key)
        if command is None:
            logger.debug("unrecognized_command", raw=user_input)
            self.say(self.messages.unrecognized_command)
            return
        logger.debug("command", key=key, command=command.description)
        command.execute(self)

    def run(self) -> None:
        """Run the menu until the user exits or input ends.

        End of input saves the store, the same as choosing the exit command.

        Raises:
            TaskStoreError: If the final save fails.
        """
        self._running = True
        while self._running:
            self.show_menu()
            try:
                self.process_input(self.read_line())
            except EOFError:
                logger.info("input_closed")
                self.save()
                self.stop()


def main() -> int:
    """Entry point: load settings and tasks, run the menu, save on exit.

    Returns:
        Process exit status.
    """
    err_console = Console(stderr=True, highlight=False)

    try:
        settings = get_settings()
    except ValidationError as e:
        print_plain(err_console, f"Invalid settings: {e}")
        return EXIT_CONFIG_ERROR

    configure_logging(settings)
    bind_context(tasks_file=str(settings.tasks_file))
    Loggers.config().debug(
        "settings_loaded",
        id_policy=settings.id_policy.value,
        language=settings.language,
        atomic_save=settings.atomic_save,
    )

    console = Console(highlight=False)
    try:
        store = TaskStore.load(
            settings.tasks_file,
            id_policy=settings.id_policy,
            notify=partial(print_plain, console),
            messages=get_messages(settings.language),
        )
        TaskListApp(store, settings, console=console).run()
    except TaskStoreError as e:
        logger.debug("storage_failed", exc_info=True)
        print_plain(err_console, f"Error: {e}")
        return EXIT_STORAGE_ERROR
    except KeyboardInterrupt:
        # Interrupted runs exit without saving
        console.print()
        return EXIT_INTERRUPTED

    return EXIT_OK
