"""Menu command registry and base command class.

Each menu entry is a Command keyed by the text the user types ("1".."6").

Example of creating a custom command:

    from tasklist_cli.cli.commands import Command

    class CountCommand(Command):
        '''Print how many tasks there are.'''

        def __init__(self) -> None:
            super().__init__(key="7", description="Count tasks")

        def execute(self, app: Any) -> None:
            app.say(str(len(app.store)))
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from tasklist_cli.tasks.models import MAX_TASK_ID

if TYPE_CHECKING:
    from tasklist_cli.cli.app import TaskListApp
    from tasklist_cli.messages import Messages

# Returned for ids that are not numbers; never assigned to a task by add()
SENTINEL_TASK_ID = 0

_TASK_ID_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class ParsedTaskId:
    """Result of parsing a task id typed by the user.

    Keeps "not a number" apart from "a number that matches no task".
    """

    raw: str
    value: int | None

    @property
    def is_number(self) -> bool:
        return self.value is not None

    def or_sentinel(self) -> int:
        """The parsed id, or SENTINEL_TASK_ID when the input was not a number."""
        return SENTINEL_TASK_ID if self.value is None else self.value


def parse_task_id(raw: str) -> ParsedTaskId:
    """Parse an unsigned 32-bit task id.

    Surrounding whitespace is ignored. Signs other than a leading "+",
    underscores, and values above MAX_TASK_ID are not numbers.
    """
    text = raw.strip()
    if not _TASK_ID_RE.fullmatch(text):
        return ParsedTaskId(raw=raw, value=None)
    value = int(text)
    if value > MAX_TASK_ID:
        return ParsedTaskId(raw=raw, value=None)
    return ParsedTaskId(raw=raw, value=value)


class Command(ABC):
    """Base class for menu commands.

    Subclass this and override execute(). ``menu_label`` picks the menu line
    for the command out of the active message catalog.
    """

    def __init__(
        self,
        key: str,
        description: str,
        menu_label: Callable[["Messages"], str] | None = None,
    ) -> None:
        """Initialize the command.

        Args:
            key: Text the user types to run the command
            description: Short description used in logs
            menu_label: Picks the localized menu line from a Messages catalog
        """
        self.key = key
        self.description = description
        self._menu_label = menu_label

    def menu_line(self, messages: "Messages") -> str:
        if self._menu_label is None:
            return f"{self.key}. {self.description}"
        return self._menu_label(messages)

    @abstractmethod
    def execute(self, app: "TaskListApp") -> None:
        """Run the command against the application.

        Args:
            app: The running application (store, console, input)
        """
        pass


class CommandRegistry:
    """Registry of menu commands, kept in registration order."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> None:
        """Register a command, replacing any command with the same key."""
        self._commands[command.key] = command

    def unregister(self, key: str) -> None:
        self._commands.pop(key, None)

    def get(self, key: str) -> Command | None:
        """Get a command by the text the user typed."""
        return self._commands.get(key)

    def all_commands(self) -> list[Command]:
        return list(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
