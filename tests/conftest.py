"""Shared test fixtures for tasklist-cli tests.

Provides:
- Temporary workspace and isolated settings
- A recording notifier that captures store feedback
- A scripted menu app writing to an in-memory console
"""

import io
import os
from pathlib import Path
from typing import Callable, Generator
from unittest.mock import patch

import pytest
from rich.console import Console

from tasklist_cli.cli.app import TaskListApp, print_plain
from tasklist_cli.config import TaskListSettings, reload_settings, set_settings
from tasklist_cli.messages import get_messages
from tasklist_cli.tasks.store import TaskStore


class Recorder:
    """Notifier that remembers every message it receives."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    @property
    def last(self) -> str | None:
        return self.messages[-1] if self.messages else None


class ScriptedApp:
    """A TaskListApp fed from a fixed input script, capturing its output."""

    def __init__(self, settings: TaskListSettings, script: str) -> None:
        self.output = io.StringIO()
        self.console = Console(file=self.output, width=200, color_system=None)
        self.store = TaskStore.load(
            settings.tasks_file,
            id_policy=settings.id_policy,
            notify=lambda message: print_plain(self.console, message),
            messages=get_messages(settings.language),
        )
        self.app = TaskListApp(
            self.store,
            settings,
            console=self.console,
            stdin=io.StringIO(script),
        )

    def run(self) -> list[str]:
        self.app.run()
        return self.lines

    @property
    def lines(self) -> list[str]:
        return self.output.getvalue().splitlines()


@pytest.fixture
def temp_workspace(tmp_path: Path) -> Path:
    """Fixture providing a temporary workspace directory."""
    workspace = tmp_path / "workspace"
    workspace.mkdir(parents=True)
    return workspace


@pytest.fixture
def tasks_file(temp_workspace: Path) -> Path:
    return temp_workspace / "tasks.json"


@pytest.fixture
def settings(tasks_file: Path) -> Generator[TaskListSettings, None, None]:
    """Settings pointing at a temporary task file, installed globally."""
    with patch.dict(os.environ, {}, clear=True):
        test_settings = TaskListSettings(tasks_file=tasks_file)
    set_settings(test_settings)
    yield test_settings
    with patch.dict(os.environ, {}, clear=True):
        reload_settings()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def store(recorder: Recorder) -> TaskStore:
    """Empty store whose feedback goes to the recorder."""
    return TaskStore(notify=recorder)


@pytest.fixture
def scripted_app(settings: TaskListSettings) -> Callable[..., ScriptedApp]:
    """Factory for a menu app driven by a list of input lines."""

    def _make(*lines: str, **overrides) -> ScriptedApp:
        app_settings = settings.model_copy(update=overrides) if overrides else settings
        script = "".join(f"{line}\n" for line in lines)
        return ScriptedApp(app_settings, script)

    return _make
