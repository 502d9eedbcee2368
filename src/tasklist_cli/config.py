"""Configuration for the task list.

Settings Loading Priority (highest to lowest):
    1. Constructor arguments
    2. Environment variables (TASKLIST_* prefix)
    3. Project config (./.tasklist/settings.json)
    4. User config (~/.tasklist/settings.json)
    5. .env file
    6. Default values

Example:
    TASKLIST_TASKS_FILE=~/todo.json TASKLIST_LANGUAGE=uk tasklist
"""

from pathlib import Path
from typing import Literal, Tuple, Type

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings as PydanticBaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from tasklist_cli.tasks.models import IdPolicy

__all__ = [
    "TaskListSettings",
    "get_settings",
    "set_settings",
    "reload_settings",
]

APP_NAME = "tasklist"
DEFAULT_TASKS_FILE = "tasks.json"


def _get_json_config_source(
    settings_cls: Type[PydanticBaseSettings],
    json_file: Path,
) -> PydanticBaseSettingsSource | None:
    """Create a JSON config source if the file exists."""
    if not json_file.exists():
        return None
    return JsonConfigSettingsSource(settings_cls, json_file=json_file)


class TaskListSettings(PydanticBaseSettings):
    """Settings for the task list menu and its storage file."""

    model_config = SettingsConfigDict(
        env_prefix="TASKLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(
        default=APP_NAME,
        description="Application name, used for the config directories",
    )

    # Storage
    tasks_file: Path = Field(
        default=Path(DEFAULT_TASKS_FILE),
        description="Task file loaded at startup and written on exit",
    )
    atomic_save: bool = Field(
        default=True,
        description="Write to a temporary file and rename it over the task file",
    )
    id_policy: IdPolicy = Field(
        default=IdPolicy.COUNT,
        description="'count' numbers new tasks len+1, 'monotonic' never reuses an id",
    )

    # Display
    language: Literal["en", "uk"] = Field(
        default="en",
        description="Language of menus, prompts and feedback",
    )

    # Logging
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log output format (console for dev, json for production)",
    )

    @field_validator("tasks_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Expand ~ in paths."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v.expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def lower_log_level(cls, v: object) -> object:
        return v.lower() if isinstance(v, str) else v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[PydanticBaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Layer project and user JSON config between env vars and .env.

        JSON sources are only included if the files exist.
        """
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]

        project_json = _get_json_config_source(
            settings_cls, Path.cwd() / f".{APP_NAME}" / "settings.json"
        )
        if project_json:
            sources.append(project_json)

        user_json = _get_json_config_source(
            settings_cls, Path.home() / f".{APP_NAME}" / "settings.json"
        )
        if user_json:
            sources.append(user_json)

        sources.append(dotenv_settings)
        return tuple(sources)


_settings_instance: TaskListSettings | None = None


def get_settings() -> TaskListSettings:
    """Get the global settings instance, creating it on first access."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = TaskListSettings()
    return _settings_instance


def set_settings(settings: TaskListSettings) -> None:
    """Replace the global settings instance."""
    global _settings_instance
    _settings_instance = settings


def reload_settings() -> TaskListSettings:
    """Drop the cached settings and read them again."""
    global _settings_instance
    _settings_instance = None
    return get_settings()
