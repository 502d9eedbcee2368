"""User-facing text for the task list.

Every string shown to the user lives here so the store and the menu loop can
be switched between languages through the ``language`` setting.
"""

from dataclasses import dataclass
from typing import Literal

Language = Literal["en", "uk"]


@dataclass(frozen=True)
class Messages:
    """One language's catalog of user-facing text."""

    # Menu
    menu_header: str
    menu_add: str
    menu_list: str
    menu_delete: str
    menu_edit: str
    menu_complete: str
    menu_exit: str

    # Prompts
    prompt_title: str
    prompt_delete_id: str
    prompt_edit_id: str
    prompt_new_title: str
    prompt_complete_id: str

    # Feedback
    task_added: str
    task_deleted: str
    task_edited: str
    task_completed: str
    tasks_saved: str
    edit_not_found: str
    complete_not_found: str
    unrecognized_command: str
    goodbye: str

    # Status labels
    label_completed: str
    label_not_completed: str

    def status_label(self, completed: bool) -> str:
        return self.label_completed if completed else self.label_not_completed


ENGLISH = Messages(
    menu_header="Choose a command:",
    menu_add="1. Add a task.",
    menu_list="2. Show tasks.",
    menu_delete="3. Delete a task.",
    menu_edit="4. Edit a task.",
    menu_complete="5. Mark a task as completed.",
    menu_exit="6. Save and exit.",
    prompt_title="Enter the task title:",
    prompt_delete_id="Enter the number of the task to delete:",
    prompt_edit_id="Enter the number of the task to edit:",
    prompt_new_title="Enter the new title:",
    prompt_complete_id="Enter the number of the task to mark as completed:",
    task_added="Task added.",
    task_deleted="Task deleted.",
    task_edited="Task updated.",
    task_completed="Task marked as completed.",
    tasks_saved="Tasks saved.",
    edit_not_found="Task not found.",
    complete_not_found="Task not found.",
    unrecognized_command="Unrecognized command, please try again.",
    goodbye="Goodbye.",
    label_completed="Completed",
    label_not_completed="Not completed",
)

UKRAINIAN = Messages(
    menu_header="Оберіть наказ:",
    menu_add="1. Додати завдання.",
    menu_list="2. Відобразити завдання.",
    menu_delete="3. Вилучити завдання",
    menu_edit="4. Змінити завдання",
    menu_complete="5. Відмітити як виконане.",
    menu_exit="6. Завершити роботу.",
    prompt_title="Впишіть назву завдання:",
    prompt_delete_id="Вкажіть число завдання, що хочете вилучити:",
    prompt_edit_id="Вкажіть число завдання, що хочете змінити:",
    prompt_new_title="Введіть нову назву:",
    prompt_complete_id="Введіть число завдання, що хочете відмітити, як виконане:",
    task_added="Завдання було додано.",
    task_deleted="Завдання було видалено.",
    task_edited="Завдання було змінено.",
    task_completed="Завдання було відмічено як виконане.",
    tasks_saved="Завдання було збережено.",
    edit_not_found="Вказане завдання не знайдено",
    complete_not_found="Вказане завдання не знайдено.",
    unrecognized_command="Невідомий наказ, введіть повторно.",
    goodbye="Завершення",
    label_completed="Виконане",
    label_not_completed="Не виконане",
)

CATALOGS: dict[str, Messages] = {
    "en": ENGLISH,
    "uk": UKRAINIAN,
}


def get_messages(language: str = "en") -> Messages:
    """Return the catalog for a language code.

    Raises:
        KeyError: If the language has no catalog.
    """
    try:
        return CATALOGS[language]
    except KeyError:
        raise KeyError(
            f"Unsupported language '{language}'. Available: {', '.join(sorted(CATALOGS))}"
        ) from None
