"""Tests for the in-memory task store."""

import pytest

from tasklist_cli.messages import ENGLISH, UKRAINIAN
from tasklist_cli.tasks import IdPolicy, Task, TaskStore


class TestAdd:
    """Tests for TaskStore.add and id assignment."""

    def test_ids_follow_insertion_count(self, store: TaskStore):
        titles = ["one", "two", "three", "four"]
        created = [store.add(title) for title in titles]

        assert [t.id for t in created] == [1, 2, 3, 4]
        assert [t.title for t in store.list()] == titles

    def test_new_task_not_completed(self, store: TaskStore):
        task = store.add("Buy milk")

        assert task.completed is False

    def test_empty_title_allowed(self, store: TaskStore):
        task = store.add("")

        assert task.title == ""
        assert len(store) == 1

    def test_emits_confirmation(self, store: TaskStore, recorder):
        store.add("Buy milk")

        assert recorder.messages == [ENGLISH.task_added]

    def test_id_collision_after_delete(self, store: TaskStore):
        """Deleting from the middle lets the next add reuse a live id."""
        for title in ("a", "b", "c"):
            store.add(title)

        store.delete(2)
        new_task = store.add("d")

        assert new_task.id == 3
        assert [t.id for t in store.list()] == [1, 3, 3]
        assert [t.title for t in store.list()] == ["a", "c", "d"]

    def test_colliding_ids_resolve_to_first_match(self, store: TaskStore):
        for title in ("a", "b", "c"):
            store.add(title)
        store.delete(2)
        store.add("d")

        store.complete(3)

        assert [(t.title, t.completed) for t in store.list()] == [
            ("a", False),
            ("c", True),
            ("d", False),
        ]


class TestMonotonicIds:
    """Tests for the never-reused id policy."""

    def test_ids_not_reused_after_delete(self, recorder):
        store = TaskStore(id_policy=IdPolicy.MONOTONIC, notify=recorder)
        for title in ("a", "b", "c"):
            store.add(title)

        store.delete(2)
        new_task = store.add("d")

        assert new_task.id == 4
        assert [t.id for t in store.list()] == [1, 3, 4]

    def test_counter_starts_past_existing_ids(self):
        store = TaskStore([Task(id=7, title="x")], id_policy=IdPolicy.MONOTONIC)

        assert store.add("y").id == 8

    def test_stored_counter_wins_when_higher(self):
        store = TaskStore([Task(id=2, title="x")], id_policy=IdPolicy.MONOTONIC, next_id=10)

        assert store.next_id == 10
        assert store.add("y").id == 10
        assert store.next_id == 11

    def test_policy_accepts_string(self):
        store = TaskStore(id_policy="monotonic")

        assert store.id_policy is IdPolicy.MONOTONIC


class TestList:
    """Tests for listing and rendering."""

    def test_list_is_snapshot(self, store: TaskStore):
        store.add("a")
        snapshot = store.list()
        snapshot.clear()

        assert len(store) == 1

    def test_list_restartable(self, store: TaskStore):
        store.add("a")
        store.add("b")

        assert list(store) == list(store)
        assert store.list() == store.list()

    def test_render_lines(self, store: TaskStore):
        store.add("Buy milk")
        store.add("Walk dog")
        store.complete(2)

        assert store.render_lines() == [
            "[1] Buy milk - Not completed",
            "[2] Walk dog - Completed",
        ]

    def test_render_lines_localized(self):
        store = TaskStore(messages=UKRAINIAN)
        store.add("Купити молоко")

        assert store.render_lines() == ["[1] Купити молоко - Не виконане"]

    def test_empty_store(self, store: TaskStore):
        assert store.is_empty()
        assert store.list() == []
        assert store.render_lines() == []


class TestDelete:
    """Tests for TaskStore.delete."""

    def test_delete_existing(self, store: TaskStore, recorder):
        store.add("a")
        store.add("b")

        assert store.delete(1) is True
        assert [t.title for t in store.list()] == ["b"]
        assert recorder.last == ENGLISH.task_deleted

    def test_delete_absent_is_noop_with_confirmation(self, store: TaskStore, recorder):
        store.add("a")

        assert store.delete(42) is False
        assert len(store) == 1
        assert recorder.last == ENGLISH.task_deleted

    def test_delete_removes_only_first_match(self, store: TaskStore):
        store.add("a")
        store.add("b")
        store.delete(1)
        store.add("c")  # gets id 2 again

        store.delete(2)

        assert [(t.id, t.title) for t in store.list()] == [(2, "c")]


class TestEdit:
    """Tests for TaskStore.edit."""

    def test_edit_changes_title_only(self, store: TaskStore, recorder):
        store.add("old")
        store.complete(1)

        assert store.edit(1, "new") is True

        task = store.get(1)
        assert task is not None
        assert task.title == "new"
        assert task.id == 1
        assert task.completed is True
        assert recorder.last == ENGLISH.task_edited

    def test_edit_absent_reports_not_found(self, store: TaskStore, recorder):
        store.add("keep")
        before = [Task(t.id, t.title, t.completed) for t in store.list()]

        assert store.edit(5, "changed") is False
        assert store.list() == before
        assert recorder.last == ENGLISH.edit_not_found


class TestComplete:
    """Tests for TaskStore.complete."""

    def test_complete_marks_task(self, store: TaskStore, recorder):
        store.add("a")

        assert store.complete(1) is True
        assert store.get(1).completed is True
        assert recorder.last == ENGLISH.task_completed

    def test_complete_is_idempotent(self, store: TaskStore, recorder):
        store.add("a")

        assert store.complete(1) is True
        assert store.complete(1) is True
        assert store.get(1).completed is True
        assert recorder.messages[-2:] == [ENGLISH.task_completed, ENGLISH.task_completed]

    def test_complete_absent_reports_not_found(self, store: TaskStore, recorder):
        assert store.complete(3) is False
        assert recorder.last == ENGLISH.complete_not_found


class TestNotify:
    """Feedback routing."""

    def test_no_notifier_is_silent(self):
        store = TaskStore()
        store.add("a")
        store.edit(9, "b")

        assert len(store) == 1

    @pytest.mark.parametrize(
        "catalog, expected",
        [(ENGLISH, "Task added."), (UKRAINIAN, "Завдання було додано.")],
    )
    def test_messages_follow_catalog(self, recorder, catalog, expected):
        store = TaskStore(notify=recorder, messages=catalog)
        store.add("a")

        assert recorder.messages == [expected]


class TestEndToEnd:
    """The add / list / complete / delete walk-through."""

    def test_buy_milk(self, store: TaskStore):
        store.add("Buy milk")
        assert store.render_lines() == ["[1] Buy milk - Not completed"]

        store.complete(1)
        assert store.render_lines() == ["[1] Buy milk - Completed"]

        store.delete(1)
        assert store.render_lines() == []
