# tests/test_task_store.py

from __future__ import annotations

import pytest

from pocket_todo.tasks.task_store import TaskStore


def test_add_toggle_remove_scenario(store: TaskStore) -> None:
    task = store.add_task("Buy milk", "2%")
    assert task is not None

    items = store.list_tasks()
    assert len(items) == 1
    assert (items[0].title, items[0].description, items[0].done) == ("Buy milk", "2%", False)

    toggled = store.toggle_done(task.id)
    assert toggled is not None and toggled.done is True
    assert store.list_tasks()[0].done is True
    assert store.list_tasks()[0].id == task.id

    assert store.remove_task(task.id) == 1
    assert store.list_tasks() == ()
    assert store.is_empty()


@pytest.mark.parametrize(
    "title,description",
    [("", "desc"), ("  ", "  "), ("title", ""), ("title", " \t\n"), ("\n", "desc")],
)
def test_add_with_blank_field_is_noop(store: TaskStore, title: str, description: str) -> None:
    assert store.add_task(title, description) is None
    assert len(store) == 0


def test_add_trims_and_appends_last(store: TaskStore) -> None:
    store.add_task("first", "a")
    store.add_task("second", "b")
    task = store.add_task("  third  ", "\tc \n")

    items = store.list_tasks()
    assert len(items) == 3
    assert items[-1] == task
    assert items[-1].title == "third"
    assert items[-1].description == "c"
    assert items[-1].done is False
    assert [t.title for t in items] == ["first", "second", "third"]


def test_ids_are_unique(store: TaskStore) -> None:
    for i in range(200):
        store.add_task(f"t{i}", "same")
    ids = [t.id for t in store.list_tasks()]
    assert len(set(ids)) == len(ids)


def test_toggle_flips_only_target(store: TaskStore) -> None:
    a = store.add_task("a", "1")
    b = store.add_task("b", "2")
    c = store.add_task("c", "3")
    assert a and b and c

    store.toggle_done(b.id)
    items = store.list_tasks()
    assert items[0] == a
    assert items[2] == c
    assert items[1].done is True
    assert (items[1].id, items[1].title, items[1].description) == (b.id, "b", "2")

    store.toggle_done(b.id)
    assert store.list_tasks()[1] == b


def test_toggle_and_remove_unknown_id_are_noops(store: TaskStore) -> None:
    store.add_task("a", "1")
    before = store.list_tasks()

    assert store.toggle_done("missing") is None
    assert store.remove_task("missing") == 0
    assert store.list_tasks() == before


def test_remove_is_idempotent_and_targeted(store: TaskStore) -> None:
    a = store.add_task("a", "1")
    b = store.add_task("b", "2")
    assert a and b

    assert store.remove_task(a.id) == 1
    assert store.remove_task(a.id) == 0
    assert store.list_tasks() == (b,)


def test_snapshot_is_not_affected_by_later_mutations(store: TaskStore) -> None:
    a = store.add_task("a", "1")
    assert a
    snapshot = store.list_tasks()

    store.toggle_done(a.id)
    store.add_task("b", "2")

    assert snapshot == (a,)
    assert snapshot[0].done is False


def test_listeners_called_only_on_effective_changes(store: TaskStore) -> None:
    calls: list[str] = []
    unsubscribe = store.subscribe(lambda: calls.append("changed"))

    store.add_task("", "x")
    assert calls == []

    t = store.add_task("a", "1")
    assert t
    store.toggle_done(t.id)
    store.toggle_done("missing")
    store.remove_task("missing")
    store.remove_task(t.id)
    assert calls == ["changed"] * 3

    unsubscribe()
    store.add_task("b", "2")
    assert len(calls) == 3


def test_failing_listener_does_not_break_mutation(store: TaskStore) -> None:
    seen: list[int] = []

    def boom() -> None:
        raise RuntimeError("listener failed")

    store.subscribe(boom)
    store.subscribe(lambda: seen.append(len(store)))

    assert store.add_task("a", "1") is not None
    assert len(store) == 1
    assert seen == [1]
