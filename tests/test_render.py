# tests/test_render.py

from __future__ import annotations

from pocket_todo.tasks.task_models import FormState, Task
from pocket_todo.ui.render import (
    ADD_DISABLED,
    ADD_ENABLED,
    EMPTY_HINT,
    FAB_DISABLED,
    FAB_ENABLED,
    render_row,
    render_screen,
)

STRIKE = "\033[9m"


def test_empty_state_shows_hint_and_disabled_add() -> None:
    screen = render_screen((), FormState(), styled=False)
    lines = screen.splitlines()

    assert lines[0].strip() == "My To-Do"
    assert EMPTY_HINT in screen
    assert ADD_DISABLED in screen
    assert FAB_DISABLED in screen
    assert ADD_ENABLED not in screen


def test_add_enabled_only_when_form_valid() -> None:
    screen = render_screen((), FormState(title="Buy milk", description="2%"), styled=False)
    assert ADD_ENABLED in screen
    assert FAB_ENABLED in screen
    assert "Task title:  Buy milk" in screen
    assert "Description: 2%" in screen

    screen = render_screen((), FormState(title="Buy milk", description="  "), styled=False)
    assert ADD_DISABLED in screen


def test_list_state_rows_in_insertion_order() -> None:
    tasks = (
        Task(title="first", description="a"),
        Task(title="second", description="b", done=True),
    )
    screen = render_screen(tasks, FormState(), styled=False)

    assert EMPTY_HINT not in screen
    assert " 1. [ ] first" in screen
    assert " 2. [x] second" in screen
    assert screen.index("first") < screen.index("second")
    assert screen.count("[del]") == 2


def test_done_row_is_struck_through_when_styled() -> None:
    done = Task(title="paid", description="rent", done=True)
    open_ = Task(title="todo", description="later")

    done_lines = render_row(1, done, 60, styled=True)
    assert STRIKE in done_lines[0]
    assert STRIKE in done_lines[1]

    open_lines = render_row(2, open_, 60, styled=True)
    assert all(STRIKE not in line for line in open_lines)


def test_blank_description_is_omitted() -> None:
    lines = render_row(1, Task(title="solo", description=""), 60, styled=False)
    assert len(lines) == 1
    assert "solo" in lines[0]


def test_unstyled_output_has_no_escape_codes() -> None:
    tasks = (Task(title="a", description="b", done=True),)
    screen = render_screen(tasks, FormState(title="x", description="y"), styled=False)
    assert "\033[" not in screen


def test_long_title_wraps_within_width() -> None:
    task = Task(title="word " * 30, description="d")
    lines = render_row(1, task, 40, styled=False)
    assert len(lines) > 2
    assert all(len(line) <= 40 for line in lines)


def test_custom_app_name_and_minimum_width() -> None:
    screen = render_screen((), FormState(), app_name="Groceries", width=5, styled=False)
    lines = screen.splitlines()
    assert lines[0].strip() == "Groceries"
    assert len(lines[1]) == 32
