# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from pocket_todo.core.state import AppState
from pocket_todo.tasks.task_models import FormState
from pocket_todo.tasks.task_store import TaskStore


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console screen.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="My To-Do",
        log_level="",
        clear_screen=False,
        color=False,
        screen_width=60,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store, form=FormState())
