# src/pocket_todo/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import FormState, Task
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (real Settings or a SimpleNamespace in tests).
    settings: object

    task_store: TaskRepo
    form: FormState = field(default_factory=FormState)

    # Snapshot the user is currently looking at; row numbers resolve against it.
    visible_tasks: tuple[Task, ...] = ()

    running: bool = True
