# src/pocket_todo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the view layer.

Commands and the console connector depend on this Protocol rather than on
TaskStore directly, so tests can swap in a recording fake.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Ordered task collection with add / toggle / remove by id."""

    def list_tasks(self) -> tuple[Task, ...]: ...
    def get_task(self, task_id: str) -> Task | None: ...
    def is_empty(self) -> bool: ...
    def add_task(self, title: str, description: str) -> Task | None: ...
    def toggle_done(self, task_id: str) -> Task | None: ...
    def remove_task(self, task_id: str) -> int: ...
    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]: ...
