# src/pocket_todo/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from .task_models import Task

logger = logging.getLogger(__name__)

ChangeListener = Callable[[], None]


class TaskStore:
    """
    In-memory, insertion-ordered task store.

    Notes:
    - nothing is persisted; tasks live as long as the store object
    - lookups are by id only; a miss is a no-op, never an error
    - listeners are called after every effective mutation (used by the view to redraw)

    Single-threaded: all calls come from the console loop.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._listeners: list[ChangeListener] = []

    # -------------------- observation --------------------

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Task store listener failed.")

    # -------------------- queries --------------------

    def list_tasks(self) -> tuple[Task, ...]:
        """Read-only snapshot in insertion order."""
        return tuple(self._tasks)

    def get_task(self, task_id: str) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def is_empty(self) -> bool:
        return not self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    # -------------------- mutations --------------------

    def add_task(self, title: str, description: str) -> Task | None:
        """
        Append a new task.

        Both fields are trimmed; if either ends up empty nothing is added and
        None is returned.
        """
        title = (title or "").strip()
        description = (description or "").strip()
        if not title or not description:
            logger.debug("add_task ignored: blank title or description")
            return None

        task = Task(title=title, description=description)
        self._tasks.append(task)
        logger.debug("Added task id=%s title=%r (total=%d)", task.id, task.title, len(self._tasks))
        self._notify()
        return task

    def toggle_done(self, task_id: str) -> Task | None:
        """Flip `done` on the matching task. Returns the new record, or None on a miss."""
        for idx, t in enumerate(self._tasks):
            if t.id == task_id:
                updated = replace(t, done=not t.done)
                self._tasks[idx] = updated
                logger.debug("Toggled task id=%s done=%s", task_id, updated.done)
                self._notify()
                return updated

        logger.debug("toggle_done: no task id=%s", task_id)
        return None

    def remove_task(self, task_id: str) -> int:
        """Remove every task with this id (zero or one in practice). Returns the count removed."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        removed = before - len(self._tasks)

        if removed:
            logger.debug("Removed task id=%s (total=%d)", task_id, len(self._tasks))
            self._notify()
        else:
            logger.debug("remove_task: no task id=%s", task_id)
        return removed
