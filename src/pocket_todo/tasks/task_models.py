# src/pocket_todo/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


def new_task_id() -> str:
    """Random, collision-resistant id. Uniqueness within a session is all we need."""
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do item.

    Records are immutable: "toggle done" replaces the record with a copy
    (dataclasses.replace) under the same id.
    """

    title: str
    description: str
    done: bool = False
    id: str = field(default_factory=new_task_id)

    @property
    def has_description(self) -> bool:
        return bool(self.description.strip())


@dataclass(slots=True)
class FormState:
    """
    Drafts typed into the add-task form.

    Kept on AppState (not in the view), so redraws never lose what was typed.
    """

    title: str = ""
    description: str = ""

    @property
    def can_add(self) -> bool:
        return bool(self.title.strip()) and bool(self.description.strip())

    def clear(self) -> None:
        self.title = ""
        self.description = ""
