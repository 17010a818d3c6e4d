# src/pocket_todo/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, str], str]

FAB_TRIGGER = "+"

# "/name<one whitespace char>rest": rest is kept as typed.
_COMMAND_RE = re.compile(r"(\S+)\s?(.*)", re.S)

# Shorter ASCII-digit refs are row numbers; id prefixes must be at least this long.
ID_PREFIX_MIN = 8

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console screen (/add, /done, /del, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        The argument text is passed through as typed (minus the single
        separating whitespace character), so drafts keep their inner spacing.
        """
        if line.strip() == FAB_TRIGGER:
            line = "/add"

        if not line.startswith("/"):
            return None

        m = _COMMAND_RE.match(line[1:])
        if not m:
            return "Empty command. Use /help to list available commands."

        name, arg = m.group(1).lower(), m.group(2)

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, arg)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append(f"  {FAB_TRIGGER} - same as /add")
        lines.append("  /exit - leave")
        lines.append("Plain text fills the title, then the description.")
        lines.append(
            f"<row> is the number on screen, or a task id prefix of {ID_PREFIX_MIN}+ characters."
        )
        return "\n".join(lines)


registry = CommandRegistry()


def resolve_row(state: AppState, ref: str) -> Task | None:
    """
    Resolve a row reference against the snapshot currently on screen.

    Accepts a 1-based row number (ASCII digits, shorter than ID_PREFIX_MIN),
    a full task id or a unique id prefix of at least ID_PREFIX_MIN characters.
    """
    ref = ref.strip()
    if not ref:
        return None

    visible = state.visible_tasks

    if ref.isascii() and ref.isdecimal() and len(ref) < ID_PREFIX_MIN:
        idx = int(ref) - 1
        if 0 <= idx < len(visible):
            return visible[idx]
        return None

    matches = [t for t in visible if t.id == ref]
    if matches:
        return matches[0]

    if len(ref) < ID_PREFIX_MIN:
        return None

    matches = [t for t in visible if t.id.startswith(ref.lower())]
    if len(matches) == 1:
        return matches[0]
    return None


def fill_next_draft(state: AppState, text: str) -> str:
    """Plain (non-command) input goes into the first empty draft, like typing into the focused field."""
    form = state.form
    if not form.title.strip():
        form.title = text
        return "Title set."
    if not form.description.strip():
        form.description = text
        return "Description set. Use /add or + to add the task."
    return "Both fields are filled. Use /add, /title or /desc."


def cmd_help(state: AppState, arg: str) -> str:
    return registry.build_help()


def cmd_title(state: AppState, arg: str) -> str:
    state.form.title = arg
    return "Title set." if arg.strip() else "Title cleared."


def cmd_desc(state: AppState, arg: str) -> str:
    state.form.description = arg
    return "Description set." if arg.strip() else "Description cleared."


def cmd_clear(state: AppState, arg: str) -> str:
    state.form.clear()
    return "Form cleared."


def cmd_add(state: AppState, arg: str) -> str:
    """
    /add  -> add a task from the drafts, then clear them

    Disabled (no-op with a hint) until both drafts are non-blank.
    """
    form = state.form
    if not form.can_add:
        return "Add is disabled: fill in both the title and the description."

    task = state.task_store.add_task(form.title, form.description)
    form.clear()
    if task is None:
        return "Nothing added."

    logger.info("Task added id=%s", task.id)
    return f"Added: {task.title}"


def cmd_done(state: AppState, arg: str) -> str:
    """
    /done N   -> toggle row N between done and not done
    """
    if not arg.strip():
        return "Usage: /done <row>"

    task = resolve_row(state, arg)
    if task is None:
        return f"No task #{arg.strip()}."

    updated = state.task_store.toggle_done(task.id)
    if updated is None:
        return f"Task #{arg.strip()} is gone."
    return f"{'Done' if updated.done else 'Not done'}: {updated.title}"


def cmd_delete(state: AppState, arg: str) -> str:
    """
    /del N    -> delete row N
    """
    if not arg.strip():
        return "Usage: /del <row>"

    task = resolve_row(state, arg)
    if task is None:
        return f"No task #{arg.strip()}."

    removed = state.task_store.remove_task(task.id)
    if not removed:
        return f"Task #{arg.strip()} is gone."

    logger.info("Task deleted id=%s", task.id)
    return f"Deleted: {task.title}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("title", cmd_title, help_text="Set the title draft: /title <text>.")
registry.register(
    "desc", cmd_desc, help_text="Set the description draft: /desc <text>.", aliases=["description"]
)
registry.register("add", cmd_add, help_text="Add a task from the form (needs both fields).")
registry.register(
    "done", cmd_done, help_text="Toggle a task done/not done: /done <row>.", aliases=["toggle", "x"]
)
registry.register("del", cmd_delete, help_text="Delete a task: /del <row>.", aliases=["delete", "rm"])
registry.register("clear", cmd_clear, help_text="Clear both form fields.")
