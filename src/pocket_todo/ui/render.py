# src/pocket_todo/ui/render.py

"""
Screen rendering.

render_screen() is a pure function of (tasks, form): it never touches the
store, so redrawing is always safe and idempotent.

Two screens-in-one, chosen by whether the task snapshot is empty:
- empty state: a hint line under the form
- list state: one numbered row per task, in insertion order
"""

from __future__ import annotations

import textwrap
from collections.abc import Sequence

from ..tasks.task_models import FormState, Task

DEFAULT_WIDTH = 60
MIN_WIDTH = 32

EMPTY_HINT = "No tasks yet. Add your first one!"
ADD_ENABLED = "[ Add task ]"
ADD_DISABLED = "( Add task )"
FAB_ENABLED = "[+]"
FAB_DISABLED = "(+)"
DELETE_LABEL = "[del]"

# ANSI SGR parts
_RESET = "0"
_BOLD = "1"
_DIM = "2"
_STRIKE = "9"


def style(text: str, *parts: str, enabled: bool = True) -> str:
    """Wrap text in ANSI SGR codes. Returns text unchanged when styling is off or nothing to apply."""
    if not enabled or not parts or not text:
        return text
    return "".join(f"\033[{p}m" for p in parts) + text + f"\033[{_RESET}m"


def _render_form(form: FormState, width: int, styled: bool) -> list[str]:
    lines = [
        f"Task title:  {form.title}",
        f"Description: {form.description}",
        "",
    ]

    if form.can_add:
        button = style(ADD_ENABLED, _BOLD, enabled=styled)
        fab = style(FAB_ENABLED, _BOLD, enabled=styled)
        plain_button, plain_fab = ADD_ENABLED, FAB_ENABLED
    else:
        button = style(ADD_DISABLED, _DIM, enabled=styled)
        fab = style(FAB_DISABLED, _DIM, enabled=styled)
        plain_button, plain_fab = ADD_DISABLED, FAB_DISABLED

    # Pad on plain text, then substitute styled pieces (ANSI codes have no width).
    gap = max(1, width - len(plain_button) - len(plain_fab))
    lines.append(button + " " * gap + fab)
    return lines


def render_row(index: int, task: Task, width: int, *, styled: bool = True) -> list[str]:
    """Render one task row: checkbox, title, optional description, delete control."""
    box = "[x]" if task.done else "[ ]"
    prefix = f"{index:>2}. {box} "
    indent = " " * len(prefix)

    text_width = max(8, width - len(prefix) - len(DELETE_LABEL) - 1)
    title_lines = textwrap.wrap(task.title, text_width) or [""]

    title_parts = (_BOLD, _STRIKE) if task.done else (_BOLD,)
    desc_parts = (_DIM, _STRIKE) if task.done else ()

    out: list[str] = []
    first = title_lines[0]
    head_plain = prefix + first
    gap = max(1, width - len(head_plain) - len(DELETE_LABEL))
    out.append(prefix + style(first, *title_parts, enabled=styled) + " " * gap + DELETE_LABEL)
    for extra in title_lines[1:]:
        out.append(indent + style(extra, *title_parts, enabled=styled))

    if task.has_description:
        for line in textwrap.wrap(task.description, max(8, width - len(indent))):
            out.append(indent + style(line, *desc_parts, enabled=styled))

    return out


def render_screen(
    tasks: Sequence[Task],
    form: FormState,
    *,
    app_name: str = "My To-Do",
    width: int = DEFAULT_WIDTH,
    styled: bool = True,
) -> str:
    """Render the whole screen as text (top bar, form, list or empty state)."""
    width = max(MIN_WIDTH, int(width or DEFAULT_WIDTH))
    rule = "-" * width

    lines: list[str] = [
        style(app_name.center(width).rstrip(), _BOLD, enabled=styled),
        rule,
    ]
    lines.extend(_render_form(form, width, styled))
    lines.append(rule)

    if not tasks:
        lines.append("")
        lines.append(style(EMPTY_HINT.center(width).rstrip(), _DIM, enabled=styled))
        lines.append("")
    else:
        for i, task in enumerate(tasks, start=1):
            lines.extend(render_row(i, task, width, styled=styled))

    lines.append(rule)
    return "\n".join(lines)
