# src/pocket_todo/connectors/console_connector.py

from __future__ import annotations

import logging
import shutil
import sys
from collections.abc import Callable

from ..cli.commands import fill_next_draft
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..ui.render import DEFAULT_WIDTH, render_screen

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]

PROMPT = "> "
WELCOME = "Type a title, or use /help for commands. /exit to quit."
EXIT_COMMANDS = ("/exit", "/quit")

# ESC[H (home) + ESC[2J (clear screen)
_CLEAR = "\033[H\033[2J"


def _print(text: str) -> None:
    print(text, flush=True)


def _screen_width(settings: object) -> int:
    configured = int(getattr(settings, "screen_width", 0) or 0)
    if configured > 0:
        return configured
    return shutil.get_terminal_size((DEFAULT_WIDTH, 24)).columns


def draw(state: AppState, write: Write, *, tty: bool) -> None:
    """
    Redraw the whole screen from the current store snapshot + form drafts.

    Also records the snapshot as `visible_tasks`, so row numbers typed by
    the user refer to exactly what was shown.
    """
    settings = state.settings
    tasks = state.task_store.list_tasks()
    state.visible_tasks = tasks

    text = render_screen(
        tasks,
        state.form,
        app_name=str(getattr(settings, "app_name", "My To-Do")),
        width=_screen_width(settings),
        styled=bool(getattr(settings, "color", True)) and tty,
    )

    if tty and getattr(settings, "clear_screen", True):
        sys.stdout.write(_CLEAR)
    write(text)


def run_console_loop(
    state: AppState,
    *,
    read_line: ReadLine = input,
    write: Write | None = None,
) -> None:
    """
    Interactive screen: draw, read one line, dispatch, redraw on change.

    Redraw is driven by observation: the store notifies on mutation, and the
    form drafts are compared before/after each command.
    """
    tty = write is None and sys.stdout.isatty()
    out: Write = write or _print

    dirty = True

    def _mark_dirty() -> None:
        nonlocal dirty
        dirty = True

    unsubscribe = state.task_store.subscribe(_mark_dirty)
    logger.info("Console screen started (tty=%s).", tty)

    reply: str | None = WELCOME
    try:
        while state.running:
            if dirty:
                draw(state, out, tty=tty)
                dirty = False
            if reply:
                out(reply)
            reply = None

            try:
                line = read_line(PROMPT)
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                out("")
                break

            if not line.strip():
                continue

            if line.strip().lower() in EXIT_COMMANDS:
                logger.info("Console exit command received.")
                break

            form_before = (state.form.title, state.form.description)
            try:
                reply = command_registry.handle(state, line)
                if reply is None:
                    reply = fill_next_draft(state, line.strip())
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if (state.form.title, state.form.description) != form_before:
                dirty = True
    finally:
        unsubscribe()

    logger.info("Console screen finished.")
