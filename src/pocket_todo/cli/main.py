# src/pocket_todo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console screen in the
main thread until the user exits (or the process gets SIGTERM).
"""

from __future__ import annotations

import logging
import signal

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _console_level(settings) -> int | None:
    """Console logging only when TODO_LOG_LEVEL names a real level; otherwise the screen owns the terminal."""
    level_name = str(getattr(settings, "log_level", "") or "").strip().upper()
    if not level_name:
        return None
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else None


def _shutdown(state) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    # Tasks are in-memory only; report what is being discarded.
    try:
        remaining = len(state.task_store.list_tasks())
        logger.info("Discarding %d task(s) on exit.", remaining)
    except Exception:
        logger.debug("Task count on shutdown failed.", exc_info=True)


def main() -> None:
    settings = get_settings()

    log_dir = getattr(settings, "log_dir", ".local/pocket_todo")
    setup_logging(log_dir=log_dir, console_level=_console_level(settings))

    logger.info("Starting %s...", getattr(settings, "app_name", "pocket_todo"))

    state = create_initial_state(settings=settings)

    def _handle_sigterm(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        state.running = False
        raise KeyboardInterrupt

    try:
        signal.signal(signal.SIGTERM, _handle_sigterm)
    except (ValueError, OSError, AttributeError):
        # Not on the main thread, or platform without SIGTERM.
        logger.debug("SIGTERM handler not installed.", exc_info=True)

    try:
        run_console_loop(state)
    except KeyboardInterrupt:
        # Interrupt outside read_line (mid-draw or mid-command).
        logger.info("Interrupted, exiting.")
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
