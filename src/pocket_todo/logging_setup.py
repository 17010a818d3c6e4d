# src/pocket_todo/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "todo.log"
APP_LOGGER = "pocket_todo"


class _AppOnlyFilter(logging.Filter):
    """Console shows our own records; anything else (py.warnings, libraries) only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == APP_LOGGER or record.name.startswith(APP_LOGGER + "."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/pocket_todo",
    console_level: int | None = None,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Send everything to `<log_dir>/todo.log`.

    The terminal belongs to the redrawn screen, so a stderr handler is only
    attached when `console_level` is given (TODO_LOG_LEVEL set). Returns the
    log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    if console_level is not None:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(console_level)
        ch.setFormatter(fmt)
        ch.addFilter(_AppOnlyFilter())
        root.addHandler(ch)

    logging.captureWarnings(True)
    return log_file
