# src/pocket_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes settings once and wires the
in-memory TaskStore and an empty form into AppState. Nothing is loaded from
disk; every session starts with an empty list.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_models import FormState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    state = AppState(
        settings=settings,
        task_store=TaskStore(),
        form=FormState(),
    )
    logger.debug("Initial state created (app_name=%s).", getattr(settings, "app_name", "?"))
    return state
