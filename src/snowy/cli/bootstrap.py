# src/snowy/cli/bootstrap.py

"""
CLI bootstrap helpers.

Composition root: reads settings once, creates the task file (and its
directory), and loads existing tasks into a TaskList.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..storage.storage import Storage
from ..tasks.task_list import TaskList

logger = logging.getLogger(__name__)


def create_task_list(*, settings: Settings | None = None) -> TaskList:
    """
    Build a loaded TaskList from the provided settings.

    If settings is None, falls back to get_settings().
    Malformed lines are skipped (and logged) rather than failing startup.
    """
    if settings is None:
        settings = get_settings()

    storage = Storage(settings.data_dir, settings.task_file_name)
    tasks = TaskList(storage)
    report = tasks.load()
    if report.skipped:
        logger.warning(
            "%d malformed line(s) in %s were skipped", len(report.skipped), storage.path
        )
    return tasks
