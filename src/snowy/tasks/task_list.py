# src/snowy/tasks/task_list.py

from __future__ import annotations

import logging

from ..errors import CommandError, StorageRewriteError
from ..storage.storage import LoadReport, Storage
from .task_models import Task

logger = logging.getLogger(__name__)


def _out_of_sync(storage: Storage, line: str) -> StorageRewriteError:
    logger.error("Line %r not found in %s; file changed outside this list", line, storage.path)
    return StorageRewriteError(
        f"Task {line} is no longer in the task file; reload the list.", storage.path
    )


class TaskList:
    """
    In-memory ordered task list mirrored to a Storage file.

    Indexes exposed to users are 1-based. Identical tasks are allowed; file
    rewrites target the same occurrence the user picked, so memory and file
    stay in the same order.
    """

    def __init__(self, storage: Storage) -> None:
        self._storage = storage
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self):
        return iter(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def load(self) -> LoadReport:
        return self._storage.load_tasks(self._tasks)

    def get(self, index: int) -> Task:
        if not 1 <= index <= len(self._tasks):
            raise CommandError(
                f"No task number {index}. The list has {len(self._tasks)} task(s)."
            )
        return self._tasks[index - 1]

    def _occurrence(self, index: int) -> int:
        # Ordinal of this task's line among equal lines before it.
        text = self._tasks[index - 1].serialize()
        return sum(1 for t in self._tasks[: index - 1] if t.serialize() == text)

    def add(self, task: Task) -> Task:
        self._storage.append_task(task)
        self._tasks.append(task)
        return task

    def delete(self, index: int) -> Task:
        task = self.get(index)
        removed = self._storage.delete_task(task, occurrence=self._occurrence(index))
        if not removed:
            raise _out_of_sync(self._storage, task.serialize())
        del self._tasks[index - 1]
        return task

    def mark(self, index: int) -> Task:
        return self._set_done(index, True)

    def unmark(self, index: int) -> Task:
        return self._set_done(index, False)

    def _set_done(self, index: int, done: bool) -> Task:
        task = self.get(index)
        if task.is_done == done:
            return task
        occurrence = self._occurrence(index)
        before = task.serialize()
        if done:
            task.mark_done()
        else:
            task.mark_not_done()
        try:
            edited = self._storage.edit_task(before, task.serialize(), occurrence=occurrence)
            if not edited:
                raise _out_of_sync(self._storage, before)
        except Exception:
            # keep memory consistent with the untouched file
            if done:
                task.mark_not_done()
            else:
                task.mark_done()
            raise
        return task

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        needle = keyword.strip().lower()
        if not needle:
            return []
        return [
            (i, t) for i, t in enumerate(self._tasks, start=1) if needle in t.description.lower()
        ]
