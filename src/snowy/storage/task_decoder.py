# src/snowy/storage/task_decoder.py

from __future__ import annotations

import re

from ..errors import TaskDecodeError
from ..tasks.task_models import Deadline, Event, Task, Todo

_LINE_RE = re.compile(r"^\[(?P<icon>.)\]\[(?P<status>.)\] (?P<body>.+)$")
_DEADLINE_RE = re.compile(r"^(?P<desc>.+) \(by: (?P<by>.+)\)$")
_EVENT_RE = re.compile(r"^(?P<desc>.+) \(from: (?P<start>.+) to: (?P<end>.+)\)$")


class TaskDecoder:
    """Parses one stored line back into a Task (inverse of Task.serialize)."""

    def decode(self, line: str) -> Task:
        task = self._parse(line)
        # Storage matches by exact text, so only canonical lines are accepted.
        if task.serialize() != line:
            raise TaskDecodeError(f"Line is not in canonical form: {line!r}", line)
        return task

    def _parse(self, line: str) -> Task:
        m = _LINE_RE.match(line)
        if m is None:
            raise TaskDecodeError(f"Unrecognised task line: {line!r}", line)

        status = m.group("status")
        if status not in ("X", " "):
            raise TaskDecodeError(f"Invalid status marker {status!r}", line)
        is_done = status == "X"

        icon = m.group("icon")
        body = m.group("body")
        try:
            if icon == Todo.TYPE_ICON:
                return Todo(description=body, is_done=is_done)
            if icon == Deadline.TYPE_ICON:
                dm = _DEADLINE_RE.match(body)
                if dm is None:
                    raise TaskDecodeError("Deadline is missing '(by: ...)'", line)
                return Deadline(description=dm.group("desc"), is_done=is_done, by=dm.group("by"))
            if icon == Event.TYPE_ICON:
                em = _EVENT_RE.match(body)
                if em is None:
                    raise TaskDecodeError("Event is missing '(from: ... to: ...)'", line)
                return Event(
                    description=em.group("desc"),
                    is_done=is_done,
                    start=em.group("start"),
                    end=em.group("end"),
                )
        except ValueError as exc:
            raise TaskDecodeError(str(exc), line) from exc

        raise TaskDecodeError(f"Unknown task type {icon!r}", line)
