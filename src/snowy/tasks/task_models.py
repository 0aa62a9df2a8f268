# src/snowy/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


def _check_field(name: str, value: str, *, forbidden: tuple[str, ...] = ()) -> str:
    if not value or not value.strip():
        raise ValueError(f"{name} is required")
    if "\n" in value or "\r" in value:
        raise ValueError(f"{name} must be a single line")
    for marker in forbidden:
        if marker in value:
            raise ValueError(f"{name} must not contain {marker!r}")
    return value.strip()


@dataclass(slots=True)
class Task:
    """
    Base task.

    The serialized form is the display form, one line:
      [<icon>][<X or space>] <description><suffix>

    Storage matches lines against serialize() exactly, so __str__ must stay stable.
    """

    TYPE_ICON: ClassVar[str] = "?"

    description: str
    is_done: bool = False

    def __post_init__(self) -> None:
        self.description = _check_field("description", self.description)

    def mark_done(self) -> None:
        self.is_done = True

    def mark_not_done(self) -> None:
        self.is_done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def _suffix(self) -> str:
        return ""

    def serialize(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"[{self.TYPE_ICON}][{self.status_icon}] {self.description}{self._suffix()}"


@dataclass(slots=True)
class Todo(Task):
    TYPE_ICON: ClassVar[str] = "T"


@dataclass(slots=True)
class Deadline(Task):
    TYPE_ICON: ClassVar[str] = "D"

    by: str = ""

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        self.by = _check_field("by", self.by, forbidden=("(by: ",))

    def _suffix(self) -> str:
        return f" (by: {self.by})"


@dataclass(slots=True)
class Event(Task):
    TYPE_ICON: ClassVar[str] = "E"

    start: str = ""
    end: str = ""

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        self.start = _check_field("start", self.start, forbidden=("(from: ",))
        self.end = _check_field("end", self.end, forbidden=("(from: ", " to: "))

    def _suffix(self) -> str:
        return f" (from: {self.start} to: {self.end})"
