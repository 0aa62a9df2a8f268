# tests/test_task_decoder.py

from __future__ import annotations

import pytest

from snowy.errors import TaskDecodeError
from snowy.storage.task_decoder import TaskDecoder
from snowy.tasks.task_models import Deadline, Event, Todo


def test_decode_each_task_type() -> None:
    dec = TaskDecoder()

    assert dec.decode("[T][ ] read book") == Todo(description="read book")
    assert dec.decode("[D][X] return book (by: Sunday)") == Deadline(
        description="return book", by="Sunday", is_done=True
    )
    assert dec.decode("[E][ ] meeting (from: Mon 2pm to: 4pm)") == Event(
        description="meeting", start="Mon 2pm", end="4pm"
    )


def test_decode_is_inverse_of_serialize_for_tricky_text() -> None:
    dec = TaskDecoder()
    tasks = [
        Todo(description="buy milk (by: tomorrow)"),
        Deadline(description="essay (by: draft)", by="Fri 5pm"),
        Event(description="[E][X] looks like a task", start="noon", end="1pm"),
    ]
    for task in tasks:
        assert dec.decode(task.serialize()) == task


@pytest.mark.parametrize(
    "line",
    [
        "",
        "read book",
        "[Q][ ] unknown type",
        "[T][?] bad status",
        "[T][ ] ",
        "[D][ ] no by part",
        "[E][ ] no range (from: Mon)",
    ],
)
def test_decode_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(TaskDecodeError) as ei:
        TaskDecoder().decode(line)
    assert ei.value.line == line


@pytest.mark.parametrize(
    "line",
    [
        "[T][ ] read book ",
        "[T][ ]  read book",
        "[D][ ] essay (by:  Fri)",
        "[E][ ] meeting (from: Mon  to: 4pm)",
    ],
)
def test_decode_rejects_non_canonical_lines(line: str) -> None:
    with pytest.raises(TaskDecodeError):
        TaskDecoder().decode(line)
