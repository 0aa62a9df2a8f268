# tests/test_commands.py

from __future__ import annotations

import io
import logging

import pytest

from snowy.cli.bootstrap import create_task_list
from snowy.cli.commands import CommandRegistry, registry
from snowy.cli.main import run_repl
from snowy.config import Settings
from snowy.storage.storage import Storage
from snowy.tasks.task_list import TaskList

from .fakes import read_lines, write_lines


def test_command_registry_routes_and_aliases(task_list: TaskList) -> None:
    reg = CommandRegistry()
    called: list[str] = []

    def h(tasks, args):
        called.append(args)
        return "ok"

    reg.register("ping", h, "ping", aliases=["p"])

    assert reg.handle(task_list, "ping  hello ") == "ok"
    assert reg.handle(task_list, "P x") == "ok"
    assert called == ["hello", "x"]


def test_command_registry_unknown_and_blank(task_list: TaskList) -> None:
    reg = CommandRegistry()
    assert reg.handle(task_list, "   ") is None
    assert "Unknown command" in (reg.handle(task_list, "nope") or "")


def test_builtin_commands_drive_the_file(task_list: TaskList, storage: Storage) -> None:
    path = storage.path

    assert "added" in registry.handle(task_list, "todo read book")
    registry.handle(task_list, "deadline return book /by Sunday")
    registry.handle(task_list, "event meeting /from Mon 2pm /to 4pm")
    registry.handle(task_list, "mark 2")
    registry.handle(task_list, "delete 1")

    assert read_lines(path) == [
        "[D][X] return book (by: Sunday)",
        "[E][ ] meeting (from: Mon 2pm to: 4pm)",
    ]
    listing = registry.handle(task_list, "list")
    assert "1. [D][X] return book (by: Sunday)" in listing
    assert "meeting" in registry.handle(task_list, "find MEET")


def test_bad_input_becomes_a_reply(task_list: TaskList) -> None:
    assert registry.handle(task_list, "deadline no date").startswith("Oops!")
    assert registry.handle(task_list, "todo").startswith("Oops!")
    assert registry.handle(task_list, "mark two").startswith("Oops!")
    assert registry.handle(task_list, "delete 5").startswith("Oops!")
    assert len(task_list) == 0


def test_repl_stops_at_bye(settings: Settings) -> None:
    tasks = create_task_list(settings=settings)
    out = io.StringIO()

    run_repl(tasks, ["todo a\n", "list\n", "bye\n", "todo never\n"], out)

    assert read_lines(settings.task_file_path) == ["[T][ ] a"]
    assert "1. [T][ ] a" in out.getvalue()


def test_bootstrap_loads_existing_file(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True)
    write_lines(settings.task_file_path, ["[T][X] done already", "???"])

    tasks = create_task_list(settings=settings)

    assert [t.description for t in tasks] == ["done already"]


def test_unexpected_handler_error_is_logged_not_raised(
    task_list: TaskList, caplog: pytest.LogCaptureFixture
) -> None:
    reg = CommandRegistry()

    def broken(tasks, args):
        raise RuntimeError("kaboom")

    reg.register("broken", broken, "always fails")

    with caplog.at_level(logging.ERROR, logger="snowy.cli.commands"):
        reply = reg.handle(task_list, "broken now")

    assert reply is not None and "failed unexpectedly" in reply
    assert any(r.exc_info and "kaboom" in str(r.exc_info[1]) for r in caplog.records)
