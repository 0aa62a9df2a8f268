# src/snowy/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..errors import CommandError, SnowyError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, Todo

CommandHandler = Callable[[TaskList, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Word-command registry used by the REPL (list, todo, mark, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, tasks: TaskList, line: str) -> str | None:
        """
        Handle a string like "command args".
        Returns a reply string, or None for blank input.
        """
        text = line.strip()
        if not text:
            return None

        name, _, args = text.partition(" ")
        name = name.lower()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {name}. Type help to list available commands."

        try:
            return handler(tasks, args.strip())
        except SnowyError as exc:
            logger.info("Command %s failed: %s", name, exc)
            return f"Oops! {exc}"
        except Exception:
            logger.exception("Command %s crashed", name)
            return f"Sorry, {name} failed unexpectedly. See the log for details."

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _split_flag(text: str, flag: str) -> tuple[str, str]:
    head, sep, tail = text.partition(f" /{flag} ")
    if not sep:
        raise CommandError(f"Missing '/{flag}' part.")
    return head.strip(), tail.strip()


def _parse_index(args: str) -> int:
    try:
        return int(args.strip())
    except ValueError:
        raise CommandError(f"Expected a task number, got {args.strip()!r}.") from None


def _build(factory: Callable[[], Task]) -> Task:
    try:
        return factory()
    except ValueError as exc:
        raise CommandError(str(exc)) from exc


def _added(tasks: TaskList, task: Task) -> str:
    tasks.add(task)
    return f"Got it. I've added this task:\n  {task}\nNow you have {len(tasks)} task(s) in the list."


def cmd_help(tasks: TaskList, args: str) -> str:
    return registry.build_help()


def cmd_list(tasks: TaskList, args: str) -> str:
    if not len(tasks):
        return "Your task list is empty."
    lines = ["Here are the tasks in your list:"]
    lines.extend(f"{i}. {t}" for i, t in enumerate(tasks, start=1))
    return "\n".join(lines)


def cmd_todo(tasks: TaskList, args: str) -> str:
    return _added(tasks, _build(lambda: Todo(description=args)))


def cmd_deadline(tasks: TaskList, args: str) -> str:
    """deadline <description> /by <when>"""
    desc, by = _split_flag(f" {args} ", "by")
    return _added(tasks, _build(lambda: Deadline(description=desc, by=by)))


def cmd_event(tasks: TaskList, args: str) -> str:
    """event <description> /from <start> /to <end>"""
    desc, rest = _split_flag(f" {args} ", "from")
    start, end = _split_flag(f" {rest} ", "to")
    return _added(tasks, _build(lambda: Event(description=desc, start=start, end=end)))


def cmd_mark(tasks: TaskList, args: str) -> str:
    task = tasks.mark(_parse_index(args))
    return f"Nice! I've marked this task as done:\n  {task}"


def cmd_unmark(tasks: TaskList, args: str) -> str:
    task = tasks.unmark(_parse_index(args))
    return f"OK, I've marked this task as not done yet:\n  {task}"


def cmd_delete(tasks: TaskList, args: str) -> str:
    task = tasks.delete(_parse_index(args))
    return f"Noted. I've removed this task:\n  {task}\nNow you have {len(tasks)} task(s) in the list."


def cmd_find(tasks: TaskList, args: str) -> str:
    if not args:
        raise CommandError("Usage: find <keyword>")
    hits = tasks.find(args)
    if not hits:
        return f"No tasks match {args!r}."
    lines = ["Here are the matching tasks in your list:"]
    lines.extend(f"{i}. {t}" for i, t in hits)
    return "\n".join(lines)


def _register_builtin_commands() -> None:
    registry.register("help", cmd_help, "show this help", aliases=["?"])
    registry.register("list", cmd_list, "show all tasks", aliases=["ls"])
    registry.register("todo", cmd_todo, "todo <description>")
    registry.register("deadline", cmd_deadline, "deadline <description> /by <when>")
    registry.register("event", cmd_event, "event <description> /from <start> /to <end>")
    registry.register("mark", cmd_mark, "mark <n> as done")
    registry.register("unmark", cmd_unmark, "mark <n> as not done")
    registry.register("delete", cmd_delete, "delete task <n>", aliases=["rm"])
    registry.register("find", cmd_find, "find <keyword> in descriptions")


_register_builtin_commands()
