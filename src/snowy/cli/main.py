# src/snowy/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task list, then runs a line-based REPL on
stdin until "bye" or EOF.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from ..cli.bootstrap import create_task_list
from ..cli.commands import registry
from ..config import get_settings
from ..errors import SnowyError
from ..logging_setup import setup_logging
from ..tasks.task_list import TaskList

logger = logging.getLogger(__name__)

EXIT_WORDS = frozenset({"bye", "exit", "quit"})


def run_repl(tasks: TaskList, lines: Iterable[str], out: TextIO, *, prompt: str = "") -> None:
    for raw in lines:
        line = raw.strip()
        if line.lower() in EXIT_WORDS:
            break
        reply = registry.handle(tasks, line)
        if reply is not None:
            print(reply, file=out)
        if prompt:
            print(prompt, end="", file=out, flush=True)


def main() -> int:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(
        log_dir=settings.log_dir if settings.log_to_file else None,
        console_level=console_level,
    )
    logger.info("Starting %s...", settings.app_name)

    try:
        tasks = create_task_list(settings=settings)
    except SnowyError as exc:
        print(f"Cannot open task file: {exc}", file=sys.stderr)
        return 1

    interactive = sys.stdin.isatty()
    prompt = "> " if interactive else ""
    print(f"Hello! I'm {settings.app_name}. You have {len(tasks)} task(s). Type help for commands.")
    if prompt:
        print(prompt, end="", flush=True)

    try:
        run_repl(tasks, sys.stdin, sys.stdout, prompt=prompt)
    except KeyboardInterrupt:
        print()

    print("Bye. Hope to see you again soon!")
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
