# src/snowy/storage/storage.py

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import tempfile
from collections.abc import Callable, MutableSequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..core.ports import LineDecoder, SerializableTask
from ..errors import (
    StorageReadError,
    StorageRewriteError,
    StorageSetupError,
    StorageWriteError,
    TaskDecodeError,
)
from .task_decoder import TaskDecoder

logger = logging.getLogger(__name__)

# Given a line, return the replacement line or None to drop it.
LineRewrite = Callable[[str], "str | None"]


@dataclass(slots=True)
class SkippedLine:
    line_number: int
    line: str
    reason: str


@dataclass(slots=True)
class LoadReport:
    loaded: int = 0
    skipped: list[SkippedLine] = field(default_factory=list)


def _require_single_line(text: str) -> str:
    if "\n" in text or "\r" in text:
        raise ValueError("task text must not contain a line break")
    return text


class Storage:
    """
    Plain-text task file: one serialized task per line, in insertion order.

    File lifecycle:
    - the data directory and an empty file are created on construction if missing
    - an existing file is never cleared on construction (use clear() explicitly)
    - append_task() only appends
    - delete_task()/edit_task() stream into a uniquely named sibling staging file
      and swap it over the original with os.replace

    Matching is full-line and exact. By default every equal line is affected;
    pass occurrence=n to touch only the n-th (0-based) equal line.

    Not safe for concurrent use: one process, one instance per file.
    """

    def __init__(
        self,
        directory_path: str | Path,
        file_name: str,
        decoder: LineDecoder | None = None,
    ) -> None:
        self._dir = Path(directory_path)
        self._path = self._dir / file_name
        self._decoder: LineDecoder = decoder if decoder is not None else TaskDecoder()

        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            self._path.touch(exist_ok=True)
        except OSError as exc:
            logger.error("Storage setup failed path=%s: %s", self._path, exc)
            raise StorageSetupError(f"Cannot set up task file {self._path}: {exc}", self._path) from exc

        logger.info("Storage ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- writes ----

    def clear(self) -> None:
        """Truncate the task file to zero length, keeping the file in place."""
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                f.write("")
        except OSError as exc:
            logger.error("Failed to clear %s: %s", self._path, exc)
            raise StorageWriteError(f"Failed to clear file: {exc}", self._path) from exc
        logger.debug("Task file cleared path=%s", self._path)

    def append_task(self, task: SerializableTask) -> None:
        line = _require_single_line(task.serialize())
        try:
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(line)
                f.write("\n")
        except OSError as exc:
            logger.error("Failed to append to %s: %s", self._path, exc)
            raise StorageWriteError(f"Error while writing to file: {exc}", self._path) from exc
        logger.debug("Task appended: %s", line)

    def delete_task(self, task: SerializableTask, *, occurrence: int | None = None) -> int:
        """Remove lines equal to task.serialize(). Returns how many were removed."""
        target = task.serialize()
        removed = self._rewrite(target, lambda _line: None, occurrence=occurrence)
        logger.info("Deleted %d line(s) matching %r", removed, target)
        return removed

    def edit_task(self, before: str, after: str, *, occurrence: int | None = None) -> int:
        """Replace lines equal to `before` with `after`. Returns how many were rewritten."""
        _require_single_line(after)
        edited = self._rewrite(before, lambda _line: after, occurrence=occurrence)
        logger.info("Edited %d line(s) %r -> %r", edited, before, after)
        return edited

    def _rewrite(self, target: str, replace: LineRewrite, *, occurrence: int | None) -> int:
        seen = 0
        affected = 0
        tmp_path: Path | None = None
        try:
            with (
                open(self._path, encoding="utf-8") as src,
                tempfile.NamedTemporaryFile(
                    "w",
                    encoding="utf-8",
                    dir=self._dir,
                    prefix=f".{self._path.name}.",
                    suffix=".tmp",
                    delete=False,
                ) as dst,
            ):
                tmp_path = Path(dst.name)
                for raw in src:
                    line = raw.rstrip("\n")
                    if line == target:
                        hit = occurrence is None or seen == occurrence
                        seen += 1
                        if hit:
                            affected += 1
                            new_line = replace(line)
                            if new_line is not None:
                                dst.write(new_line)
                                dst.write("\n")
                            continue
                    dst.write(line)
                    dst.write("\n")

            if affected:
                shutil.copymode(self._path, tmp_path)
                os.replace(tmp_path, self._path)
                tmp_path = None
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Rewrite of %s failed: %s", self._path, exc)
            raise StorageRewriteError(f"Failed to rewrite task file: {exc}", self._path) from exc
        finally:
            if tmp_path is not None:
                with contextlib.suppress(OSError):
                    tmp_path.unlink()

        return affected

    # ---- reads ----

    def load_tasks(self, into: MutableSequence[Any]) -> LoadReport:
        """
        Decode every line into `into`, in file order.

        Malformed lines are skipped and reported; they never abort the load.
        `into` is only extended after the whole file has been read, so a read
        failure leaves it untouched.
        """
        report = LoadReport()
        decoded: list[Any] = []
        try:
            with open(self._path, encoding="utf-8") as f:
                for line_number, raw in enumerate(f, start=1):
                    line = raw.rstrip("\n")
                    if not line.strip():
                        continue
                    try:
                        decoded.append(self._decoder.decode(line))
                    except TaskDecodeError as exc:
                        logger.warning("Skipping line %d of %s: %s", line_number, self._path, exc)
                        report.skipped.append(SkippedLine(line_number, line, str(exc)))
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to read %s: %s", self._path, exc)
            raise StorageReadError(f"Failed to read task file: {exc}", self._path) from exc

        into.extend(decoded)
        report.loaded = len(decoded)
        logger.info(
            "Loaded %d task(s) from %s (skipped=%d)", report.loaded, self._path, len(report.skipped)
        )
        return report
