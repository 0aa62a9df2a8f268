# src/snowy/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) at the storage boundary.

Storage never interprets task semantics: it only needs a single-line text form
to write and compare, and a decoder to turn lines back into tasks.
"""

from typing import Any, Protocol


class SerializableTask(Protocol):
    """Anything that can be stored as exactly one line (no embedded newline)."""

    def serialize(self) -> str: ...


class LineDecoder(Protocol):
    """Inverse of SerializableTask.serialize; raises TaskDecodeError on malformed input."""

    def decode(self, line: str) -> Any: ...
