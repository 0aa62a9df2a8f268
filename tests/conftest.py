# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from snowy.config import Settings
from snowy.storage.storage import Storage
from snowy.tasks.task_list import TaskList

from .fakes import FakeDecoder


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture()
def fake_storage(data_dir: Path) -> Storage:
    """Storage with a decoder that treats lines as opaque text."""
    return Storage(data_dir, "tasks.txt", decoder=FakeDecoder())


@pytest.fixture()
def storage(data_dir: Path) -> Storage:
    """Storage wired with the real TaskDecoder."""
    return Storage(data_dir, "tasks.txt")


@pytest.fixture()
def task_list(storage: Storage) -> TaskList:
    tasks = TaskList(storage)
    tasks.load()
    return tasks


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at a tmp data dir.

    Built directly rather than from the environment to keep tests isolated.
    """
    return Settings(
        app_name="Snowy",
        log_level="INFO",
        log_dir=tmp_path / "logs",
        log_to_file=False,
        data_dir=tmp_path / "data",
        task_file_name="snowy.txt",
    )

