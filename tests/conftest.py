# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todolist.manager import TaskManager
from todolist.storage import FileStorage

from .fakes import FakeStorage


@pytest.fixture()
def task_file(tmp_path: Path) -> Path:
    return tmp_path / "todolist.json"


@pytest.fixture()
def file_storage(task_file: Path) -> FileStorage:
    return FileStorage(task_file)


@pytest.fixture()
def fake_storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def manager(fake_storage: FakeStorage) -> TaskManager:
    """TaskManager over an empty in-memory store"""
    return TaskManager(fake_storage)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep tests away from the real ~/.todolist.json and user env"""
    monkeypatch.delenv("TODOLIST_FILE", raising=False)
    monkeypatch.delenv("TODOLIST_LOG_LEVEL", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
