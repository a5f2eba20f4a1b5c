# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from credolint.logging import DEBUG_ENV_VAR, LogLevel


@dataclass
class RecordingSink:
    """Log sink that keeps every message for later assertions."""

    records: list[tuple[LogLevel, str]] = field(default_factory=list)

    def __call__(self, level: LogLevel, message: str) -> None:
        self.records.append((level, message))

    def messages(self, level: LogLevel) -> list[str]:
        return [message for recorded, message in self.records if recorded is level]


def touch(path: Path, content: str = "") -> Path:
    """Create ``path`` and its parents, returning ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep user-level settings and debug toggles out of every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)
    return home


@pytest.fixture
def log_records() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def mix_app(workspace_root: Path) -> Path:
    """Return a Mix project inside the workspace with a source file under ``lib``."""
    app = workspace_root / "app"
    touch(app / "mix.exs", "defmodule App.MixProject do\nend\n")
    touch(app / "lib" / "app" / "worker.ex", "defmodule App.Worker do\nend\n")
    return app


@pytest.fixture
def make_file():
    """Return a helper that creates files together with their parents."""
    return touch
