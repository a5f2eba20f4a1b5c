# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

import pytest

from credolint.config import CredoSettings
from credolint.environment import command_environment


def test_environment_is_a_copy_without_override() -> None:
    base = {"PATH": "/usr/bin", "MIX_ENV": "test"}

    env = command_environment(CredoSettings(), base_env=base)
    env["PATH"] = "/changed"

    assert base == {"PATH": "/usr/bin", "MIX_ENV": "test"}


def test_execute_path_is_prepended() -> None:
    settings = CredoSettings(execute_path="/opt/elixir/bin")

    env = command_environment(settings, base_env={"PATH": "/usr/bin:/bin"}, pathsep=":")

    assert env["PATH"] == "/opt/elixir/bin:/usr/bin:/bin"


def test_windows_delimiter() -> None:
    settings = CredoSettings(execute_path="C:\\Elixir\\bin")

    env = command_environment(settings, base_env={"PATH": "C:\\Windows"}, pathsep=";")

    assert env["PATH"] == "C:\\Elixir\\bin;C:\\Windows"


def test_execute_path_without_existing_path() -> None:
    env = command_environment(CredoSettings(execute_path="/opt/elixir/bin"), base_env={})

    assert env == {"PATH": "/opt/elixir/bin"}


def test_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATH", "/usr/local/bin")
    monkeypatch.setenv("CREDOLINT_MARKER", "1")

    env = command_environment(CredoSettings(execute_path="/asdf/shims"), pathsep=":")

    assert env["PATH"] == "/asdf/shims:/usr/local/bin"
    assert env["CREDOLINT_MARKER"] == "1"
