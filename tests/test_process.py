# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the subprocess runner and document linting flow."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

import pytest

from credolint.config import CredoSettings
from credolint.process import (
    TIMEOUT_EXIT_CODE,
    SubprocessToolRunner,
    ToolNotFoundError,
    ToolResult,
    lint_document,
)
from credolint.workspace import Workspace


class FakeRunner:
    def __init__(self) -> None:
        self.calls: list[dict[str, object]] = []

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None,
        env: Mapping[str, str],
        stdin: str | None,
    ) -> ToolResult:
        self.calls.append({"args": list(args), "cwd": cwd, "env": dict(env), "stdin": stdin})
        return ToolResult(args=tuple(args), returncode=0, stdout='{"issues": []}', stderr="")


def test_lint_document_runs_from_the_project_folder(workspace_root: Path, mix_app: Path, make_file, log_records) -> None:
    make_file(mix_app / "config" / ".credo.exs")
    document = Workspace([workspace_root]).locate(mix_app / "lib" / "app" / "worker.ex")
    runner = FakeRunner()
    settings = CredoSettings(execute_path="/opt/elixir/bin")

    result = lint_document(
        document,
        "defmodule App.Worker do\nend\n",
        settings,
        runner=runner,
        log=log_records,
        base_env={"PATH": "/usr/bin"},
    )

    assert result.returncode == 0
    (call,) = runner.calls
    assert call["args"] == [
        "credo",
        "--format",
        "json",
        "--read-from-stdin",
        "--config-file",
        str(Path("config") / ".credo.exs"),
    ]
    assert call["cwd"] == mix_app
    assert call["stdin"] == "defmodule App.Worker do\nend\n"
    env = call["env"]
    assert isinstance(env, dict)
    assert env["PATH"].startswith("/opt/elixir/bin")
    assert env["PATH"].endswith("/usr/bin")


def test_runner_reports_missing_executables(tmp_path: Path) -> None:
    runner = SubprocessToolRunner()

    with pytest.raises(ToolNotFoundError) as excinfo:
        runner.run(["credo-not-installed"], cwd=None, env={"PATH": str(tmp_path)}, stdin=None)

    assert excinfo.value.executable == "credo-not-installed"


def test_runner_rejects_empty_commands() -> None:
    with pytest.raises(ValueError):
        SubprocessToolRunner().run([], cwd=None, env={}, stdin=None)


def test_runner_captures_output_and_exit_code(tmp_path: Path) -> None:
    script = "import sys; data = sys.stdin.read(); print(data.upper()); sys.stderr.write('warn'); sys.exit(3)"

    result = SubprocessToolRunner().run(
        [sys.executable, "-c", script],
        cwd=tmp_path,
        env={"PATH": ""},
        stdin="hello",
    )

    assert result.returncode == 3
    assert result.stdout.strip() == "HELLO"
    assert result.stderr == "warn"
    assert result.args[0] == sys.executable


def test_runner_maps_timeouts(tmp_path: Path) -> None:
    runner = SubprocessToolRunner(timeout=0.2)

    result = runner.run(
        [sys.executable, "-c", "import time; time.sleep(5)"],
        cwd=tmp_path,
        env={"PATH": ""},
        stdin=None,
    )

    assert result.returncode == TIMEOUT_EXIT_CODE
    assert "timed out" in result.stderr
