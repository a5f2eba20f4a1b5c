# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around running Credo as a subprocess."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; arguments are passed as a list and
# ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Protocol

from .command import build_command_arguments
from .config.models import CredoSettings
from .environment import PATH_VARIABLE, command_environment
from .locator import project_markers
from .logging import LogLevel, LogSink
from .workspace import DocumentLocation, project_folder

TIMEOUT_EXIT_CODE: Final[int] = 124


class ToolNotFoundError(FileNotFoundError):
    """Raised when the Credo executable cannot be found on ``PATH``."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"Executable '{executable}' was not found on PATH")
        self.executable = executable


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Captured outcome of a single tool invocation."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


class ToolRunner(Protocol):
    """Run an external tool and capture its output."""

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None,
        env: Mapping[str, str],
        stdin: str | None,
    ) -> ToolResult:
        """Execute ``args`` and return the captured result."""


def _normalize_args(args: Sequence[str], env: Mapping[str, str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head, path=env.get(PATH_VARIABLE))
    if resolved is None:
        raise ToolNotFoundError(head)
    return [resolved, *rest]


class SubprocessToolRunner:
    """Run tools with :func:`subprocess.run`, never through a shell."""

    def __init__(self, *, timeout: float | None = None) -> None:
        self._timeout = timeout

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None,
        env: Mapping[str, str],
        stdin: str | None,
    ) -> ToolResult:
        """Execute ``args`` after resolving the executable against ``env``.

        Args:
            args: Command tokens; the first is the executable.
            cwd: Working directory for the process.
            env: Complete environment for the process.
            stdin: Text written to standard input, or ``None`` to close it.

        Returns:
            ToolResult: Captured exit status and output. Timeouts are reported
            with exit code ``124``.

        Raises:
            ToolNotFoundError: If the executable cannot be located.
        """

        normalized = _normalize_args(args, env)
        try:
            # Bandit: arguments come from the command builder and are passed
            # without shell expansion.
            completed = subprocess.run(  # nosec B603
                normalized,
                cwd=str(cwd) if cwd is not None else None,
                env=dict(env),
                input=stdin,
                stdin=subprocess.DEVNULL if stdin is None else None,
                check=False,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired as exc:
            stdout = _ensure_text(exc.stdout)
            stderr = _ensure_text(exc.stderr)
            timeout_msg = f"Command timed out after {self._timeout:.1f}s"
            return ToolResult(
                args=tuple(normalized),
                returncode=TIMEOUT_EXIT_CODE,
                stdout=stdout,
                stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
            )
        return ToolResult(
            args=tuple(normalized),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )


def _ensure_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value.decode(errors="ignore")


def lint_document(
    document: DocumentLocation,
    text: str,
    settings: CredoSettings,
    *,
    runner: ToolRunner,
    log: LogSink,
    silent: bool = False,
    base_env: Mapping[str, str] | None = None,
) -> ToolResult:
    """Run Credo over ``text`` as the contents of ``document``.

    The process runs from the project folder so the project-relative
    ``--config-file`` value resolves correctly.

    Args:
        document: Location of the linted document.
        text: Document contents streamed on standard input.
        settings: Credo settings shaping the command and environment.
        runner: Collaborator that executes the command.
        log: Sink receiving configuration lookup warnings.
        silent: Suppress configuration lookup warnings.
        base_env: Environment to extend. Defaults to :data:`os.environ`.

    Returns:
        ToolResult: Raw output of the Credo run.
    """

    args = build_command_arguments(document, settings, log=log, silent=silent)
    env = command_environment(settings, base_env=base_env)
    cwd = project_folder(document, project_markers(settings))
    log(LogLevel.DEBUG, f"running {' '.join(args)} in {cwd}")
    return runner.run(args, cwd=cwd, env=env, stdin=text)


__all__ = [
    "TIMEOUT_EXIT_CODE",
    "SubprocessToolRunner",
    "ToolNotFoundError",
    "ToolResult",
    "ToolRunner",
    "lint_document",
]
