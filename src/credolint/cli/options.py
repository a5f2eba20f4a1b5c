# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared Typer parameters and the context they resolve to."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..config import ConfigError, ConfigLoader, CredoLintConfig
from ..logging import LogSink, console_sink, fail
from ..workspace import DocumentLocation, Workspace

FILE_ARGUMENT = Annotated[
    Path,
    typer.Argument(help="Elixir source file being linted.", dir_okay=False),
]
WORKSPACE_OPTION = Annotated[
    list[Path] | None,
    typer.Option(
        "--workspace",
        "-w",
        help="Workspace folder open in the editor; repeat for multi-root workspaces.",
        file_okay=False,
    ),
]
ROOT_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--root",
        "-r",
        help="Directory holding credolint settings. Defaults to the first workspace folder.",
        file_okay=False,
    ),
]
SILENT_OPTION = Annotated[
    bool,
    typer.Option("--silent/--no-silent", help="Suppress configuration lookup warnings."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in CLI output."),
]
JSON_OPTION = Annotated[
    bool,
    typer.Option("--json", help="Print the command as a JSON array."),
]

CONFIG_ERROR_EXIT_CODE = 2


@dataclass(slots=True)
class CLIContext:
    """Normalised CLI inputs shared by every command."""

    config: CredoLintConfig
    workspace: Workspace
    log: LogSink
    silent: bool
    use_emoji: bool

    def locate(self, file: Path) -> DocumentLocation | None:
        """Return the location of ``file`` within the workspace."""

        return self.workspace.locate(file)


def build_context(
    *,
    workspace: list[Path] | None,
    root: Path | None,
    silent: bool,
    emoji: bool,
) -> CLIContext:
    """Load settings and construct the shared :class:`CLIContext`.

    Args:
        workspace: Workspace folders; the current directory when omitted.
        root: Directory to load settings from.
        silent: ``--silent`` flag supplied on the command line.
        emoji: ``--emoji`` flag supplied on the command line.

    Returns:
        CLIContext: Context ready for command execution.

    Raises:
        typer.Exit: When the settings cannot be loaded.
    """

    folders = list(workspace) if workspace else [Path.cwd()]
    settings_root = root if root is not None else folders[0]
    try:
        config = ConfigLoader.for_root(settings_root).load()
    except ConfigError as exc:
        fail(str(exc), use_emoji=emoji)
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from exc
    output = config.output
    use_emoji = emoji and output.emoji
    return CLIContext(
        config=config,
        workspace=Workspace(folders),
        log=console_sink(use_emoji=use_emoji, use_color=output.color),
        silent=silent or output.silent,
        use_emoji=use_emoji,
    )


__all__ = [
    "CONFIG_ERROR_EXIT_CODE",
    "CLIContext",
    "EMOJI_OPTION",
    "FILE_ARGUMENT",
    "JSON_OPTION",
    "ROOT_OPTION",
    "SILENT_OPTION",
    "WORKSPACE_OPTION",
    "build_context",
]
