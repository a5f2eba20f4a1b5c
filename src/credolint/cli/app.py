# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

import json
import shlex

import typer

from ..command import build_command_arguments
from ..config import ConfigError
from ..environment import PATH_VARIABLE, command_environment
from ..locator import resolve_config_file
from ..logging import fail
from ..process import SubprocessToolRunner, ToolNotFoundError, lint_document
from .options import (
    CONFIG_ERROR_EXIT_CODE,
    EMOJI_OPTION,
    FILE_ARGUMENT,
    JSON_OPTION,
    ROOT_OPTION,
    SILENT_OPTION,
    WORKSPACE_OPTION,
    build_context,
)

NOT_FOUND_EXIT_CODE = 127

app = typer.Typer(
    name="credolint",
    help="Run Credo for editor integrations.",
    add_completion=False,
    no_args_is_help=True,
)


@app.command("command")
def command_cmd(
    file: FILE_ARGUMENT,
    workspace: WORKSPACE_OPTION = None,
    root: ROOT_OPTION = None,
    as_json: JSON_OPTION = False,
    silent: SILENT_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Print the Credo command line used to lint FILE."""

    ctx = build_context(workspace=workspace, root=root, silent=silent, emoji=emoji)
    try:
        args = build_command_arguments(ctx.locate(file), ctx.config.credo, log=ctx.log, silent=ctx.silent)
    except ConfigError as exc:
        fail(str(exc), use_emoji=ctx.use_emoji)
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from exc
    typer.echo(json.dumps(args) if as_json else shlex.join(args))


@app.command("config-file")
def config_file_cmd(
    file: FILE_ARGUMENT,
    workspace: WORKSPACE_OPTION = None,
    root: ROOT_OPTION = None,
    silent: SILENT_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Print the Credo configuration file that applies to FILE."""

    ctx = build_context(workspace=workspace, root=root, silent=silent, emoji=emoji)
    try:
        resolved = resolve_config_file(ctx.locate(file), ctx.config.credo, log=ctx.log, silent=ctx.silent)
    except ConfigError as exc:
        fail(str(exc), use_emoji=ctx.use_emoji)
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from exc
    if resolved is None:
        raise typer.Exit(code=1)
    typer.echo(resolved)


@app.command("env")
def env_cmd(
    workspace: WORKSPACE_OPTION = None,
    root: ROOT_OPTION = None,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Print the PATH Credo is launched with."""

    ctx = build_context(workspace=workspace, root=root, silent=True, emoji=emoji)
    env = command_environment(ctx.config.credo)
    typer.echo(env.get(PATH_VARIABLE, ""))


@app.command("run")
def run_cmd(
    file: FILE_ARGUMENT,
    workspace: WORKSPACE_OPTION = None,
    root: ROOT_OPTION = None,
    silent: SILENT_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Run Credo with FILE on standard input and echo its JSON report."""

    ctx = build_context(workspace=workspace, root=root, silent=silent, emoji=emoji)
    document = ctx.locate(file)
    if document is None:
        fail(f"{file} is not a file on disk", use_emoji=ctx.use_emoji)
        raise typer.Exit(code=1)
    try:
        text = document.path.read_text(encoding="utf-8")
    except OSError as exc:
        fail(f"Unable to read {file}: {exc}", use_emoji=ctx.use_emoji)
        raise typer.Exit(code=1) from exc
    try:
        result = lint_document(
            document,
            text,
            ctx.config.credo,
            runner=SubprocessToolRunner(),
            log=ctx.log,
            silent=ctx.silent,
        )
    except ConfigError as exc:
        fail(str(exc), use_emoji=ctx.use_emoji)
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from exc
    except ToolNotFoundError as exc:
        fail(str(exc), use_emoji=ctx.use_emoji)
        raise typer.Exit(code=NOT_FOUND_EXIT_CODE) from exc
    if result.stdout:
        typer.echo(result.stdout, nl=not result.stdout.endswith("\n"))
    if result.stderr:
        typer.echo(result.stderr, err=True, nl=False)
    raise typer.Exit(code=result.returncode)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]
