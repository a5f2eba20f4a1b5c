# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Assembly of the Credo command line from user settings."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from .config.models import DEFAULT_CONFIG_FILE, DEFAULT_MERGE_BASE, CredoSettings
from .locator import resolve_config_file
from .logging import LogSink
from .workspace import DocumentLocation

DEFAULT_COMMAND: Final[str] = "credo"
DIFF_COMMAND: Final[str] = "diff"
DEFAULT_COMMAND_ARGUMENTS: Final[tuple[str, ...]] = ("--format", "json", "--read-from-stdin")

CONFIG_FILE_FLAG: Final[str] = "--config-file"
CONFIG_NAME_FLAG: Final[str] = "--config-name"
WITH_TAG_FLAG: Final[str] = "--checks-with-tag"
WITHOUT_TAG_FLAG: Final[str] = "--checks-without-tag"
STRICT_FLAG: Final[str] = "--strict"
MERGE_BASE_FLAG: Final[str] = "--from-git-merge-base"


def _append_flagged(command: list[str], value: str, flag: str) -> None:
    """Append ``flag`` and ``value`` to ``command``."""

    command.extend([flag, value])


def _append_each(command: list[str], values: Iterable[str], flag: str) -> None:
    for value in values:
        _append_flagged(command, value, flag)


def command_prefix(settings: CredoSettings) -> list[str]:
    """Return the executable and subcommand that start the command line."""

    if settings.diff_mode.enabled:
        return [DEFAULT_COMMAND, DIFF_COMMAND]
    return [DEFAULT_COMMAND]


def build_command_arguments(
    document: DocumentLocation | None,
    settings: CredoSettings,
    *,
    log: LogSink,
    silent: bool = False,
) -> list[str]:
    """Return the full argument list for running Credo against ``document``.

    Flags follow a fixed order: output format and stdin input, configuration
    file, configuration name, tag filters, strict mode, then the merge base.
    Include tags take precedence; exclude tags are only emitted when no
    include tag is configured. Diff mode swaps the prefix for ``credo diff``.

    Args:
        document: Location of the linted document, if it has one.
        settings: Credo settings to translate into flags.
        log: Sink receiving configuration lookup warnings.
        silent: Suppress configuration lookup warnings.

    Returns:
        list[str]: Command tokens ready for a process launcher.
    """

    arguments = list(DEFAULT_COMMAND_ARGUMENTS)

    config_file = resolve_config_file(document, settings, log=log, silent=silent)
    if config_file:
        _append_flagged(arguments, config_file, CONFIG_FILE_FLAG)

    if settings.credo_configuration:
        _append_flagged(arguments, settings.credo_configuration, CONFIG_NAME_FLAG)

    if settings.checks_with_tag:
        _append_each(arguments, settings.checks_with_tag, WITH_TAG_FLAG)
    elif settings.checks_without_tag:
        _append_each(arguments, settings.checks_without_tag, WITHOUT_TAG_FLAG)

    if settings.strict_mode:
        arguments.append(STRICT_FLAG)

    if settings.diff_mode.enabled:
        _append_flagged(arguments, settings.diff_mode.effective_merge_base, MERGE_BASE_FLAG)

    return [*command_prefix(settings), *arguments]


__all__ = [
    "CONFIG_FILE_FLAG",
    "CONFIG_NAME_FLAG",
    "DEFAULT_COMMAND",
    "DEFAULT_COMMAND_ARGUMENTS",
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_MERGE_BASE",
    "DIFF_COMMAND",
    "MERGE_BASE_FLAG",
    "STRICT_FLAG",
    "WITHOUT_TAG_FLAG",
    "WITH_TAG_FLAG",
    "build_command_arguments",
    "command_prefix",
]
