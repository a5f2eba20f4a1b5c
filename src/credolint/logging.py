# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support.

Core helpers never import a logger directly. They receive a :class:`LogSink`
so callers decide where messages end up; :func:`console_sink` adapts the Rich
helpers below to that contract for the CLI.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Final, Protocol

from rich.text import Text

from .console import detect_tty, get_console_manager

DEBUG_ENV_VAR: Final[str] = "CREDOLINT_DEBUG"


class LogLevel(str, Enum):
    """Enumerate severities accepted by :class:`LogSink` implementations."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogSink(Protocol):
    """Callable receiving a severity and message from core helpers."""

    def __call__(self, level: LogLevel, message: str) -> None:
        """Record ``message`` at ``level``."""


def emoji(symbol: str, enable: bool) -> str:
    """Select an emoji symbol based on the caller's preference.

    Args:
        symbol: Emoji text to include in the output.
        enable: Flag indicating whether emoji output is desired.

    Returns:
        str: Emoji symbol when enabled, otherwise an empty string.
    """

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    """Render ``msg`` to standard error using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty(stderr=True) if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji, stderr=True)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def debug_enabled() -> bool:
    """Return whether debug output was requested through the environment."""

    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() not in {"", "0", "false", "no"}


def debug(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a diagnostic message when :data:`DEBUG_ENV_VAR` is set.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    if not debug_enabled():
        return
    prefix = emoji("🔎 ", use_emoji)
    _print_line(f"{prefix}{msg}", style="dim", use_emoji=use_emoji, use_color=use_color)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    prefix = emoji("ℹ️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


class _ConsoleSink:
    """Route :class:`LogLevel` messages to the Rich console helpers."""

    __slots__ = ("_use_color", "_use_emoji")

    def __init__(self, *, use_emoji: bool, use_color: bool | None) -> None:
        self._use_emoji = use_emoji
        self._use_color = use_color

    def __call__(self, level: LogLevel, message: str) -> None:
        if level is LogLevel.DEBUG:
            debug(message, use_emoji=self._use_emoji, use_color=self._use_color)
        elif level is LogLevel.INFO:
            info(message, use_emoji=self._use_emoji, use_color=self._use_color)
        elif level is LogLevel.WARNING:
            warn(message, use_emoji=self._use_emoji, use_color=self._use_color)
        else:
            fail(message, use_emoji=self._use_emoji, use_color=self._use_color)


def console_sink(*, use_emoji: bool = True, use_color: bool | None = None) -> LogSink:
    """Return a :class:`LogSink` that prints through the Rich console helpers.

    Args:
        use_emoji: Flag indicating whether emoji prefixes are rendered.
        use_color: Optional explicit colour flag overriding TTY detection.

    Returns:
        LogSink: Sink suitable for passing into locator and builder helpers.
    """

    return _ConsoleSink(use_emoji=use_emoji, use_color=use_color)


def null_sink(level: LogLevel, message: str) -> None:
    """Discard ``message``; used when callers do not care about warnings."""

    del level, message


__all__ = [
    "DEBUG_ENV_VAR",
    "LogLevel",
    "LogSink",
    "console_sink",
    "debug",
    "debug_enabled",
    "emoji",
    "fail",
    "info",
    "null_sink",
    "warn",
]
