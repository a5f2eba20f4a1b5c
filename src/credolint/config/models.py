# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models describing how Credo should be invoked."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CONFIG_FILE: Final[str] = ".credo.exs"
DEFAULT_MERGE_BASE: Final[str] = "main"
MIX_PROJECT_FILE: Final[str] = "mix.exs"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class WorkspaceBoundaryError(ConfigError):
    """Raised when an upward search boundary is not an ancestor of its start."""


def _coerce_tags(value: Any) -> tuple[str, ...]:
    """Return ``value`` as a tuple of non-empty tag names.

    Args:
        value: Raw tag payload; a single string or an iterable of strings.

    Returns:
        tuple[str, ...]: Tags with surrounding whitespace and blanks removed.

    Raises:
        ValueError: If ``value`` is neither a string nor an iterable of strings.
    """

    if value is None:
        return ()
    if isinstance(value, str):
        value = (value,)
    if not isinstance(value, Iterable):
        raise ValueError("tags must be a string or a list of strings")
    tags: list[str] = []
    for entry in value:
        if not isinstance(entry, str):
            raise ValueError("tags must be strings")
        stripped = entry.strip()
        if stripped:
            tags.append(stripped)
    return tuple(tags)


class DiffModeSettings(BaseModel):
    """Settings for analysing only the changes relative to a merge base."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    enabled: bool = False
    merge_base: str | None = None

    @property
    def effective_merge_base(self) -> str:
        """Return the configured merge base or :data:`DEFAULT_MERGE_BASE`."""

        return self.merge_base or DEFAULT_MERGE_BASE


class CredoSettings(BaseModel):
    """User settings that shape the Credo command line and environment.

    When ``checks_with_tag`` is non-empty ``checks_without_tag`` is ignored by
    the command builder regardless of its contents.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    configuration_file: str = DEFAULT_CONFIG_FILE
    credo_configuration: str | None = None
    checks_with_tag: tuple[str, ...] = ()
    checks_without_tag: tuple[str, ...] = ()
    strict_mode: bool = False
    diff_mode: DiffModeSettings = Field(default_factory=DiffModeSettings)
    execute_path: str | None = None
    project_markers: tuple[str, ...] = (MIX_PROJECT_FILE,)

    @field_validator("checks_with_tag", "checks_without_tag", "project_markers", mode="before")
    @classmethod
    def _normalise_tags(cls, value: Any) -> tuple[str, ...]:
        """Coerce scalar or list payloads into tuples of names.

        Args:
            value: Raw value supplied for a tag or marker field.

        Returns:
            tuple[str, ...]: Normalised names.
        """

        return _coerce_tags(value)

    @field_validator("credo_configuration", "execute_path", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def config_file_name(self) -> str:
        """Return the configured file name, defaulting to ``.credo.exs``."""

        return self.configuration_file or DEFAULT_CONFIG_FILE


class OutputSettings(BaseModel):
    """Presentation preferences for CLI output."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    color: bool | None = None
    emoji: bool = True
    silent: bool = False


class CredoLintConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    credo: CredoSettings = Field(default_factory=CredoSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation of the configuration."""

        return self.model_dump(mode="json")


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_MERGE_BASE",
    "MIX_PROJECT_FILE",
    "ConfigError",
    "CredoLintConfig",
    "CredoSettings",
    "DiffModeSettings",
    "OutputSettings",
    "WorkspaceBoundaryError",
]
