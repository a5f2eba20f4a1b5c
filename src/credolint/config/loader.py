# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration sources and the tiered loader that merges them."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from string import Template
from typing import Any, Final, Protocol

from pydantic import ValidationError

from .models import ConfigError, CredoLintConfig

PYPROJECT_FILE: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[tuple[str, ...]] = ("tool", "credolint")
PROJECT_CONFIG_NAME: Final[str] = ".credolint.toml"
USER_CONFIG_NAME: Final[str] = ".credolint.toml"

# Credo settings that hold filesystem paths and accept ``$VAR`` references.
PATH_SETTINGS: Final[tuple[str, ...]] = ("execute_path", "configuration_file")


class ConfigSource(Protocol):
    """Source of a configuration fragment."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return the configuration fragment provided by the source."""

    def describe(self) -> str:
        """Return a human-readable description of the source."""


def _merge_tables(lower: Mapping[str, Any], upper: Mapping[str, Any]) -> dict[str, Any]:
    """Overlay ``upper`` on ``lower``; nested tables merge key by key."""

    merged = dict(lower)
    for key, value in upper.items():
        below = merged.get(key)
        merged[key] = (
            _merge_tables(below, value) if isinstance(below, Mapping) and isinstance(value, Mapping) else value
        )
    return merged


def _expand_path_settings(data: Mapping[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    """Substitute environment references inside the Credo path settings.

    Unknown variables are left untouched so Credo reports the literal path.
    """

    credo = data.get("credo")
    if not isinstance(credo, Mapping):
        return dict(data)
    expanded = dict(credo)
    for key in PATH_SETTINGS:
        value = expanded.get(key)
        if isinstance(value, str):
            expanded[key] = Template(value).safe_substitute(env)
    return {**data, "credo": expanded}


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return CredoLintConfig().to_dict()

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource:
    """Read a standalone ``.credolint.toml`` document; absent files contribute nothing."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self.path = path
        self.name = name or str(path)

    def load(self) -> Mapping[str, Any]:
        if not self.path.is_file():
            return {}
        return _read_toml(self.path)

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read the ``[tool.credolint]`` table of a ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        table: Any = super().load()
        for key in PYPROJECT_SECTION:
            table = table.get(key) if isinstance(table, Mapping) else None
        return dict(table) if isinstance(table, Mapping) else {}

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


@dataclass(slots=True)
class ConfigLoadResult:
    """Resolved configuration together with the sources that contributed."""

    config: CredoLintConfig
    sources: list[str] = field(default_factory=list)


class ConfigLoader:
    """Load and merge configuration sources for a project root."""

    def __init__(
        self,
        *,
        project_root: Path,
        sources: Sequence[ConfigSource],
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Initialise a loader that merges the supplied configuration sources.

        Args:
            project_root: Directory that anchors relative paths.
            sources: Ordered collection of configuration sources; later sources win.
            env: Environment used to expand ``$VAR`` in path settings.

        Raises:
            ValueError: If ``sources`` is empty.
        """

        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = list(sources)
        self._project_root = project_root.resolve()
        self._env = env if env is not None else os.environ

    @property
    def project_root(self) -> Path:
        """Return the resolved project root anchoring this loader."""

        return self._project_root

    @classmethod
    def for_root(
        cls,
        project_root: Path,
        *,
        user_config: Path | None = None,
        project_config: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> ConfigLoader:
        """Build a loader that respects user, project, and default sources.

        Args:
            project_root: Workspace root used to discover configuration files.
            user_config: Optional path to a user-level override.
            project_config: Optional project-level override path.
            env: Optional environment mapping used for path expansion.

        Returns:
            ConfigLoader: Loader configured with default precedence ordering.
        """

        root = project_root.resolve()
        home_config = user_config if user_config is not None else Path.home() / USER_CONFIG_NAME
        project_file = project_config if project_config is not None else root / PROJECT_CONFIG_NAME
        sources: list[ConfigSource] = [
            DefaultConfigSource(),
            TomlConfigSource(home_config),
            PyProjectConfigSource(root / PYPROJECT_FILE),
            TomlConfigSource(project_file),
        ]
        return cls(project_root=root, sources=sources, env=env)

    def load(self) -> CredoLintConfig:
        """Return the resolved configuration."""

        return self.load_with_trace().config

    def load_with_trace(self) -> ConfigLoadResult:
        """Return the resolved configuration with the contributing source names.

        Returns:
            ConfigLoadResult: Resolved configuration and provenance details.

        Raises:
            ConfigError: If a source is unreadable or the merged data is invalid.
        """

        merged: dict[str, Any] = {}
        contributing: list[str] = []
        for source in self._sources:
            fragment = source.load()
            if not fragment:
                continue
            merged = _merge_tables(merged, fragment)
            contributing.append(source.name)
        try:
            config = CredoLintConfig.model_validate(_expand_path_settings(merged, self._env))
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc
        return ConfigLoadResult(config=config, sources=contributing)


def load_config(project_root: Path) -> CredoLintConfig:
    """Load configuration for ``project_root`` using the default tiered sources."""

    return ConfigLoader.for_root(project_root).load()


__all__ = [
    "PATH_SETTINGS",
    "PROJECT_CONFIG_NAME",
    "ConfigLoadResult",
    "ConfigLoader",
    "ConfigSource",
    "DefaultConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "load_config",
]
