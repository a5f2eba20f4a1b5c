# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from .loader import (
    ConfigLoader,
    ConfigLoadResult,
    PyProjectConfigSource,
    TomlConfigSource,
    load_config,
)
from .models import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_MERGE_BASE,
    MIX_PROJECT_FILE,
    ConfigError,
    CredoLintConfig,
    CredoSettings,
    DiffModeSettings,
    OutputSettings,
    WorkspaceBoundaryError,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_MERGE_BASE",
    "MIX_PROJECT_FILE",
    "ConfigError",
    "ConfigLoadResult",
    "ConfigLoader",
    "CredoLintConfig",
    "CredoSettings",
    "DiffModeSettings",
    "OutputSettings",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "WorkspaceBoundaryError",
    "load_config",
]
