# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Environment construction for Credo subprocesses."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from .config.models import CredoSettings

PATH_VARIABLE: Final[str] = "PATH"


def command_environment(
    settings: CredoSettings,
    *,
    base_env: Mapping[str, str] | None = None,
    pathsep: str = os.pathsep,
) -> dict[str, str]:
    """Return the environment Credo should run with.

    The ambient environment is copied; when ``execute_path`` is configured it
    is placed ahead of the existing ``PATH`` entries.

    Args:
        settings: Credo settings supplying the optional search-path override.
        base_env: Environment to copy. Defaults to :data:`os.environ`.
        pathsep: Delimiter between ``PATH`` entries.

    Returns:
        dict[str, str]: Fresh environment mapping safe to mutate.
    """

    env = dict(os.environ if base_env is None else base_env)
    if settings.execute_path:
        path_value = env.get(PATH_VARIABLE, "")
        env[PATH_VARIABLE] = (
            f"{settings.execute_path}{pathsep}{path_value}" if path_value else settings.execute_path
        )
    return env


__all__ = ["PATH_VARIABLE", "command_environment"]
