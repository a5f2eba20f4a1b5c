# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolution of the active Credo configuration file for a document."""

from __future__ import annotations

import os
from pathlib import Path

from .config.models import CredoSettings
from .filesystem import strip_root_prefix
from .logging import LogLevel, LogSink
from .workspace import DocumentLocation, project_folder

CONFIG_SUBDIRECTORY = "config"


def project_markers(settings: CredoSettings) -> tuple[str, ...]:
    """Return project marker names in priority order for ``settings``.

    A relative configuration file name is itself the strongest marker,
    followed by the configured ``project_markers``.
    """

    name = settings.config_file_name
    markers: list[str] = []
    if not os.path.isabs(name):
        markers.append(name)
    markers.extend(marker for marker in settings.project_markers if marker not in markers)
    return tuple(markers)


def config_candidates(root: Path, name: str) -> tuple[Path, ...]:
    """Return candidate configuration paths under ``root`` in priority order.

    An absolute ``name`` is re-rooted under ``root`` rather than replacing it.
    """

    relative = Path(name)
    if relative.is_absolute():
        relative = relative.relative_to(relative.anchor)
    return (root / relative, root / CONFIG_SUBDIRECTORY / relative)


def resolve_config_file(
    document: DocumentLocation | None,
    settings: CredoSettings,
    *,
    log: LogSink,
    silent: bool = False,
) -> str | None:
    """Return the configuration file Credo should use for ``document``.

    An absolute ``configuration_file`` that exists is returned verbatim and
    skips the project search. Otherwise ``<root>/<name>`` and
    ``<root>/config/<name>`` are checked under the project folder, and the
    first existing candidate is returned relative to that folder.

    Args:
        document: Location of the linted document, if it has one.
        settings: Credo settings supplying the configuration file name.
        log: Sink receiving not-found and duplicate warnings.
        silent: Suppress the warnings when ``True``.

    Returns:
        str | None: Absolute override, project-relative path, or ``None``
        when no configuration file exists.

    Raises:
        WorkspaceBoundaryError: If the document lies outside the workspace
            folder it was paired with.
    """

    name = settings.config_file_name
    if os.path.isabs(name):
        if os.path.exists(name):
            return name
        log(LogLevel.DEBUG, f"{name} does not exist; searching the project instead")

    root = project_folder(document, project_markers(settings)) if document is not None else None
    found: list[Path] = []
    if root is not None:
        found = [candidate for candidate in config_candidates(root, name) if candidate.exists()]

    if not found:
        if not silent:
            log(LogLevel.WARNING, f"{name} file does not exist. Ignoring...")
        return None
    if len(found) > 1 and not silent:
        joined = ", ".join(str(candidate) for candidate in found)
        log(LogLevel.WARNING, f"Found multiple files ({joined}). I will use {found[0]}")
    return strip_root_prefix(found[0], root)


__all__ = ["CONFIG_SUBDIRECTORY", "config_candidates", "project_markers", "resolve_config_file"]
