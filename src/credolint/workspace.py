# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Utilities for reasoning about documents and their owning workspace folders."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final
from urllib.parse import urlparse
from urllib.request import url2pathname

from .config.models import MIX_PROJECT_FILE
from .filesystem import find_up, find_up_first, is_within

FILE_SCHEME: Final[str] = "file"


def is_file_uri(uri: str) -> bool:
    """Return whether ``uri`` uses the ``file`` scheme.

    Args:
        uri: Document identifier supplied by an editor.

    Returns:
        bool: ``True`` for ``file:`` URIs, ``False`` for ``untitled:`` and others.
    """

    return urlparse(uri).scheme == FILE_SCHEME


def uri_to_path(uri: str) -> Path:
    """Return the filesystem path addressed by a ``file:`` URI.

    Raises:
        ValueError: If ``uri`` does not use the ``file`` scheme.
    """

    parsed = urlparse(uri)
    if parsed.scheme != FILE_SCHEME:
        raise ValueError(f"not a file URI: {uri}")
    if parsed.netloc and parsed.netloc != "localhost":
        return Path(url2pathname(f"//{parsed.netloc}{parsed.path}"))
    return Path(url2pathname(parsed.path))


@dataclass(frozen=True, slots=True)
class DocumentLocation:
    """Filesystem location of a source document and its workspace folder."""

    path: Path
    workspace_folder: Path | None = None

    @property
    def directory(self) -> Path:
        """Return the directory containing the document."""

        return self.path.parent

    @classmethod
    def from_uri(cls, uri: str, workspace: Workspace | None = None) -> DocumentLocation | None:
        """Build a location from an editor URI.

        Args:
            uri: Document URI; only ``file:`` URIs map to a location.
            workspace: Optional workspace used to find the owning folder.

        Returns:
            DocumentLocation | None: Location for file URIs, otherwise ``None``.
        """

        if not is_file_uri(uri):
            return None
        return cls.from_path(uri_to_path(uri), workspace)

    @classmethod
    def from_path(cls, path: str | os.PathLike[str], workspace: Workspace | None = None) -> DocumentLocation:
        """Build a location from a filesystem path."""

        absolute = Path(os.path.normpath(Path(path).expanduser().absolute()))
        folder = workspace.folder_for(absolute) if workspace is not None else None
        return cls(path=absolute, workspace_folder=folder)


class Workspace:
    """Set of folders the editor has open."""

    def __init__(self, folders: Iterable[str | os.PathLike[str]] = ()) -> None:
        self._folders: tuple[Path, ...] = tuple(
            Path(os.path.normpath(Path(folder).expanduser().absolute())) for folder in folders
        )

    @property
    def folders(self) -> tuple[Path, ...]:
        """Return the workspace folders in declaration order."""

        return self._folders

    def folder_for(self, path: str | os.PathLike[str]) -> Path | None:
        """Return the deepest workspace folder containing ``path``.

        Args:
            path: Document path to look up.

        Returns:
            Path | None: Owning folder, or ``None`` when ``path`` is outside
            every folder.
        """

        owners = [folder for folder in self._folders if is_within(path, folder)]
        if not owners:
            return None
        return max(owners, key=lambda folder: len(folder.parts))

    def locate(self, document: str | os.PathLike[str]) -> DocumentLocation | None:
        """Return the location of ``document`` given as a path or URI.

        Single-letter schemes are treated as Windows drive letters, not URIs.
        """

        if isinstance(document, str) and len(urlparse(document).scheme) > 1:
            return DocumentLocation.from_uri(document, self)
        return DocumentLocation.from_path(document, self)


def in_mix_project(document: DocumentLocation) -> bool:
    """Return whether ``document`` belongs to a Mix project inside its workspace.

    Args:
        document: Location of the source document.

    Returns:
        bool: ``True`` when ``mix.exs`` is found between the document and its
        workspace folder; ``False`` for documents outside any workspace.
    """

    if document.workspace_folder is None:
        return False
    found = find_up(MIX_PROJECT_FILE, start_at=document.directory, stop_at=document.workspace_folder)
    return found is not None


def project_folder(document: DocumentLocation, markers: Sequence[str]) -> Path:
    """Return the project folder that anchors configuration lookups.

    The first marker found upward from the document, bounded by its workspace
    folder, wins; otherwise the workspace folder, otherwise the document's
    own directory.

    Args:
        document: Location of the source document.
        markers: File names marking a project root, in priority order.

    Returns:
        Path: Directory used as the project root.
    """

    workspace_folder = document.workspace_folder
    if workspace_folder is None:
        return document.directory
    found = find_up_first(markers, start_at=document.directory, stop_at=workspace_folder)
    return found if found is not None else workspace_folder


__all__ = [
    "DocumentLocation",
    "Workspace",
    "in_mix_project",
    "is_file_uri",
    "project_folder",
    "uri_to_path",
]
