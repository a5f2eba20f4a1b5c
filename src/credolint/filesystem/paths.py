# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reasoning about filesystem paths and upward searches."""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from itertools import chain
from os import PathLike
from pathlib import Path

from ..config.models import WorkspaceBoundaryError

_Pathish = str | PathLike[str] | Path


def _absolute(path: _Pathish) -> Path:
    """Return ``path`` made absolute and lexically normalised.

    Symlinks are left untouched so the result stays comparable with the
    paths callers hand in.
    """

    return Path(os.path.normpath(Path(path).expanduser().absolute()))


def iter_ancestors(start_at: _Pathish, stop_at: _Pathish | None = None) -> Iterator[Path]:
    """Yield ``start_at`` followed by its ancestors, ending at ``stop_at``.

    Args:
        start_at: Directory where the walk begins.
        stop_at: Inclusive upper bound. ``None`` walks to the filesystem root.

    Yields:
        Path: Directories from ``start_at`` upward.

    Raises:
        WorkspaceBoundaryError: If ``stop_at`` is neither ``start_at`` nor one
            of its ancestors.
    """

    start = _absolute(start_at)
    stop = _absolute(stop_at) if stop_at is not None else None
    if stop is not None and stop != start and stop not in start.parents:
        raise WorkspaceBoundaryError(f"search boundary {stop} is not an ancestor of {start}")
    for directory in chain([start], start.parents):
        yield directory
        if directory == stop:
            return


def find_up(name: str, *, start_at: _Pathish, stop_at: _Pathish | None = None) -> Path | None:
    """Return the nearest directory at or above ``start_at`` containing ``name``.

    Args:
        name: File name looked up in each directory.
        start_at: Directory where the search begins.
        stop_at: Inclusive upper bound of the search.

    Returns:
        Path | None: Directory holding ``name`` or ``None`` once the boundary
        is reached without a match.

    Raises:
        WorkspaceBoundaryError: If ``stop_at`` is not an ancestor of ``start_at``.
    """

    for directory in iter_ancestors(start_at, stop_at):
        if (directory / name).exists():
            return directory
    return None


def find_up_first(
    names: Sequence[str],
    *,
    start_at: _Pathish,
    stop_at: _Pathish | None = None,
) -> Path | None:
    """Return the directory of the first name in ``names`` found upward.

    Names are tried in order; a later name is only searched for when every
    earlier name is absent within the boundary.
    """

    for name in names:
        found = find_up(name, start_at=start_at, stop_at=stop_at)
        if found is not None:
            return found
    return None


def is_within(path: _Pathish, root: _Pathish) -> bool:
    """Return whether ``path`` equals ``root`` or lives beneath it."""

    candidate = _absolute(path)
    base = _absolute(root)
    return candidate == base or base in candidate.parents


def strip_root_prefix(path: _Pathish, root: _Pathish, *, sep: str = os.sep) -> str:
    """Return ``path`` with the ``root`` prefix and separator removed.

    Args:
        path: Path to shorten.
        root: Directory prefix to strip.
        sep: Path separator joining ``root`` and the remainder.

    Returns:
        str: Remainder relative to ``root``, or ``path`` unchanged when it does
        not start with ``root``.
    """

    text = os.fspath(path)
    prefix = os.fspath(root)
    if not prefix.endswith(sep):
        prefix = f"{prefix}{sep}"
    if text.startswith(prefix):
        return text[len(prefix) :]
    return text


__all__ = (
    "find_up",
    "find_up_first",
    "is_within",
    "iter_ancestors",
    "strip_root_prefix",
)
