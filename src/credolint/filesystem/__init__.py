# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem helpers shared across credolint."""

from __future__ import annotations

from .paths import find_up, find_up_first, is_within, iter_ancestors, strip_root_prefix

__all__ = (
    "find_up",
    "find_up_first",
    "is_within",
    "iter_ancestors",
    "strip_root_prefix",
)
