# src/campus_wall/repositories/versioning.py
"""Outcome of an optimistic, version-checked row update."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VersionOk:
    """The update matched the expected version and bumped it."""

    version: int


@dataclass(frozen=True)
class VersionConflict:
    """Another writer changed the row first; nothing was written."""

    expected: int


VersionResult = VersionOk | VersionConflict
