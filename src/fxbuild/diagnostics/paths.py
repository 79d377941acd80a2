# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for locating the files compiler diagnostics refer to."""

from __future__ import annotations

import os
from pathlib import Path


def _absolute(path: Path) -> Path:
    """Return ``path`` made absolute against the working directory and normalised."""

    return Path(os.path.abspath(path))


def resolve_diagnostic_path(file_part: str, root: Path) -> Path:
    """Return the absolute file a diagnostic record points at.

    Compilers report included files relative to the directory of the file that
    included them, so a name that does not exist from the working directory is
    looked up next to the root effect instead.

    Args:
        file_part: File name text preceding the location span; may be empty.
        root: Path of the root effect being built.

    Returns:
        Path: Absolute path for the record. When neither candidate exists the
        root-relative candidate is returned.
    """

    candidate = Path(file_part) if file_part else root
    resolved = _absolute(candidate)
    if resolved.is_file():
        return resolved
    return _absolute(_absolute(root).parent / candidate)


__all__ = ["resolve_diagnostic_path"]
