# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels assigned to compiler diagnostics."""

    WARNING = "warning"
    ERROR = "error"


# Checked in order; the first keyword found in a record decides its severity.
_SEVERITY_KEYWORDS: Final[tuple[tuple[str, Severity], ...]] = (
    ("warning", Severity.WARNING),
    ("error", Severity.ERROR),
)

_SEVERITY_BANNERS: Final[dict[Severity, str]] = {
    Severity.WARNING: "A warning was generated when compiling the effect.\n",
    Severity.ERROR: "Unable to compile the effect.\n",
}


def classify_record(record: str) -> Severity | None:
    """Return the severity announced by a compiler output record.

    Args:
        record: Single line of compiler output.

    Returns:
        Severity | None: ``WARNING`` when the record mentions ``"warning"``,
        ``ERROR`` when it mentions ``"error"``, otherwise ``None``. A record
        containing both keywords is a warning.
    """

    for keyword, severity in _SEVERITY_KEYWORDS:
        if keyword in record:
            return severity
    return None


def severity_banner(severity: Severity) -> str:
    """Return the fixed banner prefixed to messages of ``severity``."""

    return _SEVERITY_BANNERS[severity]


__all__ = ["Severity", "classify_record", "severity_banner"]
