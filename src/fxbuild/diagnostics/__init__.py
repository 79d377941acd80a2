# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Translate raw compiler output into structured diagnostics."""

from __future__ import annotations

from .mapper import DiagnosticMapper, MapperState, map_diagnostics
from .paths import resolve_diagnostic_path

__all__ = [
    "DiagnosticMapper",
    "MapperState",
    "map_diagnostics",
    "resolve_diagnostic_path",
]
