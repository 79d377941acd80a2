# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem build host used by the command line interface."""

from __future__ import annotations

from .local import LocalBuildHost, write_artifact

__all__ = ["LocalBuildHost", "write_artifact"]
