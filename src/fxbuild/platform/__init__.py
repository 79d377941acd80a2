# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build platform detection and shader profile selection."""

from __future__ import annotations

from .profiles import BuildPlatform, ShaderProfile, detect_platform, is_supported, resolve_profile

__all__ = ["BuildPlatform", "ShaderProfile", "detect_platform", "is_supported", "resolve_profile"]
