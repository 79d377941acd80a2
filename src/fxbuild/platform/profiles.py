# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Static mapping from build platforms to shader profiles."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Final


class BuildPlatform(str, Enum):
    """Target platforms a content build can be run for."""

    NONE = "none"
    WINDOWS = "windows"
    WINDOWS8 = "windows8"
    LINUX = "linux"
    MACOS = "macos"
    ANDROID = "android"
    IOS = "ios"


class ShaderProfile(str, Enum):
    """Compilation backends effects can be built for."""

    OPENGL = "opengl"
    DIRECTX_11 = "directx_11"


_PROFILE_OVERRIDES: Final[dict[BuildPlatform, ShaderProfile]] = {
    BuildPlatform.WINDOWS8: ShaderProfile.DIRECTX_11,
}
_DEFAULT_PROFILE: Final[ShaderProfile] = ShaderProfile.OPENGL


_HOST_PLATFORMS: Final[dict[str, BuildPlatform]] = {
    "win32": BuildPlatform.WINDOWS,
    "cygwin": BuildPlatform.WINDOWS,
    "darwin": BuildPlatform.MACOS,
    "linux": BuildPlatform.LINUX,
}


def detect_platform() -> BuildPlatform:
    """Return the build platform matching the running interpreter."""

    return _HOST_PLATFORMS.get(sys.platform, BuildPlatform.NONE)


def is_supported(platform: BuildPlatform) -> bool:
    """Return ``True`` when effects for ``platform`` are built by fxbuild."""

    return platform is not BuildPlatform.NONE


def resolve_profile(platform: BuildPlatform) -> ShaderProfile:
    """Return the shader profile used for ``platform``.

    Args:
        platform: Supported build platform.

    Returns:
        ShaderProfile: ``DIRECTX_11`` for Windows 8, ``OPENGL`` otherwise.

    Raises:
        ValueError: If ``platform`` is not supported.
    """

    if not is_supported(platform):
        raise ValueError(f"platform '{platform.value}' has no shader profile")
    return _PROFILE_OVERRIDES.get(platform, _DEFAULT_PROFILE)


__all__ = ["BuildPlatform", "ShaderProfile", "detect_platform", "is_supported", "resolve_profile"]
