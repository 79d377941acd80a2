# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for effect builds."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..platform import BuildPlatform, detect_platform


class Precision(str, Enum):
    """Numeric precision hint applied to a shader stage."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PrecisionSettings(BaseModel):
    """Per-stage precision hints for vertex and pixel shaders."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    vertex_float: Precision = Precision.MEDIUM
    vertex_int: Precision = Precision.MEDIUM
    pixel_float: Precision = Precision.MEDIUM
    pixel_int: Precision = Precision.MEDIUM


class BackendConfig(BaseModel):
    """Select the compiler backend and configure the external command."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = "command"
    command: tuple[str, ...] = Field(default_factory=tuple)
    debug_args: tuple[str, ...] = Field(default_factory=tuple)
    timeout: float | None = None


class EffectConfig(BaseModel):
    """Resolved configuration for one effect build."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    platform: BuildPlatform = Field(default_factory=detect_platform)
    debug: bool = False
    tool: str = "fxbuild"
    precision: PrecisionSettings = Field(default_factory=PrecisionSettings)
    backend: BackendConfig = Field(default_factory=BackendConfig)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible snapshot of the configuration."""

        return self.model_dump(mode="json")


__all__ = ["BackendConfig", "EffectConfig", "Precision", "PrecisionSettings"]
