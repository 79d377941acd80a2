# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Immutable per-build request shared by every stage."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..config.models import EffectConfig, PrecisionSettings
from ..interfaces.services import BuildHost, ShaderDescription
from ..platform import ShaderProfile, resolve_profile


class CompilationRequest(BaseModel):
    """Inputs describing a single effect build."""

    model_config = ConfigDict(frozen=True)

    source_path: Path
    output_path: Path
    profile: ShaderProfile
    debug: bool = False
    precision: PrecisionSettings = Field(default_factory=PrecisionSettings)


def build_request(host: BuildHost, config: EffectConfig) -> CompilationRequest:
    """Assemble the request for the effect ``host`` is building.

    Args:
        host: Build host supplying the source identity and output path.
        config: Resolved configuration; its platform must be supported.

    Returns:
        CompilationRequest: Request reused by the parse and serialize stages.
    """

    return CompilationRequest(
        source_path=host.identity.source_path,
        output_path=host.output_path,
        profile=resolve_profile(config.platform),
        debug=config.debug,
        precision=config.precision,
    )


def apply_precision(description: ShaderDescription, precision: PrecisionSettings) -> None:
    """Copy the configured per-stage precision onto ``description``."""

    description.vertex_float_precision = precision.vertex_float
    description.vertex_int_precision = precision.vertex_int
    description.pixel_float_precision = precision.pixel_float
    description.pixel_int_precision = precision.pixel_int


__all__ = ["CompilationRequest", "apply_precision", "build_request"]
