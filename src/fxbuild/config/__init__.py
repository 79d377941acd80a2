# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and layered loading."""

from __future__ import annotations

from ..core.errors import ConfigError
from .loader import (
    ConfigLoader,
    ConfigLoadResult,
    DefaultConfigSource,
    MappingConfigSource,
    PyProjectConfigSource,
    TomlConfigSource,
)
from .models import BackendConfig, EffectConfig, Precision, PrecisionSettings

__all__ = [
    "BackendConfig",
    "ConfigError",
    "ConfigLoadResult",
    "ConfigLoader",
    "DefaultConfigSource",
    "EffectConfig",
    "MappingConfigSource",
    "Precision",
    "PrecisionSettings",
    "PyProjectConfigSource",
    "TomlConfigSource",
]
