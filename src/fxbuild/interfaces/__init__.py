# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols describing the collaborators driven by the orchestrator."""

from __future__ import annotations

from .services import (
    BuildHost,
    CompiledProgram,
    CompileOutput,
    DependencySink,
    FallbackProcessor,
    ShaderBackend,
    ShaderCompiler,
    ShaderDescription,
    ShaderParser,
    ShaderSerializer,
    WarningSink,
)

__all__ = [
    "BuildHost",
    "CompileOutput",
    "CompiledProgram",
    "DependencySink",
    "FallbackProcessor",
    "ShaderBackend",
    "ShaderCompiler",
    "ShaderDescription",
    "ShaderParser",
    "ShaderSerializer",
    "WarningSink",
]
