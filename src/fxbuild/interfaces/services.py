# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Capability interfaces for parser, compiler, serializer and build host."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from ..config.models import Precision
from ..core.models import CompiledArtifact, FileIdentity

if TYPE_CHECKING:
    from ..orchestration.request import CompilationRequest

CompiledProgram = Any


@runtime_checkable
class ShaderDescription(Protocol):
    """Parsed, include-resolved effect ready for compilation."""

    vertex_float_precision: Precision
    vertex_int_precision: Precision
    pixel_float_precision: Precision
    pixel_int_precision: Precision

    @property
    def dependencies(self) -> Sequence[Path]:
        """Return files the effect was assembled from, excluding the root."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class CompileOutput:
    """Successful compiler result plus any diagnostic text it printed."""

    program: CompiledProgram
    diagnostics: str = ""


@runtime_checkable
class ShaderParser(Protocol):
    """Expand an effect source into a :class:`ShaderDescription`."""

    @abstractmethod
    def parse(self, source_path: Path, request: CompilationRequest) -> ShaderDescription:
        """Return the description for ``source_path``; raise on any failure."""
        raise NotImplementedError


@runtime_checkable
class ShaderCompiler(Protocol):
    """Compile a configured description into a program object."""

    @abstractmethod
    def compile(self, description: ShaderDescription) -> CompileOutput:
        """Return the compiled program.

        Raises:
            ShaderCompilerError: When compilation fails; carries the compiler output.
        """
        raise NotImplementedError


@runtime_checkable
class ShaderSerializer(Protocol):
    """Encode a compiled program into the runtime container format."""

    @abstractmethod
    def write(self, program: CompiledProgram, request: CompilationRequest) -> bytes:
        """Return the serialized bytes for ``program``."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class ShaderBackend:
    """Bundle of collaborators making up one compiler backend."""

    name: str
    parser: ShaderParser
    compiler: ShaderCompiler
    serializer: ShaderSerializer


@runtime_checkable
class DependencySink(Protocol):
    """Record files an output depends on for incremental rebuilds."""

    def add_dependency(self, path: Path) -> None:
        """Track ``path``; duplicates are tolerated."""
        raise NotImplementedError


@runtime_checkable
class WarningSink(Protocol):
    """Receive non-fatal diagnostics."""

    def log_warning(self, identity: FileIdentity, message: str) -> None:
        """Report ``message`` at ``identity``."""
        raise NotImplementedError


@runtime_checkable
class BuildHost(DependencySink, WarningSink, Protocol):
    """Build pipeline driving one effect build."""

    @property
    def identity(self) -> FileIdentity:
        """Return the identity of the root effect file."""
        raise NotImplementedError

    @property
    def output_path(self) -> Path:
        """Return where the compiled artifact will be written."""
        raise NotImplementedError


@runtime_checkable
class FallbackProcessor(Protocol):
    """Default processing path used for platforms fxbuild does not handle."""

    def process(self, identity: FileIdentity, host: BuildHost) -> CompiledArtifact:
        """Return the artifact produced without fxbuild involvement."""
        raise NotImplementedError


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
