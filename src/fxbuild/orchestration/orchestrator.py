# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High level orchestration for building one effect."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from ..config.models import EffectConfig
from ..core.errors import BuildError, BuildFailureKind, ConfigError, ShaderCompilerError
from ..core.models import CompiledArtifact
from ..diagnostics import map_diagnostics
from ..interfaces.services import (
    BuildHost,
    CompiledProgram,
    FallbackProcessor,
    ShaderBackend,
    ShaderDescription,
)
from ..platform import is_supported
from .fallback import SourceCopyFallback
from .request import CompilationRequest, apply_precision, build_request

SERIALIZATION_FAILURE_MESSAGE: Final[str] = "Failed to serialize the effect!"


class EffectOrchestrator:
    """Coordinate parsing, compilation and serialization of an effect."""

    def __init__(
        self,
        backend: ShaderBackend | None,
        *,
        config: EffectConfig,
        fallback: FallbackProcessor | None = None,
        debug_logger: Callable[[str], None] | None = None,
    ) -> None:
        """Create an orchestrator bound to ``backend`` and ``config``.

        Args:
            backend: Parser, compiler and serializer used for supported platforms;
                may be ``None`` when only the fallback path is expected.
            config: Resolved build configuration.
            fallback: Processor used when the configured platform is unsupported.
            debug_logger: Optional callable receiving stage trace messages.
        """

        self._backend = backend
        self._config = config
        self._fallback = fallback or SourceCopyFallback()
        self._debug = debug_logger

    @property
    def config(self) -> EffectConfig:
        """Return the configuration builds are run with."""

        return self._config

    def compile(self, host: BuildHost) -> CompiledArtifact:
        """Build the effect identified by ``host`` and return the artifact.

        Args:
            host: Build host supplying the input identity, output path,
                dependency tracker and warning sink.

        Returns:
            CompiledArtifact: Serialized effect, or the fallback's result when the
            platform is not supported.

        Raises:
            BuildError: If any stage fails; no stage is retried.
            ConfigError: If the platform is supported but no backend was supplied.
        """

        if not is_supported(self._config.platform):
            self._trace(f"platform '{self._config.platform.value}' unsupported; using fallback")
            return self._fallback.process(host.identity, host)

        if self._backend is None:
            raise ConfigError(f"no compiler backend configured for platform '{self._config.platform.value}'")
        backend = self._backend
        request = build_request(host, self._config)
        description = self._parse(backend, request, host)
        program = self._compile(backend, description, host)
        return self._serialize(backend, program, request, host)

    def _parse(self, backend: ShaderBackend, request: CompilationRequest, host: BuildHost) -> ShaderDescription:
        self._trace(f"parsing {request.source_path}")
        try:
            description = backend.parser.parse(request.source_path, request)
            apply_precision(description, request.precision)
            for dependency in description.dependencies:
                host.add_dependency(dependency)
        except Exception as exc:  # noqa: BLE001 - parser or tracker failures of any type end the build
            # Parser line numbers are unreliable; report against the root file.
            raise BuildError(str(exc), host.identity, kind=BuildFailureKind.PARSE_FAILURE) from exc
        return description

    def _compile(self, backend: ShaderBackend, description: ShaderDescription, host: BuildHost) -> CompiledProgram:
        self._trace(f"compiling with backend '{backend.name}'")
        try:
            output = backend.compiler.compile(description)
        except ShaderCompilerError as exc:
            raise map_diagnostics(exc.diagnostics, host.identity, host) from exc
        if output.diagnostics.strip():
            # Only the warnings matter once compilation succeeded.
            map_diagnostics(output.diagnostics, host.identity, host)
        return output.program

    def _serialize(
        self,
        backend: ShaderBackend,
        program: CompiledProgram,
        request: CompilationRequest,
        host: BuildHost,
    ) -> CompiledArtifact:
        self._trace(f"serializing to {request.output_path}")
        try:
            data = backend.serializer.write(program, request)
        except Exception as exc:  # noqa: BLE001 - any encoding or I/O failure aborts the build
            raise BuildError(
                SERIALIZATION_FAILURE_MESSAGE,
                host.identity,
                kind=BuildFailureKind.SERIALIZATION_FAILURE,
            ) from exc
        return CompiledArtifact(data=bytes(data))

    def _trace(self, message: str) -> None:
        if self._debug is not None:
            self._debug(message)


__all__ = ["SERIALIZATION_FAILURE_MESSAGE", "EffectOrchestrator"]
