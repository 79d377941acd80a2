# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Backend driving an external shader compiler executable.

The compiler is configured as an argument template, for example::

    [tool.fxbuild.backend]
    command = ["fxc", "/nologo", "/T", "fx_2_0", "/Fo", "{output}", "{source}"]
    debug_args = ["/Zi", "/Od"]

``{source}``, ``{output}`` and ``{profile}`` are substituted per build. The
command runs from the directory of the root effect so relative include paths
in its output resolve the same way the compiler resolved them.
"""

from __future__ import annotations

import io
import os
import re
import struct
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from ..config.models import BackendConfig, Precision
from ..core.errors import ConfigError, ShaderCompilerError, ShaderParseError
from ..interfaces.services import CompileOutput, ShaderBackend
from ..orchestration.request import CompilationRequest
from ..platform import ShaderProfile
from ..process_utils import run_command

BACKEND_NAME: Final[str] = "command"
CONTAINER_MAGIC: Final[bytes] = b"MGFX"
CONTAINER_VERSION: Final[int] = 1
_HEADER: Final[struct.Struct] = struct.Struct("<4sBBB4BI")
_INCLUDE_PATTERN = re.compile(r'^[ \t]*#[ \t]*include[ \t]+"(?P<path>[^"]+)"', re.MULTILINE)

_PROFILE_IDS: Final[dict[ShaderProfile, int]] = {
    ShaderProfile.OPENGL: 0,
    ShaderProfile.DIRECTX_11: 1,
}
_PRECISION_IDS: Final[dict[Precision, int]] = {
    Precision.LOW: 0,
    Precision.MEDIUM: 1,
    Precision.HIGH: 2,
}


@dataclass(slots=True)
class SourceDescription:
    """Effect source with the files it includes."""

    source_path: Path
    profile: ShaderProfile
    debug: bool
    dependencies: list[Path] = field(default_factory=list)
    vertex_float_precision: Precision = Precision.MEDIUM
    vertex_int_precision: Precision = Precision.MEDIUM
    pixel_float_precision: Precision = Precision.MEDIUM
    pixel_int_precision: Precision = Precision.MEDIUM


@dataclass(frozen=True, slots=True)
class CommandProgram:
    """Bytecode produced by the external compiler."""

    profile: ShaderProfile
    bytecode: bytes


class IncludeScanningParser:
    """Collect ``#include "file"`` dependencies of an effect source."""

    def parse(self, source_path: Path, request: CompilationRequest) -> SourceDescription:
        root = Path(os.path.abspath(source_path))
        dependencies: list[Path] = []
        self._visit(root, seen={root}, dependencies=dependencies)
        return SourceDescription(
            source_path=root,
            profile=request.profile,
            debug=request.debug,
            dependencies=dependencies,
        )

    def _visit(self, path: Path, *, seen: set[Path], dependencies: list[Path]) -> None:
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise ShaderParseError(f"Unable to read '{path}': {exc.strerror or exc}") from exc
        for match in _INCLUDE_PATTERN.finditer(text):
            included = Path(os.path.abspath(path.parent / match.group("path")))
            if included in seen:
                continue
            if not included.is_file():
                raise ShaderParseError(f"Include '{match.group('path')}' referenced by '{path}' was not found")
            seen.add(included)
            dependencies.append(included)
            self._visit(included, seen=seen, dependencies=dependencies)


class CommandCompiler:
    """Run the configured compiler command for each effect."""

    def __init__(self, config: BackendConfig) -> None:
        if not config.command:
            raise ConfigError("backend.command must list the compiler executable and its arguments")
        self._config = config

    def compile(self, description: SourceDescription) -> CompileOutput:
        with tempfile.TemporaryDirectory(prefix="fxbuild-") as workdir:
            output = Path(workdir) / "program.bin"
            args = self._render_args(description, output)
            try:
                completed = run_command(args, cwd=description.source_path.parent, timeout=self._config.timeout)
            except FileNotFoundError as exc:
                raise ShaderCompilerError(str(exc)) from exc
            text = "\n".join(part for part in (completed.stdout, completed.stderr) if part)
            if completed.returncode != 0 or not output.is_file():
                raise ShaderCompilerError(text or f"Compiler exited with status {completed.returncode}")
            program = CommandProgram(profile=description.profile, bytecode=output.read_bytes())
        return CompileOutput(program=program, diagnostics=text)

    def _render_args(self, description: SourceDescription, output: Path) -> list[str]:
        substitutions = {
            "{source}": str(description.source_path),
            "{output}": str(output),
            "{profile}": description.profile.value,
        }
        template = list(self._config.command)
        if description.debug:
            template.extend(self._config.debug_args)
        rendered: list[str] = []
        for part in template:
            for placeholder, value in substitutions.items():
                part = part.replace(placeholder, value)
            rendered.append(part)
        return rendered


class ContainerSerializer:
    """Write compiled programs into the versioned ``MGFX`` container."""

    def write(self, program: CommandProgram, request: CompilationRequest) -> bytes:
        if program.profile is not request.profile:
            raise ValueError(
                f"program compiled for '{program.profile.value}' but request targets '{request.profile.value}'"
            )
        precision = request.precision
        header = _HEADER.pack(
            CONTAINER_MAGIC,
            CONTAINER_VERSION,
            _PROFILE_IDS[request.profile],
            int(request.debug),
            _PRECISION_IDS[precision.vertex_float],
            _PRECISION_IDS[precision.vertex_int],
            _PRECISION_IDS[precision.pixel_float],
            _PRECISION_IDS[precision.pixel_int],
            len(program.bytecode),
        )
        with io.BytesIO() as buffer:
            buffer.write(header)
            buffer.write(program.bytecode)
            return buffer.getvalue()


def create_backend(config: BackendConfig) -> ShaderBackend:
    """Return the command backend configured by ``config``."""

    return ShaderBackend(
        name=BACKEND_NAME,
        parser=IncludeScanningParser(),
        compiler=CommandCompiler(config),
        serializer=ContainerSerializer(),
    )


__all__ = [
    "BACKEND_NAME",
    "CONTAINER_MAGIC",
    "CONTAINER_VERSION",
    "CommandCompiler",
    "CommandProgram",
    "ContainerSerializer",
    "IncludeScanningParser",
    "SourceDescription",
    "create_backend",
]
