# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the external command backend."""

from __future__ import annotations

import struct
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from fxbuild.backends import discover_backends, load_backend
from fxbuild.backends.command import (
    CONTAINER_MAGIC,
    CommandCompiler,
    CommandProgram,
    ContainerSerializer,
    IncludeScanningParser,
    SourceDescription,
)
from fxbuild.config.models import BackendConfig, Precision, PrecisionSettings
from fxbuild.core.errors import ConfigError, ShaderCompilerError, ShaderParseError
from fxbuild.orchestration.request import CompilationRequest
from fxbuild.platform import ShaderProfile


def _request(source: Path, **overrides: object) -> CompilationRequest:
    values: dict[str, object] = {
        "source_path": source,
        "output_path": source.with_suffix(".mgfxo"),
        "profile": ShaderProfile.OPENGL,
    }
    values.update(overrides)
    return CompilationRequest.model_validate(values)


def test_parser_collects_nested_includes(root_effect: Path) -> None:
    effect_dir = root_effect.parent
    (effect_dir / "shared").mkdir()
    (effect_dir / "shared" / "lighting.fxh").write_text('#include "../common.fxh"\n', encoding="utf-8")
    (effect_dir / "common.fxh").write_text("float4 Tint;\n", encoding="utf-8")
    root_effect.write_text(
        '#include "common.fxh"\n  #  include "shared/lighting.fxh"\n// #include "ignored.fxh"\n',
        encoding="utf-8",
    )

    description = IncludeScanningParser().parse(root_effect, _request(root_effect))

    assert description.dependencies == [effect_dir / "common.fxh", effect_dir / "shared" / "lighting.fxh"]
    assert description.profile is ShaderProfile.OPENGL


def test_parser_reports_missing_include(root_effect: Path) -> None:
    root_effect.write_text('#include "missing.fxh"\n', encoding="utf-8")

    with pytest.raises(ShaderParseError, match="missing.fxh"):
        IncludeScanningParser().parse(root_effect, _request(root_effect))


def test_parser_reports_unreadable_source(tmp_path: Path) -> None:
    missing = tmp_path / "absent.fx"

    with pytest.raises(ShaderParseError, match="Unable to read"):
        IncludeScanningParser().parse(missing, _request(missing))


def test_serializer_writes_header_and_bytecode(root_effect: Path) -> None:
    request = _request(
        root_effect,
        profile=ShaderProfile.DIRECTX_11,
        debug=True,
        precision=PrecisionSettings(vertex_float=Precision.HIGH, pixel_int=Precision.LOW),
    )
    program = CommandProgram(profile=ShaderProfile.DIRECTX_11, bytecode=b"\xde\xad")

    data = ContainerSerializer().write(program, request)

    magic, version, profile, debug, vf, vi, pf, pi, length = struct.unpack_from("<4sBBB4BI", data)
    assert magic == CONTAINER_MAGIC
    assert (version, profile, debug) == (1, 1, 1)
    assert (vf, vi, pf, pi) == (2, 1, 1, 0)
    assert length == 2
    assert data.endswith(b"\xde\xad")


def test_serializer_rejects_profile_mismatch(root_effect: Path) -> None:
    program = CommandProgram(profile=ShaderProfile.DIRECTX_11, bytecode=b"")

    with pytest.raises(ValueError, match="directx_11"):
        ContainerSerializer().write(program, _request(root_effect))


def _description(source: Path, *, debug: bool = False) -> SourceDescription:
    return SourceDescription(source_path=source, profile=ShaderProfile.OPENGL, debug=debug)


def test_compiler_runs_command_and_reads_output(
    root_effect: Path,
    write_compiler_script: Callable[[str], Path],
) -> None:
    script = write_compiler_script(
        """
output.write_bytes(b"BYTECODE" + " ".join(sys.argv[3:]).encode())
print("(2,1): warning X3206: implicit truncation")
"""
    )
    config = BackendConfig(
        command=(sys.executable, str(script), "{source}", "{output}", "{profile}"),
        debug_args=("--debug",),
    )

    result = CommandCompiler(config).compile(_description(root_effect, debug=True))

    assert result.program.bytecode == b"BYTECODEopengl --debug"
    assert "warning X3206" in result.diagnostics


def test_compiler_failure_raises_signal_with_output(
    root_effect: Path,
    write_compiler_script: Callable[[str], Path],
) -> None:
    script = write_compiler_script(
        """
sys.stderr.write("(5,9): error X3000: syntax error\\n")
sys.exit(1)
"""
    )
    config = BackendConfig(command=(sys.executable, str(script), "{source}", "{output}"))

    with pytest.raises(ShaderCompilerError) as excinfo:
        CommandCompiler(config).compile(_description(root_effect))

    assert "(5,9): error X3000: syntax error" in excinfo.value.diagnostics


def test_missing_executable_raises_signal(root_effect: Path) -> None:
    config = BackendConfig(command=("definitely-not-a-shader-compiler", "{source}"))

    with pytest.raises(ShaderCompilerError, match="was not found on PATH"):
        CommandCompiler(config).compile(_description(root_effect))


def test_empty_command_is_a_config_error() -> None:
    with pytest.raises(ConfigError):
        CommandCompiler(BackendConfig())


def test_load_backend_resolves_builtin_command_backend() -> None:
    backend = load_backend(BackendConfig(command=("fxc",)))

    assert backend.name == "command"
    assert "command" in discover_backends()


def test_load_backend_rejects_unknown_name() -> None:
    with pytest.raises(ConfigError, match="Unknown backend 'vulkan'"):
        load_backend(BackendConfig(name="vulkan"))
