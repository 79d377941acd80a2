# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures and collaborator test doubles."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from fxbuild.config.models import Precision
from fxbuild.core.models import FileIdentity
from fxbuild.interfaces.services import CompileOutput, ShaderBackend
from fxbuild.orchestration.request import CompilationRequest


class RecordingHost:
    """Build host double capturing dependencies and warnings."""

    def __init__(self, source_path: Path, output_path: Path, *, tool: str = "test-tool") -> None:
        self._identity = FileIdentity(source_path=source_path, tool=tool)
        self._output_path = output_path
        self.dependencies: list[Path] = []
        self.warnings: list[tuple[FileIdentity, str]] = []

    @property
    def identity(self) -> FileIdentity:
        return self._identity

    @property
    def output_path(self) -> Path:
        return self._output_path

    def add_dependency(self, path: Path) -> None:
        self.dependencies.append(path)

    def log_warning(self, identity: FileIdentity, message: str) -> None:
        self.warnings.append((identity, message))


@dataclass
class StubDescription:
    dependencies: Sequence[Path] = ()
    vertex_float_precision: Precision = Precision.MEDIUM
    vertex_int_precision: Precision = Precision.MEDIUM
    pixel_float_precision: Precision = Precision.MEDIUM
    pixel_int_precision: Precision = Precision.MEDIUM


@dataclass
class StubParser:
    description: StubDescription = field(default_factory=StubDescription)
    error: Exception | None = None
    calls: list[tuple[Path, CompilationRequest]] = field(default_factory=list)

    def parse(self, source_path: Path, request: CompilationRequest) -> StubDescription:
        self.calls.append((source_path, request))
        if self.error is not None:
            raise self.error
        return self.description


@dataclass
class StubCompiler:
    output: CompileOutput = field(default_factory=lambda: CompileOutput(program=b"program"))
    error: Exception | None = None
    calls: list[StubDescription] = field(default_factory=list)

    def compile(self, description: StubDescription) -> CompileOutput:
        self.calls.append(description)
        if self.error is not None:
            raise self.error
        return self.output


@dataclass
class StubSerializer:
    error: Exception | None = None
    calls: list[tuple[object, CompilationRequest]] = field(default_factory=list)

    def write(self, program: object, request: CompilationRequest) -> bytes:
        self.calls.append((program, request))
        if self.error is not None:
            raise self.error
        return b"MGFX" + bytes(program)


@dataclass
class StubBackend:
    parser: StubParser = field(default_factory=StubParser)
    compiler: StubCompiler = field(default_factory=StubCompiler)
    serializer: StubSerializer = field(default_factory=StubSerializer)

    def build(self) -> ShaderBackend:
        return ShaderBackend(
            name="stub",
            parser=self.parser,
            compiler=self.compiler,
            serializer=self.serializer,
        )


@pytest.fixture
def root_effect(tmp_path: Path) -> Path:
    """Create ``a/b/main.fx`` under ``tmp_path`` and return its path."""

    effect_dir = tmp_path / "a" / "b"
    effect_dir.mkdir(parents=True)
    effect = effect_dir / "main.fx"
    effect.write_text("technique T { pass P { } }\n", encoding="utf-8")
    return effect


@pytest.fixture
def recording_host(root_effect: Path, tmp_path: Path) -> RecordingHost:
    return RecordingHost(root_effect, tmp_path / "out" / "main.mgfxo")


@pytest.fixture
def stub_backend() -> StubBackend:
    return StubBackend()


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``HOME`` at an empty directory so user configuration is ignored."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


@pytest.fixture
def write_compiler_script(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory writing a Python script that stands in for a compiler.

    The script receives ``SOURCE OUTPUT`` arguments; ``body`` runs with
    ``source``/``output`` bound to :class:`pathlib.Path` objects.
    """

    def _write(body: str) -> Path:
        script = tmp_path / "fake_compiler.py"
        lines = [
            "import sys",
            "from pathlib import Path",
            "source = Path(sys.argv[1])",
            "output = Path(sys.argv[2])",
            *body.strip().splitlines(),
        ]
        script.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return script

    return _write
