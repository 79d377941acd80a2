# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the fxbuild package."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .severity import Severity


class FileIdentity(BaseModel):
    """Identify the file, producing tool and position a message refers to."""

    model_config = ConfigDict(frozen=True)

    source_path: Path
    tool: str = ""
    line_column: str | None = None

    def describe(self) -> str:
        """Return the ``file(line,column)`` form understood by build tools."""

        if self.line_column:
            return f"{self.source_path}({self.line_column})"
        return str(self.source_path)


class Diagnostic(BaseModel):
    """Structured warning or error extracted from compiler output."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    file: Path
    line_column: str
    message: str

    def identity(self, tool: str = "") -> FileIdentity:
        """Return the :class:`FileIdentity` the diagnostic points at."""

        return FileIdentity(source_path=self.file, tool=tool, line_column=self.line_column)


class CompiledArtifact(BaseModel):
    """Serialized compiled effect returned to the build host."""

    model_config = ConfigDict(frozen=True)

    data: bytes

    def __len__(self) -> int:
        return len(self.data)


__all__ = ["CompiledArtifact", "Diagnostic", "FileIdentity"]
