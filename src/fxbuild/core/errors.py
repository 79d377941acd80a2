# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while building effects."""

from __future__ import annotations

from enum import Enum

from .models import Diagnostic, FileIdentity


class BuildFailureKind(str, Enum):
    """Stage of the build that produced a :class:`BuildError`."""

    PARSE_FAILURE = "parse"
    COMPILE_FAILURE = "compile"
    SERIALIZATION_FAILURE = "serialize"


class BuildError(RuntimeError):
    """Terminal failure of one effect build, addressed to a file identity."""

    def __init__(
        self,
        message: str,
        identity: FileIdentity,
        *,
        kind: BuildFailureKind,
        diagnostic: Diagnostic | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.identity = identity
        self.kind = kind
        self.diagnostic = diagnostic

    def __str__(self) -> str:
        return f"{self.identity.describe()}: {self.message}"


class ShaderParseError(RuntimeError):
    """Raised by parsers when an effect source cannot be expanded."""


class ShaderCompilerError(RuntimeError):
    """Signal raised by compilers carrying the diagnostic output text."""

    def __init__(self, diagnostics: str) -> None:
        super().__init__("shader compilation failed")
        self.diagnostics = diagnostics


class ConfigError(ValueError):
    """Raised when configuration data cannot be loaded or validated."""


__all__ = [
    "BuildError",
    "BuildFailureKind",
    "ConfigError",
    "ShaderCompilerError",
    "ShaderParseError",
]
