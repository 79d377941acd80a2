# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""State machine mapping compiler output onto warnings and one terminal error.

Compiler output arrives as one blob with one record per line, typically::

    inc.fxh(3,1): error X3004: undeclared identifier 'foo'
    (12,5): warning X3206: implicit truncation of vector type

Each record is split into a file name, the verbatim ``line,column`` span and
the message starting at the ``X`` code marker. Warnings are reported to the
host as they are found; the first error ends the scan and becomes the build
failure.

Records are split on ``\\n`` and lose one trailing ``\\r``. A record that still
starts with a carriage return (a blank ``\\r\\r\\n`` line or a stray ``\\n\\r``
pair) marks the end of the compiler's report and stops the scan.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Final

from ..core.errors import BuildError, BuildFailureKind
from ..core.models import Diagnostic, FileIdentity
from ..core.severity import Severity, classify_record, severity_banner
from ..interfaces.services import WarningSink
from .paths import resolve_diagnostic_path

_LINE_BREAK: Final[str] = "\r"
_RECORD_SEPARATOR: Final[str] = "\n"
_SPAN_OPEN: Final[str] = "("
_SPAN_CLOSE: Final[str] = ")"
_CODE_MARKER: Final[str] = "X"


class MapperState(Enum):
    """States visited while scanning compiler output."""

    SCANNING = "scanning"
    EMIT_WARNING = "emit_warning"
    RETURN_ERROR = "return_error"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class _Scanning:
    state: ClassVar[MapperState] = MapperState.SCANNING


@dataclass(frozen=True, slots=True)
class _EmitWarning:
    diagnostic: Diagnostic
    state: ClassVar[MapperState] = MapperState.EMIT_WARNING


@dataclass(frozen=True, slots=True)
class _ReturnError:
    error: BuildError
    state: ClassVar[MapperState] = MapperState.RETURN_ERROR


@dataclass(frozen=True, slots=True)
class _Done:
    state: ClassVar[MapperState] = MapperState.DONE


_Transition = _Scanning | _EmitWarning | _ReturnError | _Done

_KEEP_SCANNING: Final[_Scanning] = _Scanning()
_FINISHED: Final[_Done] = _Done()


def _iter_records(text: str) -> Iterator[str]:
    for record in text.split(_RECORD_SEPARATOR):
        yield record.removesuffix("\r")


class DiagnosticMapper:
    """Turn one compiler output blob into reported warnings and a terminal error."""

    def __init__(self, root: FileIdentity, report: WarningSink) -> None:
        """Bind the mapper to the root effect and the host warning sink.

        Args:
            root: Identity of the effect being built.
            report: Sink receiving each warning as it is found.
        """

        self._root = root
        self._report = report
        self._state = MapperState.SCANNING

    @property
    def state(self) -> MapperState:
        """Return the state the last :meth:`map` call finished in."""

        return self._state

    def map(self, text: str) -> BuildError:
        """Scan ``text`` and return the build failure it describes.

        Args:
            text: Raw compiler output.

        Returns:
            BuildError: The first error record, located and prefixed, or an
            unlocated error carrying ``text`` verbatim when no error record
            could be extracted.
        """

        records = _iter_records(text)
        transition: _Transition = _KEEP_SCANNING
        while True:
            self._state = transition.state
            match transition:
                case _Scanning():
                    record = next(records, None)
                    transition = _FINISHED if record is None else self._scan(record)
                case _EmitWarning(diagnostic=diagnostic):
                    self._emit(diagnostic)
                    transition = _KEEP_SCANNING
                case _ReturnError(error=error):
                    return error
                case _Done():
                    return self._failure(text, self._root)

    def _scan(self, record: str) -> _Transition:
        """Classify one record and return the transition it causes."""

        if record.startswith(_LINE_BREAK):
            return _FINISHED

        open_index = record.find(_SPAN_OPEN)
        close_index = record.find(_SPAN_CLOSE)
        if open_index < 0 or close_index < 0:
            return _KEEP_SCANNING

        code_index = record.find(_CODE_MARKER, close_index)
        if code_index < 0:
            return _ReturnError(self._failure(record, self._root))

        severity = classify_record(record)
        if severity is None:
            return _KEEP_SCANNING

        diagnostic = Diagnostic(
            severity=severity,
            file=resolve_diagnostic_path(record[:open_index], self._root.source_path),
            line_column=record[open_index + 1 : close_index],
            message=severity_banner(severity) + record[code_index:],
        )
        if severity is Severity.WARNING:
            return _EmitWarning(diagnostic)
        identity = diagnostic.identity(self._root.tool)
        return _ReturnError(self._failure(diagnostic.message, identity, diagnostic))

    def _emit(self, diagnostic: Diagnostic) -> None:
        self._report.log_warning(diagnostic.identity(self._root.tool), diagnostic.message)

    @staticmethod
    def _failure(message: str, identity: FileIdentity, diagnostic: Diagnostic | None = None) -> BuildError:
        return BuildError(
            message,
            identity,
            kind=BuildFailureKind.COMPILE_FAILURE,
            diagnostic=diagnostic,
        )


def map_diagnostics(text: str, root: FileIdentity, report: WarningSink) -> BuildError:
    """Return the build failure described by compiler output ``text``.

    Warnings found before the first error are delivered to ``report``.

    Args:
        text: Raw compiler output.
        root: Identity of the effect being built.
        report: Sink receiving non-fatal warnings.

    Returns:
        BuildError: Terminal failure for the build.
    """

    return DiagnosticMapper(root, report).map(text)


__all__ = ["DiagnosticMapper", "MapperState", "map_diagnostics"]
