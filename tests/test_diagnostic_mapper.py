# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for mapping compiler output onto diagnostics."""

from __future__ import annotations

from pathlib import Path

import pytest

from fxbuild.core.errors import BuildError, BuildFailureKind
from fxbuild.core.models import FileIdentity
from fxbuild.core.severity import Severity
from fxbuild.diagnostics import DiagnosticMapper, MapperState, map_diagnostics

WARNING_BANNER = "A warning was generated when compiling the effect.\n"
ERROR_BANNER = "Unable to compile the effect.\n"


class _Sink:
    def __init__(self) -> None:
        self.reported: list[tuple[FileIdentity, str]] = []

    def log_warning(self, identity: FileIdentity, message: str) -> None:
        self.reported.append((identity, message))


def _root(path: Path) -> FileIdentity:
    return FileIdentity(source_path=path, tool="effect-importer")


def test_text_without_location_spans_is_returned_verbatim(root_effect: Path) -> None:
    sink = _Sink()
    text = "fatal: compiler crashed\nsee the log for details"

    error = map_diagnostics(text, _root(root_effect), sink)

    assert isinstance(error, BuildError)
    assert error.message == text
    assert error.identity == _root(root_effect)
    assert error.kind is BuildFailureKind.COMPILE_FAILURE
    assert error.diagnostic is None
    assert sink.reported == []


def test_empty_file_name_refers_to_root_effect() -> None:
    sink = _Sink()
    root = _root(Path("/a/b/main.fx"))

    map_diagnostics("(12,5): warning X1234: foo", root, sink)

    assert len(sink.reported) == 1
    identity, message = sink.reported[0]
    assert identity.source_path == Path("/a/b/main.fx")
    assert identity.line_column == "12,5"
    assert identity.tool == "effect-importer"
    assert message == WARNING_BANNER + "X1234: foo"


def test_include_is_resolved_next_to_root_effect(
    root_effect: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    include = root_effect.parent / "inc.fxh"
    include.write_text("float4 helper();\n", encoding="utf-8")
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    monkeypatch.chdir(elsewhere)

    error = map_diagnostics("inc.fxh(3,1): error X9: bad token", _root(root_effect), _Sink())

    assert error.identity.source_path == include
    assert error.identity.line_column == "3,1"
    assert error.message == ERROR_BANNER + "X9: bad token"
    assert error.diagnostic is not None
    assert error.diagnostic.severity is Severity.ERROR
    assert error.diagnostic.file == include


def test_include_existing_in_working_directory_wins(
    root_effect: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    (root_effect.parent / "inc.fxh").write_text("", encoding="utf-8")
    local = tmp_path / "cwd"
    local.mkdir()
    (local / "inc.fxh").write_text("", encoding="utf-8")
    monkeypatch.chdir(local)

    error = map_diagnostics("inc.fxh(1,1): error X1: boom", _root(root_effect), _Sink())

    assert error.identity.source_path == local / "inc.fxh"


def test_record_with_both_keywords_is_a_warning(root_effect: Path) -> None:
    sink = _Sink()
    text = "(4,2): warning X3571: pow(f, e) will not work for negative f, use abs(f) or error"

    error = map_diagnostics(text, _root(root_effect), sink)

    assert len(sink.reported) == 1
    assert sink.reported[0][1].startswith(WARNING_BANNER)
    assert error.message == text
    assert error.diagnostic is None


def test_warning_then_error_stops_at_error(root_effect: Path) -> None:
    sink = _Sink()
    text = "\n".join(
        [
            "(1,1): warning X3206: implicit truncation of vector type",
            "(3,1): error X3004: undeclared identifier 'foo'",
            "(7,7): warning X3557: loop only executes for 1 iteration(s)",
            "(9,9): error X3000: syntax error",
        ]
    )

    error = map_diagnostics(text, _root(root_effect), sink)

    assert [message for _, message in sink.reported] == [WARNING_BANNER + "X3206: implicit truncation of vector type"]
    assert error.identity.line_column == "3,1"
    assert error.message == ERROR_BANNER + "X3004: undeclared identifier 'foo'"


def test_missing_code_marker_returns_whole_record(root_effect: Path) -> None:
    sink = _Sink()
    text = "noise without location\nmain.fx(3): something went badly\n(4,4): error X1: later"

    error = map_diagnostics(text, _root(root_effect), sink)

    assert error.message == "main.fx(3): something went badly"
    assert error.identity == _root(root_effect)
    assert error.diagnostic is None


def test_record_without_keyword_is_dropped(root_effect: Path) -> None:
    sink = _Sink()
    text = "(2,2): note X100: informational only"

    error = map_diagnostics(text, _root(root_effect), sink)

    assert sink.reported == []
    assert error.message == text


def test_windows_line_endings_do_not_leak_into_messages(root_effect: Path) -> None:
    sink = _Sink()

    error = map_diagnostics(
        "(1,1): warning X1: first\r\n(2,3): error X2: second\r\n",
        _root(root_effect),
        sink,
    )

    assert sink.reported[0][1] == WARNING_BANNER + "X1: first"
    assert error.message == ERROR_BANNER + "X2: second"


def test_blank_carriage_return_line_ends_the_report(root_effect: Path) -> None:
    sink = _Sink()
    text = "(1,1): warning X1: first\r\n\r\r\n(2,3): error X2: after the report"

    error = map_diagnostics(text, _root(root_effect), sink)

    assert [message for _, message in sink.reported] == [WARNING_BANNER + "X1: first"]
    assert error.message == text
    assert error.diagnostic is None


def test_line_column_is_kept_verbatim(root_effect: Path) -> None:
    error = map_diagnostics("(12-14): error X7: range", _root(root_effect), _Sink())

    assert error.identity.line_column == "12-14"


def test_mapper_instance_can_be_reused(root_effect: Path) -> None:
    sink = _Sink()
    mapper = DiagnosticMapper(_root(root_effect), sink)

    first = mapper.map("(1,1): error X1: one")
    second = mapper.map("(2,2): error X2: two")

    assert first.identity.line_column == "1,1"
    assert second.identity.line_column == "2,2"


def test_build_error_renders_location(root_effect: Path) -> None:
    error = map_diagnostics("(5,6): error X3: bad", _root(root_effect), _Sink())

    assert str(error) == f"{root_effect}(5,6): {ERROR_BANNER}X3: bad"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("(1,1): warning X1: only a warning", MapperState.DONE),
        ("(1,1): warning X1: first\n(2,2): error X2: second", MapperState.RETURN_ERROR),
    ],
)
def test_mapper_reports_final_state(root_effect: Path, text: str, expected: MapperState) -> None:
    mapper = DiagnosticMapper(_root(root_effect), _Sink())

    mapper.map(text)

    assert mapper.state is expected
