# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for diagnostic path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from fxbuild.diagnostics import resolve_diagnostic_path


def test_empty_name_returns_root(root_effect: Path) -> None:
    assert resolve_diagnostic_path("", root_effect) == root_effect


def test_relative_root_is_made_absolute(root_effect: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert resolve_diagnostic_path("", Path("a/b/main.fx")) == root_effect


def test_absolute_name_is_kept(root_effect: Path, tmp_path: Path) -> None:
    other = tmp_path / "shared" / "noise.fxh"
    other.parent.mkdir()
    other.write_text("", encoding="utf-8")

    assert resolve_diagnostic_path(str(other), root_effect) == other


def test_missing_file_falls_back_to_root_directory(root_effect: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    resolved = resolve_diagnostic_path("missing/../gone.fxh", root_effect)

    assert resolved == root_effect.parent / "gone.fxh"
