# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build host backed by the local filesystem and the Rich console."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from ..core.logging import warn
from ..core.models import CompiledArtifact, FileIdentity


class LocalBuildHost:
    """Track dependencies and print warnings for a single effect build."""

    def __init__(
        self,
        source_path: Path,
        output_path: Path,
        *,
        tool: str = "fxbuild",
        use_emoji: bool = True,
        use_color: bool | None = None,
    ) -> None:
        self._identity = FileIdentity(source_path=source_path.absolute(), tool=tool)
        self._output_path = output_path.absolute()
        self._dependencies: dict[Path, None] = {}
        self._warnings: list[tuple[FileIdentity, str]] = []
        self._use_emoji = use_emoji
        self._use_color = use_color

    @property
    def identity(self) -> FileIdentity:
        return self._identity

    @property
    def output_path(self) -> Path:
        return self._output_path

    @property
    def dependencies(self) -> tuple[Path, ...]:
        """Return the unique dependencies recorded so far, in report order."""

        return tuple(self._dependencies)

    @property
    def warnings(self) -> tuple[tuple[FileIdentity, str], ...]:
        return tuple(self._warnings)

    def add_dependency(self, path: Path) -> None:
        self._dependencies.setdefault(Path(path), None)

    def log_warning(self, identity: FileIdentity, message: str) -> None:
        self._warnings.append((identity, message))
        warn(
            f"{identity.describe()}: {message}",
            use_emoji=self._use_emoji,
            use_color=self._use_color,
        )


def write_artifact(artifact: CompiledArtifact, output_path: Path) -> Path:
    """Write ``artifact`` to ``output_path`` without exposing partial files.

    The bytes land in a temporary file beside the target which then replaces
    it, so readers only ever observe the previous file or the complete new one.

    Args:
        artifact: Serialized effect to persist.
        output_path: Destination file; parent directories are created.

    Returns:
        Path: The written destination.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(artifact.data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, output_path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
    return output_path


__all__ = ["LocalBuildHost", "write_artifact"]
