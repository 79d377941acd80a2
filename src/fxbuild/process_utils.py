# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; commands come from the project's
# compiler configuration and are passed as argument lists without a shell.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from typing import Final

TIMEOUT_RETURNCODE: Final[int] = 124


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def _ensure_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value.decode(errors="ignore")


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Execute *args* capturing text output; never raises on a non-zero exit.

    Args:
        args: Executable followed by its arguments.
        cwd: Working directory for the child process.
        timeout: Optional limit in seconds; expiry yields return code 124.

    Returns:
        subprocess.CompletedProcess[str]: Completed process with text output.

    Raises:
        FileNotFoundError: If the executable cannot be located.
    """

    normalized = _normalize_args(args)
    try:
        # Bandit: argument lists are passed directly without shell expansion.
        return subprocess.run(  # nosec B603
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            check=False,
            capture_output=True,
            text=True,
            timeout=timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired as exc:
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
        return subprocess.CompletedProcess(
            args=normalized,
            returncode=TIMEOUT_RETURNCODE,
            stdout=_ensure_text(exc.stdout),
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
        )


__all__ = ["TIMEOUT_RETURNCODE", "run_command"]
