# SPDX-License-Identifier: MIT
"""Data structures for the build CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer

from ..config.models import Precision
from ..platform import BuildPlatform

SOURCE_ARGUMENT = Annotated[
    Path,
    typer.Argument(metavar="SOURCE", help="Effect source file to build."),
]
OUTPUT_OPTION = Annotated[
    Path,
    typer.Option("--output", "-o", help="Destination of the compiled effect."),
]
ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root used to discover configuration."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Project configuration file overriding .fxbuild.toml."),
]
PLATFORM_OPTION = Annotated[
    BuildPlatform | None,
    typer.Option("--platform", "-p", case_sensitive=False, help="Target build platform."),
]
DEBUG_OPTION = Annotated[
    bool | None,
    typer.Option("--debug/--no-debug", help="Compile with debug information."),
]
VERTEX_FLOAT_OPTION = Annotated[
    Precision | None,
    typer.Option("--vertex-float", case_sensitive=False, help="Vertex float precision."),
]
VERTEX_INT_OPTION = Annotated[
    Precision | None,
    typer.Option("--vertex-int", case_sensitive=False, help="Vertex int precision."),
]
PIXEL_FLOAT_OPTION = Annotated[
    Precision | None,
    typer.Option("--pixel-float", case_sensitive=False, help="Pixel float precision."),
]
PIXEL_INT_OPTION = Annotated[
    Precision | None,
    typer.Option("--pixel-int", case_sensitive=False, help="Pixel int precision."),
]
LIST_DEPS_OPTION = Annotated[
    bool,
    typer.Option("--list-deps", help="Print the files the effect depends on."),
]
NO_COLOR_OPTION = Annotated[
    bool,
    typer.Option("--no-color", help="Disable ANSI colour output."),
]
NO_EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--no-emoji", help="Disable emoji output."),
]


@dataclass(slots=True)
class BuildCLIOptions:
    """Normalised CLI inputs for the build command."""

    source: Path
    output: Path
    root: Path
    config_file: Path | None
    platform: BuildPlatform | None
    debug: bool | None
    precision: dict[str, Precision]
    list_deps: bool
    use_color: bool
    use_emoji: bool

    def overrides(self) -> dict[str, Any]:
        """Return the configuration fragment expressed by explicit flags."""

        fragment: dict[str, Any] = {}
        if self.platform is not None:
            fragment["platform"] = self.platform.value
        if self.debug is not None:
            fragment["debug"] = self.debug
        if self.precision:
            fragment["precision"] = {stage: level.value for stage, level in self.precision.items()}
        return fragment


def build_build_options(
    *,
    source: Path,
    output: Path,
    root: Path,
    config_file: Path | None,
    platform: BuildPlatform | None,
    debug: bool | None,
    precision: dict[str, Precision | None],
    list_deps: bool,
    no_color: bool,
    no_emoji: bool,
) -> BuildCLIOptions:
    """Construct ``BuildCLIOptions`` from Typer parameters."""

    return BuildCLIOptions(
        source=source.expanduser().resolve(),
        output=output.expanduser().resolve(),
        root=root.expanduser().resolve(),
        config_file=config_file.expanduser().resolve() if config_file else None,
        platform=platform,
        debug=debug,
        precision={stage: level for stage, level in precision.items() if level is not None},
        list_deps=list_deps,
        use_color=not no_color,
        use_emoji=not no_emoji,
    )


__all__ = [
    "BuildCLIOptions",
    "build_build_options",
    "CONFIG_OPTION",
    "DEBUG_OPTION",
    "LIST_DEPS_OPTION",
    "NO_COLOR_OPTION",
    "NO_EMOJI_OPTION",
    "OUTPUT_OPTION",
    "PIXEL_FLOAT_OPTION",
    "PIXEL_INT_OPTION",
    "PLATFORM_OPTION",
    "ROOT_OPTION",
    "SOURCE_ARGUMENT",
    "VERTEX_FLOAT_OPTION",
    "VERTEX_INT_OPTION",
]
