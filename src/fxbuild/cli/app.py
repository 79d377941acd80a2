# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the build and config commands."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from ..backends import load_backend
from ..config import ConfigError, ConfigLoader
from ..config.models import EffectConfig
from ..core.errors import BuildError
from ..core.logging import fail, info, ok
from ..host import LocalBuildHost, write_artifact
from ..interfaces.services import ShaderBackend
from ..orchestration import EffectOrchestrator
from ..platform import is_supported
from ._build_cli_models import (
    CONFIG_OPTION,
    DEBUG_OPTION,
    LIST_DEPS_OPTION,
    NO_COLOR_OPTION,
    NO_EMOJI_OPTION,
    OUTPUT_OPTION,
    PIXEL_FLOAT_OPTION,
    PIXEL_INT_OPTION,
    PLATFORM_OPTION,
    ROOT_OPTION,
    SOURCE_ARGUMENT,
    VERTEX_FLOAT_OPTION,
    VERTEX_INT_OPTION,
    BuildCLIOptions,
    build_build_options,
)

BUILD_FAILURE_EXIT_CODE = 1
CONFIG_FAILURE_EXIT_CODE = 2

app = typer.Typer(
    name="fxbuild",
    help="Compile effect sources into runtime artifacts.",
    add_completion=False,
    no_args_is_help=True,
)


@app.command("build")
def build_command(
    source: SOURCE_ARGUMENT,
    output: OUTPUT_OPTION,
    root: ROOT_OPTION = Path("."),
    config_file: CONFIG_OPTION = None,
    platform: PLATFORM_OPTION = None,
    debug: DEBUG_OPTION = None,
    vertex_float: VERTEX_FLOAT_OPTION = None,
    vertex_int: VERTEX_INT_OPTION = None,
    pixel_float: PIXEL_FLOAT_OPTION = None,
    pixel_int: PIXEL_INT_OPTION = None,
    list_deps: LIST_DEPS_OPTION = False,
    no_color: NO_COLOR_OPTION = False,
    no_emoji: NO_EMOJI_OPTION = False,
) -> None:
    """Compile SOURCE and write the artifact to --output."""

    options = build_build_options(
        source=source,
        output=output,
        root=root,
        config_file=config_file,
        platform=platform,
        debug=debug,
        precision={
            "vertex_float": vertex_float,
            "vertex_int": vertex_int,
            "pixel_float": pixel_float,
            "pixel_int": pixel_int,
        },
        list_deps=list_deps,
        no_color=no_color,
        no_emoji=no_emoji,
    )
    if not options.source.is_file():
        raise typer.BadParameter(f"Effect source '{options.source}' not found", param_hint="SOURCE")

    try:
        config = _load_config(options)
        backend = load_backend(config.backend) if is_supported(config.platform) else None
    except ConfigError as exc:
        fail(str(exc), use_emoji=options.use_emoji, use_color=options.use_color)
        raise typer.Exit(code=CONFIG_FAILURE_EXIT_CODE) from exc

    host = LocalBuildHost(
        options.source,
        options.output,
        tool=config.tool,
        use_emoji=options.use_emoji,
        use_color=options.use_color,
    )
    _run_build(options, config, backend, host)


def _run_build(
    options: BuildCLIOptions,
    config: EffectConfig,
    backend: ShaderBackend | None,
    host: LocalBuildHost,
) -> None:
    orchestrator = EffectOrchestrator(backend, config=config)
    try:
        artifact = orchestrator.compile(host)
        write_artifact(artifact, host.output_path)
    except BuildError as exc:
        fail(str(exc), use_emoji=options.use_emoji, use_color=options.use_color)
        raise typer.Exit(code=BUILD_FAILURE_EXIT_CODE) from exc
    except OSError as exc:
        fail(f"Unable to write '{host.output_path}': {exc}", use_emoji=options.use_emoji, use_color=options.use_color)
        raise typer.Exit(code=BUILD_FAILURE_EXIT_CODE) from exc

    if options.list_deps:
        for dependency in host.dependencies:
            info(f"depends on {dependency}", use_emoji=options.use_emoji, use_color=options.use_color)
    ok(
        f"Built {host.output_path} ({len(artifact)} bytes, {len(host.warnings)} warning(s))",
        use_emoji=options.use_emoji,
        use_color=options.use_color,
    )


def _load_config(options: BuildCLIOptions) -> EffectConfig:
    loader = ConfigLoader.for_root(
        options.root,
        project_config=options.config_file,
        overrides=options.overrides(),
    )
    return loader.load()


@app.command("config")
def config_command(
    root: ROOT_OPTION = Path("."),
    config_file: CONFIG_OPTION = None,
) -> None:
    """Print the effective configuration as JSON."""

    loader = ConfigLoader.for_root(
        root.expanduser().resolve(),
        project_config=config_file.expanduser().resolve() if config_file else None,
    )
    try:
        result = loader.load_with_trace()
    except ConfigError as exc:
        fail(str(exc), use_emoji=True)
        raise typer.Exit(code=CONFIG_FAILURE_EXIT_CODE) from exc
    payload = {"config": result.config.to_dict(), "sources": list(result.sources)}
    typer.echo(json.dumps(payload, indent=2, sort_keys=True))


__all__ = ["app"]
