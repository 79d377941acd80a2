# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Compiler backend discovery.

Backends are factories accepting a :class:`~fxbuild.config.models.BackendConfig`
and returning a :class:`~fxbuild.interfaces.services.ShaderBackend`. Packages
contribute them through the ``fxbuild.backends`` entry-point group; the
built-in command backend is always available.
"""

from __future__ import annotations

from collections.abc import Callable
from importlib import metadata
from typing import Final, TypeAlias, cast

from ..config.models import BackendConfig
from ..core.errors import ConfigError
from ..interfaces.services import ShaderBackend
from .command import BACKEND_NAME as COMMAND_BACKEND_NAME
from .command import create_backend as create_command_backend

BACKEND_ENTRY_POINT_GROUP: Final[str] = "fxbuild.backends"

BackendFactory: TypeAlias = Callable[[BackendConfig], ShaderBackend]

_BUILTIN_BACKENDS: Final[dict[str, BackendFactory]] = {
    COMMAND_BACKEND_NAME: create_command_backend,
}


def discover_backends() -> dict[str, BackendFactory]:
    """Return backend factories keyed by name.

    Returns:
        dict[str, BackendFactory]: Built-in factories overlaid with those
        published under :data:`BACKEND_ENTRY_POINT_GROUP`. Entries that fail to
        import are skipped.
    """

    factories = dict(_BUILTIN_BACKENDS)
    for entry in metadata.entry_points().select(group=BACKEND_ENTRY_POINT_GROUP):
        if entry.name in factories:
            continue
        try:
            factories[entry.name] = cast(BackendFactory, entry.load())
        except (AttributeError, ImportError, ValueError, RuntimeError):
            continue
    return factories


def load_backend(config: BackendConfig) -> ShaderBackend:
    """Instantiate the backend selected by ``config.name``.

    Raises:
        ConfigError: If no backend with that name is available.
    """

    factories = discover_backends()
    try:
        factory = factories[config.name]
    except KeyError as exc:
        available = ", ".join(sorted(factories))
        raise ConfigError(f"Unknown backend '{config.name}' (available: {available})") from exc
    return factory(config)


__all__ = [
    "BACKEND_ENTRY_POINT_GROUP",
    "BackendFactory",
    "discover_backends",
    "load_backend",
]
