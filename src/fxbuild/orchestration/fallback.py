# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Default processing for platforms fxbuild does not compile for."""

from __future__ import annotations

from ..core.models import CompiledArtifact, FileIdentity
from ..interfaces.services import BuildHost


class SourceCopyFallback:
    """Pass the effect source through unchanged for the runtime to compile."""

    def process(self, identity: FileIdentity, host: BuildHost) -> CompiledArtifact:
        del host
        return CompiledArtifact(data=identity.source_path.read_bytes())


__all__ = ["SourceCopyFallback"]
