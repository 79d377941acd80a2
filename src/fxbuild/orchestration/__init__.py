# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Drive an effect through parse, configure, compile and serialize."""

from __future__ import annotations

from .fallback import SourceCopyFallback
from .orchestrator import SERIALIZATION_FAILURE_MESSAGE, EffectOrchestrator
from .request import CompilationRequest, apply_precision, build_request

__all__ = [
    "SERIALIZATION_FAILURE_MESSAGE",
    "CompilationRequest",
    "EffectOrchestrator",
    "SourceCopyFallback",
    "apply_precision",
    "build_request",
]
