"""
Module: normalizer

Purpose:
    Adapter around the external transform and format services used to
    prepare typed snippets for live execution.

Key Functions:
    - normalize(): Two-stage pipeline, or identity when disabled
    - needs_normalization(): live + typed-language gate

Key Classes:
    - NormalizerConfig: Commands, timeout, typed languages
    - SourceTransformer / CodeFormatter: Stage interfaces
    - CommandTransformer / CommandFormatter: Subprocess stages
    - NormalizationError / ConfigError: Failures

Used By:
    - session.controller: Initialization task
    - cli: --config handling
"""

from .backends import (
    CodeFormatter,
    CommandFormatter,
    CommandTransformer,
    NormalizationError,
    SourceTransformer,
)
from .config import ConfigError, NormalizerConfig
from .pipeline import needs_normalization, normalize

__all__ = [
    "normalize",
    "needs_normalization",
    "NormalizerConfig",
    "ConfigError",
    "NormalizationError",
    "SourceTransformer",
    "CodeFormatter",
    "CommandTransformer",
    "CommandFormatter",
]
