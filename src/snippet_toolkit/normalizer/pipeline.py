"""
Module: normalizer.pipeline

Purpose:
    Transform-then-format pipeline that turns a typed snippet segment into
    canonical plain code for live execution. Passthrough when disabled.

Key Functions:
    - normalize(): Run (or skip) the two-stage pipeline on one segment
    - needs_normalization(): Decide whether a snippet is normalized at all

Dependencies:
    - .backends: SourceTransformer, CodeFormatter, NormalizationError
    - .config: NormalizerConfig

Used By:
    - session.controller: Initialization task (one call per segment)

Failure Semantics:
    Stage failures propagate as NormalizationError. There is no fallback
    to the raw text; callers decide how to present the failure.
"""

from __future__ import annotations

import logging
from typing import Optional

from .backends import (
    CodeFormatter,
    CommandFormatter,
    CommandTransformer,
    NormalizationError,
    SourceTransformer,
)
from .config import NormalizerConfig

logger = logging.getLogger(__name__)


def needs_normalization(
    live: bool,
    language: Optional[str],
    config: Optional[NormalizerConfig] = None,
) -> bool:
    """
    Return True if a snippet should go through the pipeline.

    Only live snippets in a typed language are normalized; every other
    language is passthrough whatever the live flag says.

    Example:
        >>> needs_normalization(True, "tsx")
        True
        >>> needs_normalization(True, "python")
        False
        >>> needs_normalization(False, "typescript")
        False
    """
    if not live or not language:
        return False
    config = config or NormalizerConfig()
    return language.lower() in config.typed_languages


async def normalize(
    text: str,
    enabled: bool,
    *,
    transformer: Optional[SourceTransformer] = None,
    formatter: Optional[CodeFormatter] = None,
    config: Optional[NormalizerConfig] = None,
) -> str:
    """
    Normalize one snippet segment.

    Args:
        text: Segment text
        enabled: False makes this an exact identity
        transformer: Typed-to-plain stage (default: external command)
        formatter: Pretty-print stage (default: external command)
        config: Used to build default stages

    Returns:
        Normalized text, or text unchanged when disabled

    Raises:
        NormalizationError: If either stage fails
    """
    if not enabled:
        return text

    config = config or NormalizerConfig()
    transformer = transformer or CommandTransformer(config=config)
    formatter = formatter or CommandFormatter(config=config)

    try:
        plain = await transformer.transform(text)
        formatted = await formatter.format(plain)
    except NormalizationError as e:
        logger.debug(f"Normalization failed in {e.stage} stage: {e.message}")
        raise

    logger.debug(f"Normalized segment: {len(text)} -> {len(formatted)} chars")
    return formatted
