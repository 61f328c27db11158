"""
Module: splitter.chunks

Purpose:
    Split a snippet source into desktop and mobile segments at the first
    marker line (``@MOBILE``, ``@MOBILE@``, ``//MOBILE`` or ``//MOBILE@``).

Key Functions:
    - split_source(): Split source into a SplitResult
    - has_marker(): True if the source contains a marker
    - join_variants(): Inverse helper for authoring tools and tests

Dependencies:
    - re (std)

Used By:
    - session.controller: CodeSession initialization
    - cli: split / preview commands

Known Limitation:
    Matching is purely line-anchored text. A marker inside a multi-line
    string literal still splits the source.
"""

from __future__ import annotations

import logging
import re

from snippet_toolkit.core.models import SplitResult

logger = logging.getLogger(__name__)

# Case-sensitive, anchored at any line start. Only the marker token (and the
# whitespace before it) is consumed; the rest of that line stays with mobile.
CHUNK_SEPARATOR = re.compile(r"^\s*(?:@|//)MOBILE@?", re.MULTILINE)

DEFAULT_MARKER = "//MOBILE"


def has_marker(source: str) -> bool:
    """Return True if any line of source starts with a mobile marker."""
    return CHUNK_SEPARATOR.search(source) is not None


def split_source(source: str) -> SplitResult:
    """
    Split source at the first mobile marker.

    The split is one-shot: later markers are left verbatim inside the
    mobile segment. Never raises; empty segments are valid.

    Args:
        source: Raw snippet text

    Returns:
        SplitResult with trimmed desktop/mobile segments

    Example:
        >>> r = split_source("const x: number = 1;\\n//MOBILE\\nconst y = 2;")
        >>> (r.desktop, r.mobile, r.was_split)
        ('const x: number = 1;', 'const y = 2;', True)
        >>> split_source("print('hi')").was_split
        False
    """
    parts = CHUNK_SEPARATOR.split(source, maxsplit=1)
    if len(parts) == 1:
        logger.debug("No mobile marker found, using common variant")
        return SplitResult(desktop=source.strip(), mobile="", was_split=False)

    desktop, mobile = parts
    logger.debug(
        f"Split source at mobile marker: desktop={len(desktop)} chars, "
        f"mobile={len(mobile)} chars"
    )
    return SplitResult(desktop=desktop.strip(), mobile=mobile.strip(), was_split=True)


def join_variants(desktop: str, mobile: str, marker: str = DEFAULT_MARKER) -> str:
    """
    Build a split source from two segments.

    Args:
        desktop: Desktop segment
        mobile: Mobile segment
        marker: Marker line to place between them

    Returns:
        Source text that split_source() divides back into the trimmed
        segments, provided desktop itself has no marker line

    Raises:
        ValueError: If marker is not a recognised marker line
    """
    if CHUNK_SEPARATOR.fullmatch(marker.strip()) is None:
        raise ValueError(f"Not a mobile marker: {marker!r}")
    return f"{desktop.strip()}\n{marker.strip()}\n{mobile.strip()}"
