"""
Module: splitter

Purpose:
    Detect and split the desktop/mobile marker convention used in
    documentation snippets.

Key Functions:
    - split_source(): One-shot split at the first marker
    - has_marker(): Marker detection only
    - join_variants(): Rebuild a split source from two segments

Used By:
    - session.controller: Initialization task
    - cli: split command
"""

from .chunks import CHUNK_SEPARATOR, split_source, has_marker, join_variants

__all__ = [
    "CHUNK_SEPARATOR",
    "split_source",
    "has_marker",
    "join_variants",
]
