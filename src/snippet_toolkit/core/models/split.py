"""
Module: split

Purpose:
    Provides the SplitResult dataclass returned by the variant splitter.

Used By:
    - splitter.chunks: split_source()
    - session.controller: Initialization task
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SplitResult:
    """
    Outcome of splitting a snippet source.

    Attributes:
        desktop: Trimmed text before the marker (whole source if unsplit)
        mobile: Trimmed text after the marker ("" if unsplit)
        was_split: Whether a marker line was found

    Invariants:
        - was_split is False implies mobile == ""

    Example:
        >>> SplitResult("a()", "", False).segments
        ('a()',)
    """

    desktop: str
    mobile: str
    was_split: bool

    def __post_init__(self) -> None:
        if not self.was_split and self.mobile:
            raise ValueError("Unsplit result cannot carry a mobile segment")

    @property
    def segment_a(self) -> str:
        return self.desktop

    @property
    def segment_b(self) -> str:
        return self.mobile

    @property
    def segments(self) -> tuple[str, ...]:
        """Segments that need normalizing: one if unsplit, two if split."""
        if self.was_split:
            return (self.desktop, self.mobile)
        return (self.desktop,)
