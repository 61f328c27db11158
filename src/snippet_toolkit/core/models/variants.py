"""
Module: variants

Purpose:
    Provides the Variant and Surface tags plus the OnlyFlags pair that
    together decide which code text an editor instance shows.

Key Classes:
    - Variant: Code slot tag (COMMON, DESKTOP, MOBILE)
    - Surface: Active display context (DESKTOP, MOBILE)
    - OnlyFlags: desktop_only / mobile_only suppression markers

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - state.store: Slot keys
    - state.selection: Variant dispatch
    - session.controller: Query inputs
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


class Variant(Enum):
    """
    Tag for one of the three independent code slots.

    Attributes:
        COMMON: Single-variant snippet (no marker). Also the fallback
                slot when no surface is established yet.
        DESKTOP: Text before the mobile marker.
        MOBILE: Text after the mobile marker.
    """

    COMMON = auto()
    DESKTOP = auto()
    MOBILE = auto()


class Surface(Enum):
    """
    Display context supplied by the rendering layer.

    Example:
        >>> Surface.parse("mobile")
        <Surface.MOBILE: 'mobile'>
        >>> Surface.parse("tablet") is None
        True
    """

    DESKTOP = "desktop"
    MOBILE = "mobile"

    @classmethod
    def parse(cls, value: Union["Surface", str, None]) -> Optional["Surface"]:
        """
        Convert a rendering-layer value into a Surface.

        Unknown values mean "no surface established yet" and map to None
        rather than raising, since selection has a defined fallback.

        Args:
            value: Surface, "desktop"/"mobile" (any case), or None

        Returns:
            Matching Surface, or None
        """
        if value is None or isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for surface in cls:
            if surface.value == text:
                return surface
        return None


@dataclass(frozen=True, slots=True)
class OnlyFlags:
    """
    Per-surface suppression markers.

    Naming follows the documentation authoring convention: ``mobile_only``
    means "only show this snippet on mobile", so it blanks the DESKTOP
    surface. ``desktop_only`` blanks the MOBILE surface.

    Attributes:
        desktop_only: Blank the mobile surface's code
        mobile_only: Blank the desktop surface's code
    """

    desktop_only: bool = False
    mobile_only: bool = False

    @classmethod
    def from_props(
        cls,
        desktop_only: Union[str, bool, None] = None,
        mobile_only: Union[str, bool, None] = None,
    ) -> "OnlyFlags":
        """
        Build flags from page props, which may be bare attributes (strings).

        Any truthy value counts; "" and None are false.

        Example:
            >>> OnlyFlags.from_props(mobile_only="true")
            OnlyFlags(desktop_only=False, mobile_only=True)
        """
        return cls(desktop_only=bool(desktop_only), mobile_only=bool(mobile_only))

    def suppresses(self, surface: Surface) -> bool:
        """Return True if this surface's code must render empty."""
        if surface is Surface.DESKTOP:
            return self.mobile_only
        if surface is Surface.MOBILE:
            return self.desktop_only
        return False
