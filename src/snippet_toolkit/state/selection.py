"""
Module: state.selection

Purpose:
    Pick the active code variant for the current surface. Dispatch is a
    pure function of (was_split, surface, only_flags); select() then reads
    the store and binds the mutator and reset for that variant.

Key Functions:
    - resolve_variant(): Pure variant/suppression dispatch
    - select(): Build the Selection from a store

Dependencies:
    - core.models: Variant, Surface, OnlyFlags
    - .store.VariantStateStore

Used By:
    - session.controller: CodeSession.view()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional, Tuple

from snippet_toolkit.core.models import OnlyFlags, Surface, Variant

from .store import VariantStateStore

logger = logging.getLogger(__name__)

_SURFACE_VARIANTS = {
    Surface.DESKTOP: Variant.DESKTOP,
    Surface.MOBILE: Variant.MOBILE,
}


@dataclass(frozen=True)
class Selection:
    """
    Active code for one query.

    Attributes:
        variant: Slot the mutator and reset act on
        active_code: Text to show ("" when the surface is suppressed)
        mutate: Overwrites the variant's slot
        reset: Restores the variant's original and bumps the generation
    """

    variant: Variant
    active_code: str
    mutate: Callable[[str], None]
    reset: Callable[[], None]


def resolve_variant(
    was_split: bool,
    surface: Optional[Surface],
    only_flags: OnlyFlags,
) -> Tuple[Variant, bool]:
    """
    Decide which slot is active and whether its text is suppressed.

    Rules:
    1. Unsplit source: COMMON, surface and flags ignored
    2. Split, DESKTOP surface: DESKTOP, blank if mobile_only
    3. Split, MOBILE surface: MOBILE, blank if desktop_only
    4. Split, no surface yet: COMMON (fallback)

    Returns:
        (variant, suppressed)

    Example:
        >>> resolve_variant(True, Surface.DESKTOP, OnlyFlags(mobile_only=True))
        (<Variant.DESKTOP: 2>, True)
    """
    if not was_split or surface is None:
        return Variant.COMMON, False
    return _SURFACE_VARIANTS[surface], only_flags.suppresses(surface)


def select(
    was_split: bool,
    surface: Optional[Surface],
    only_flags: OnlyFlags,
    store: VariantStateStore,
) -> Selection:
    """
    Resolve the active variant and bind its mutator and reset.

    Never raises; every input combination yields a Selection.
    """
    variant, suppressed = resolve_variant(was_split, surface, only_flags)
    active_code = "" if suppressed else store.get(variant)
    logger.debug(
        f"Selected {variant.name} for surface "
        f"{surface.value if surface else None} (suppressed={suppressed})"
    )
    return Selection(
        variant=variant,
        active_code=active_code,
        mutate=store.setter(variant),
        reset=partial(store.reset, variant),
    )
