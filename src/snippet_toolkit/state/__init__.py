"""
Module: state

Purpose:
    Editor code state: the slot store and the logic choosing which slot
    is active for a surface.

Key Functions:
    - select(): Active code, mutator and reset for a query
    - resolve_variant(): Pure dispatch used by select()

Key Classes:
    - VariantStateStore: Observable slot store
    - Selection: Result of select()

Used By:
    - session.controller: CodeSession
"""

from .store import AlreadyPopulatedError, CodeSlot, VariantStateStore
from .selection import Selection, resolve_variant, select

__all__ = [
    "VariantStateStore",
    "CodeSlot",
    "AlreadyPopulatedError",
    "Selection",
    "resolve_variant",
    "select",
]
