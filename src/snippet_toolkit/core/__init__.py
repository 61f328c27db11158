"""
Snippet Toolkit Core Package

Shared data models for the editor state pipeline. Every other subpackage
(splitter, normalizer, state, session) speaks in these types.

**DESIGN NOTES:**

1. **Explicit tags instead of strings**
   - Variants and surfaces are enums; the rendering layer's "desktop" /
     "mobile" strings are parsed once at the boundary.

2. **Immutable inputs**
   - Split results and only-flags are frozen dataclasses. Only the code
     slots in the state store are mutable.
"""

from .models import Variant, Surface, OnlyFlags, SplitResult

__all__ = [
    "Variant",
    "Surface",
    "OnlyFlags",
    "SplitResult",
]
