"""
Core Models Package

Small immutable models describing a snippet's variant scheme.

| Model | Meaning |
|-------|---------|
| `Variant` | Which code slot a text belongs to |
| `Surface` | Which display context is active |
| `OnlyFlags` | Per-surface suppression markers |
| `SplitResult` | Outcome of splitting a source text |
"""

from .variants import Variant, Surface, OnlyFlags
from .split import SplitResult

__all__ = [
    "Variant",
    "Surface",
    "OnlyFlags",
    "SplitResult",
]
