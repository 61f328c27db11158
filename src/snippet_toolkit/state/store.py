"""
Module: state.store

Purpose:
    Holds the three independent code slots (common, desktop, mobile), their
    reset targets, the readiness flag and the reset generation. Observers
    subscribe through Qt signals instead of polling.

Key Classes:
    - CodeSlot: Mutable text plus fixed original
    - VariantStateStore: QObject owning the slots
    - AlreadyPopulatedError: Second populate() on the same store

Dependencies:
    - PySide6.QtCore: QObject/Signal for change notification
    - core.models.Variant

Used By:
    - state.selection: select()
    - session.controller: CodeSession
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Optional

from PySide6.QtCore import QObject, Signal

from snippet_toolkit.core.models import Variant

logger = logging.getLogger(__name__)


class AlreadyPopulatedError(RuntimeError):
    """Store originals were already fixed by an earlier populate()."""
    pass


@dataclass
class CodeSlot:
    """
    One editable code cell.

    Attributes:
        variant: Which slot this is
        text: Current (possibly edited) text
        original: Reset target, fixed at population time
    """

    variant: Variant
    text: str = ""
    original: str = ""


def _now_ms() -> int:
    return int(time.time() * 1000)


class VariantStateStore(QObject):
    """
    Slot store for one editor instance.

    Slots start empty and are filled once by populate(). After that only
    set() and reset() change them.

    Signals:
        codeChanged(Variant, str): A slot's text changed
        readyChanged(bool): Readiness flipped
        resetGenerationChanged(int): reset() ran

    Example:
        >>> store = VariantStateStore()
        >>> store.populate(common="a", common_original=" a ")
        >>> store.set(Variant.COMMON, "b")
        >>> store.reset(Variant.COMMON)
        >>> store.get(Variant.COMMON)
        ' a '
    """

    codeChanged = Signal(object, str)
    readyChanged = Signal(bool)
    resetGenerationChanged = Signal("qint64")

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._slots: Dict[Variant, CodeSlot] = {v: CodeSlot(v) for v in Variant}
        self._ready = False
        self._populated = False
        self._reset_generation = _now_ms()

    # ─────────────────────────────────────────────────────────────────────────
    # Slot access
    # ─────────────────────────────────────────────────────────────────────────

    def get(self, variant: Variant) -> str:
        return self._slots[variant].text

    def original(self, variant: Variant) -> str:
        return self._slots[variant].original

    def set(self, variant: Variant, text: str) -> None:
        """
        Overwrite a slot's text.

        Ignored until populate() has run; slots read as empty before
        readiness and population would overwrite the edit anyway.
        """
        if not self._ready:
            logger.debug(f"Ignoring {variant.name} edit before store is ready")
            return
        slot = self._slots[variant]
        if slot.text == text:
            return
        slot.text = text
        self.codeChanged.emit(variant, text)

    def setter(self, variant: Variant) -> Callable[[str], None]:
        """Return a mutator bound to one slot."""
        return partial(self.set, variant)

    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def reset_generation(self) -> int:
        return self._reset_generation

    def populate(
        self,
        common: str,
        common_original: str,
        desktop: Optional[str] = None,
        mobile: Optional[str] = None,
    ) -> None:
        """
        Fill slots and originals, then mark the store ready.

        Slots passed as None stay empty. Nothing is emitted until every
        slot is written, so observers never see a partial population.

        Args:
            common: Common slot text
            common_original: Common reset target (the raw source)
            desktop: Desktop text, also its reset target
            mobile: Mobile text, also its reset target

        Raises:
            AlreadyPopulatedError: If called twice
        """
        if self._populated:
            raise AlreadyPopulatedError("Store has already been populated")
        self._populated = True

        values = {Variant.COMMON: (common, common_original)}
        if desktop is not None:
            values[Variant.DESKTOP] = (desktop, desktop)
        if mobile is not None:
            values[Variant.MOBILE] = (mobile, mobile)

        for variant, (text, original) in values.items():
            slot = self._slots[variant]
            slot.text = text
            slot.original = original

        self._ready = True
        logger.debug(f"Populated slots: {[v.name for v in values]}")

        for variant in values:
            self.codeChanged.emit(variant, self._slots[variant].text)
        self.readyChanged.emit(True)

    def reset(self, variant: Variant) -> None:
        """
        Restore a slot to its original and bump the reset generation.

        Both updates land before any signal fires. The generation always
        changes, even if the restored text equals the current text.
        """
        slot = self._slots[variant]
        self._reset_generation = max(self._reset_generation + 1, _now_ms())
        changed = slot.text != slot.original
        slot.text = slot.original

        logger.debug(f"Reset {variant.name} slot (generation {self._reset_generation})")
        self.resetGenerationChanged.emit(self._reset_generation)
        if changed:
            self.codeChanged.emit(variant, slot.text)
