"""
Module: session.controller

Purpose:
    One editor instance: runs the initialization task once, then answers
    view queries for whichever surface the rendering layer is showing.
    Split → Normalize (concurrently) → Populate → Ready

Key Classes:
    - CodeSession: Instance owning the store and initialization task
    - CodeView: (code, set_code, reset_code, reset_key, ready) for a query

Dependencies:
    - asyncio (std): Initialization task
    - splitter: split_source()
    - normalizer: normalize(), NormalizationError
    - state: VariantStateStore, select()

Used By:
    - cli: preview command
    - Rendering collaborators embedding the editor
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from snippet_toolkit.core.models import OnlyFlags, Surface
from snippet_toolkit.normalizer import (
    CodeFormatter,
    NormalizationError,
    SourceTransformer,
    normalize,
)
from snippet_toolkit.splitter import split_source
from snippet_toolkit.state import VariantStateStore, select

from .config import SessionConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CodeView:
    """
    Externally visible editor state for one query.

    Attributes:
        code: Active code ("" until ready)
        set_code: Mutator for the active slot
        reset_code: Restore the active slot and bump reset_key
        reset_key: Changes on every reset; used to remount the editor
        ready: Whether initialization has completed
    """

    code: str
    set_code: Callable[[str], None]
    reset_code: Callable[[], None]
    reset_key: int
    ready: bool


class CodeSession:
    """
    Editable-code state for one dual-target snippet.

    Inputs are fixed for the lifetime of the instance. Surface and
    only-flags may vary per query without re-running initialization.

    Example:
        >>> session = CodeSession("a()\\n//MOBILE\\nb()")
        >>> asyncio.run(session.wait_ready())
        True
        >>> session.view("mobile").code
        'b()'
    """

    def __init__(
        self,
        source: str,
        config: Optional[SessionConfig] = None,
        *,
        transformer: Optional[SourceTransformer] = None,
        formatter: Optional[CodeFormatter] = None,
    ) -> None:
        """
        Initialize session.

        Args:
            source: Raw snippet text
            config: Language, live and only-flags (defaults: passthrough)
            transformer: Overrides the external transform stage
            formatter: Overrides the external format stage
        """
        self.source = source
        self.config = config or SessionConfig()
        self.store = VariantStateStore()
        self.error: Optional[NormalizationError] = None

        self._split = split_source(source)
        self._transformer = transformer
        self._formatter = formatter
        self._task: Optional[asyncio.Task] = None
        self._closed = False

    @property
    def was_split(self) -> bool:
        return self._split.was_split

    @property
    def closed(self) -> bool:
        return self._closed

    # ─────────────────────────────────────────────────────────────────────────
    # Initialization
    # ─────────────────────────────────────────────────────────────────────────

    def activate(self) -> asyncio.Task:
        """
        Start the initialization task; later calls return the same task.

        Must be called with a running event loop.
        """
        if self._task is None:
            self._task = asyncio.ensure_future(self._prepare())
            self._task.add_done_callback(self._on_prepared)
        return self._task

    async def wait_ready(self) -> bool:
        """
        Activate if needed and wait for initialization.

        Returns:
            Readiness after the task finished (False if the session was
            closed before the result arrived)

        Raises:
            NormalizationError: If normalization failed
        """
        await self.activate()
        return self.ready

    async def _prepare(self) -> None:
        enabled = self.config.normalization_enabled
        segments = self._split.segments
        logger.info(
            f"Preparing snippet: split={self.was_split}, "
            f"segments={len(segments)}, normalize={enabled}"
        )

        try:
            results = await asyncio.gather(
                *(
                    normalize(
                        segment,
                        enabled,
                        transformer=self._transformer,
                        formatter=self._formatter,
                        config=self.config.normalizer,
                    )
                    for segment in segments
                )
            )
        except NormalizationError as e:
            if self._closed:
                logger.debug(f"Session closed during initialization, discarding failure: {e}")
                return
            self.error = e
            raise

        if self._closed:
            logger.debug("Session closed during initialization, discarding result")
            return

        desktop = results[0]
        if self.was_split:
            self.store.populate(
                common=desktop,
                common_original=self.source,
                desktop=desktop,
                mobile=results[1],
            )
        else:
            self.store.populate(common=desktop, common_original=self.source)
        logger.info("Snippet ready")

    def _on_prepared(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Snippet initialization failed: {error}")

    def close(self) -> None:
        """
        Tear the instance down.

        An in-flight initialization keeps running but its result, or its
        failure, is dropped instead of written to the store or the session.
        """
        self._closed = True

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def ready(self) -> bool:
        return self.store.ready

    @property
    def reset_key(self) -> int:
        return self.store.reset_generation

    @property
    def code(self) -> str:
        """Active code with no surface established (common fallback)."""
        return self.view().code

    def view(
        self,
        surface: Union[Surface, str, None] = None,
        only_flags: Optional[OnlyFlags] = None,
    ) -> CodeView:
        """
        Active code, mutator and reset for a surface.

        Args:
            surface: Current surface ("desktop"/"mobile"/Surface/None)
            only_flags: Overrides the session's flags for this query

        Returns:
            CodeView; code is "" until ready. Never raises.
        """
        selection = select(
            self.was_split,
            Surface.parse(surface),
            only_flags if only_flags is not None else self.config.only_flags,
            self.store,
        )
        return CodeView(
            code=selection.active_code if self.ready else "",
            set_code=selection.mutate,
            reset_code=selection.reset,
            reset_key=self.store.reset_generation,
            ready=self.ready,
        )
