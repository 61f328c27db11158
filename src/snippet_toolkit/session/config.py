"""
Module: session.config

Purpose:
    Per-instance inputs of an editor session, fixed at activation.

Key Classes:
    - SessionConfig: Language, live flag, only-flags, normalizer config

Used By:
    - session.controller: CodeSession
    - cli: preview command
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from snippet_toolkit.core.models import OnlyFlags
from snippet_toolkit.normalizer import NormalizerConfig, needs_normalization


@dataclass(frozen=True)
class SessionConfig:
    """
    Configuration for one editor instance (immutable).

    Attributes:
        language: Declared snippet language tag (e.g. "tsx", "python")
        live: Whether the snippet runs interactively
        desktop_only: Blank the mobile surface
        mobile_only: Blank the desktop surface
        normalizer: Pipeline configuration

    Example:
        >>> config = SessionConfig(language="tsx", live=True)
        >>> config.normalization_enabled
        True
    """

    language: Optional[str] = None
    live: bool = False
    desktop_only: bool = False
    mobile_only: bool = False
    normalizer: NormalizerConfig = field(default_factory=NormalizerConfig)

    def __post_init__(self) -> None:
        if self.language is not None and not isinstance(self.language, str):
            raise ValueError(f"language must be a string, got {type(self.language).__name__}")

    @property
    def only_flags(self) -> OnlyFlags:
        return OnlyFlags.from_props(self.desktop_only, self.mobile_only)

    @property
    def normalization_enabled(self) -> bool:
        return needs_normalization(self.live, self.language, self.normalizer)
