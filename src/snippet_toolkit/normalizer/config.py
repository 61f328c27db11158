"""
Module: normalizer.config

Purpose:
    Configuration dataclass for the normalization pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - NormalizerConfig: External commands, timeout and typed languages
    - ConfigError: Exception for unreadable config files

Dependencies:
    - dataclasses (std)
    - json (std)

Used By:
    - normalizer.backends: Default command lines and timeout
    - normalizer.pipeline: needs_normalization()
    - session.config: SessionConfig
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import FrozenSet, Tuple

logger = logging.getLogger(__name__)

# Strips TypeScript annotations, leaves JSX alone
DEFAULT_TRANSFORM_COMMAND: Tuple[str, ...] = (
    "npx", "--no-install", "esbuild", "--loader=tsx", "--jsx=preserve",
)
# Babel-style pretty printing (indentation, quotes, semicolons)
DEFAULT_FORMAT_COMMAND: Tuple[str, ...] = (
    "npx", "--no-install", "prettier", "--stdin-filepath", "snippet.jsx",
)
DEFAULT_TYPED_LANGUAGES: FrozenSet[str] = frozenset({"typescript", "tsx"})


class ConfigError(Exception):
    """Error loading normalizer configuration."""
    pass


@dataclass(frozen=True)
class NormalizerConfig:
    """
    Configuration for the transform-then-format pipeline (immutable).

    Attributes:
        transform_command: argv of the source-to-source transformer; reads
            code on stdin, writes plain-dialect code on stdout
        format_command: argv of the pretty-printer; stdin to stdout
        timeout_s: Per-stage timeout in seconds
        typed_languages: Language tags that get normalized in live mode

    Example:
        >>> config = NormalizerConfig(timeout_s=5.0)
        >>> "tsx" in config.typed_languages
        True
    """

    transform_command: Tuple[str, ...] = DEFAULT_TRANSFORM_COMMAND
    format_command: Tuple[str, ...] = DEFAULT_FORMAT_COMMAND
    timeout_s: float = 20.0
    typed_languages: FrozenSet[str] = field(default=DEFAULT_TYPED_LANGUAGES)

    def __post_init__(self) -> None:
        """Validate and normalise collection fields."""
        # Accept lists from JSON / callers but store immutable tuples
        object.__setattr__(self, "transform_command", tuple(self.transform_command))
        object.__setattr__(self, "format_command", tuple(self.format_command))
        object.__setattr__(
            self,
            "typed_languages",
            frozenset(lang.lower() for lang in self.typed_languages),
        )

        if not self.transform_command:
            raise ValueError("transform_command must not be empty")
        if not self.format_command:
            raise ValueError("format_command must not be empty")
        if self.timeout_s <= 0:
            raise ValueError(f"timeout_s must be positive, got {self.timeout_s}")

    @classmethod
    def from_json(cls, path: Path) -> "NormalizerConfig":
        """
        Load a config from a JSON object; missing keys keep their defaults.

        Args:
            path: Path to JSON file

        Returns:
            NormalizerConfig

        Raises:
            ConfigError: If the file is missing, not JSON, not an object,
                has unknown keys, or holds invalid values
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config file is corrupted: {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a JSON object: {path}")

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys in {path}: {sorted(unknown)}")

        try:
            config = cls(**data)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid config in {path}: {e}") from e

        logger.debug(f"Loaded normalizer config from {path}")
        return config
