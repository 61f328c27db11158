"""
Module: normalizer.backends

Purpose:
    Interfaces for the two external normalization stages and default
    implementations that pipe code through external commands.

Key Classes:
    - SourceTransformer: Abstract typed-to-plain dialect transform
    - CodeFormatter: Abstract deterministic pretty-printer
    - CommandTransformer / CommandFormatter: subprocess-backed stages
    - NormalizationError: Exception for either stage failing

Dependencies:
    - asyncio (std): Non-blocking subprocess I/O
    - .config.NormalizerConfig

Used By:
    - normalizer.pipeline: normalize()
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .config import NormalizerConfig

logger = logging.getLogger(__name__)

STAGE_TRANSFORM = "transform"
STAGE_FORMAT = "format"


class NormalizationError(Exception):
    """Transform or format stage rejected the snippet."""

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(f"{stage} failed: {message}")
        self.stage = stage
        self.message = message


class SourceTransformer(ABC):
    """
    Converts statically-typed snippet code into the plain dialect.

    Implementations must raise NormalizationError on input they cannot
    handle rather than returning partial output.
    """

    @abstractmethod
    async def transform(self, code: str) -> str:
        """
        Transform typed code into plain code.

        Args:
            code: Typed-dialect source

        Returns:
            Plain-dialect source

        Raises:
            NormalizationError: If the code cannot be transformed
        """


class CodeFormatter(ABC):
    """Reformats plain-dialect code into canonical style."""

    @abstractmethod
    async def format(self, code: str) -> str:
        """
        Pretty-print code.

        Raises:
            NormalizationError: If the code cannot be parsed
        """


async def run_stage(
    stage: str,
    argv: Sequence[str],
    code: str,
    timeout_s: float,
) -> str:
    """
    Run one external stage: code on stdin, result on stdout.

    Args:
        stage: Stage name used in errors and logs
        argv: Command line
        code: Input text
        timeout_s: Seconds before the process is killed

    Returns:
        Decoded stdout

    Raises:
        NormalizationError: Unencodable input, missing executable, timeout,
            non-zero exit or output that is not UTF-8
    """
    try:
        payload = code.encode("utf-8")
    except UnicodeEncodeError as e:
        raise NormalizationError(stage, f"input is not valid UTF-8 text: {e}") from e

    logger.debug(f"Running {stage} stage: {' '.join(argv)}")
    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise NormalizationError(stage, f"could not start {argv[0]!r}: {e}") from e

    try:
        stdout, stderr = await asyncio.wait_for(
            proc.communicate(payload),
            timeout=timeout_s,
        )
    except asyncio.TimeoutError as e:
        proc.kill()
        await proc.wait()
        raise NormalizationError(stage, f"timed out after {timeout_s}s") from e

    if proc.returncode != 0:
        detail = stderr.decode("utf-8", errors="replace").strip()
        raise NormalizationError(
            stage, f"exit code {proc.returncode}: {detail or 'no output'}"
        )
    try:
        return stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise NormalizationError(stage, f"output is not valid UTF-8: {e}") from e


class CommandTransformer(SourceTransformer):
    """
    Transformer backed by an external command (esbuild by default).

    The command reads code on stdin and writes the result to stdout.
    """

    def __init__(
        self,
        argv: Optional[Sequence[str]] = None,
        config: Optional[NormalizerConfig] = None,
    ) -> None:
        self.config = config or NormalizerConfig()
        self.argv = tuple(argv) if argv is not None else self.config.transform_command

    async def transform(self, code: str) -> str:
        return await run_stage(STAGE_TRANSFORM, self.argv, code, self.config.timeout_s)


class CommandFormatter(CodeFormatter):
    """Formatter backed by an external command (prettier by default)."""

    def __init__(
        self,
        argv: Optional[Sequence[str]] = None,
        config: Optional[NormalizerConfig] = None,
    ) -> None:
        self.config = config or NormalizerConfig()
        self.argv = tuple(argv) if argv is not None else self.config.format_command

    async def format(self, code: str) -> str:
        return await run_stage(STAGE_FORMAT, self.argv, code, self.config.timeout_s)
