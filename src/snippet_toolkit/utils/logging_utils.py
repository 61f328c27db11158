"""
Logging setup for the snippet-toolkit command line.

Library modules only create module-level loggers; handlers are attached
here, once, when the CLI starts.
"""
from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "snippet_toolkit"
CLI_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _is_cli_handler(handler: logging.Handler) -> bool:
    return getattr(handler, "_snippet_cli", False)


def configure_cli_logging(verbose: bool = False) -> logging.Handler:
    """
    Send package logs to stderr for command-line use.

    Safe to call repeatedly: the stderr handler is added once and only the
    level changes on later calls.

    Args:
        verbose: DEBUG when True, WARNING otherwise

    Returns:
        The stderr handler attached to the package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = next((h for h in logger.handlers if _is_cli_handler(h)), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(CLI_FORMAT))
        handler._snippet_cli = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler
