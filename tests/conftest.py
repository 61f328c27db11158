import asyncio
import logging
import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import snippet_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from snippet_toolkit.normalizer import CodeFormatter, NormalizationError, SourceTransformer


class FakeTransformer(SourceTransformer):
    """Strips ': number' annotations; fails on code containing fail_on."""

    def __init__(self, fail_on: str | None = None, delay: float = 0.0):
        self.fail_on = fail_on
        self.delay = delay
        self.calls: list[str] = []

    async def transform(self, code: str) -> str:
        self.calls.append(code)
        await asyncio.sleep(self.delay)
        if self.fail_on is not None and self.fail_on in code:
            raise NormalizationError("transform", "Unexpected token")
        return code.replace(": number", "")


class FakeFormatter(CodeFormatter):
    """Swaps double quotes for single quotes and adds a trailing newline."""

    def __init__(self):
        self.calls: list[str] = []

    async def format(self, code: str) -> str:
        self.calls.append(code)
        return code.replace('"', "'").strip() + "\n"


# Common test fixtures
@pytest.fixture(autouse=True)
def _qt_application(qapp):
    """Signals on the state store need a Qt application instance."""
    return qapp


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """CLI tests change the package log level; restore it afterwards."""
    logger = logging.getLogger("snippet_toolkit")
    level = logger.level
    handlers = list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers = handlers


@pytest.fixture
def transformer():
    return FakeTransformer()


@pytest.fixture
def make_transformer():
    """Factory for transformers that fail or suspend."""
    return FakeTransformer


@pytest.fixture
def formatter():
    return FakeFormatter()


@pytest.fixture
def split_source_text():
    """Typed desktop variant and plain mobile variant."""
    return "const x: number = 1;\n//MOBILE\nconst y = 2;"


@pytest.fixture
def python_command():
    """Build an argv that runs a Python snippet as an external stage."""
    def _build(script: str) -> list[str]:
        return [sys.executable, "-c", script]
    return _build
