"""Top-level package for the live snippet toolkit.

Provides subpackages:
- snippet_toolkit.core – variant/surface models
- snippet_toolkit.splitter – desktop/mobile marker splitting
- snippet_toolkit.normalizer – transform + format pipeline for live code
- snippet_toolkit.state – slot store and active-variant selection
- snippet_toolkit.session – one editor instance (initialization + view)
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("snippet-toolkit")
except PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.0.0"

__all__: list[str] = ["__version__"]
