"""Command-line entry point: inspect and preview dual-target snippets."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from snippet_toolkit import __version__
from snippet_toolkit.normalizer import ConfigError, NormalizationError, NormalizerConfig
from snippet_toolkit.session import CodeSession, SessionConfig
from snippet_toolkit.splitter import split_source
from snippet_toolkit.utils.logging_utils import configure_cli_logging


def _read_source(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def cmd_split(args: argparse.Namespace) -> int:
    result = split_source(_read_source(args.file))
    print(f"split: {'yes' if result.was_split else 'no'}")
    if result.was_split:
        print("--- desktop ---")
        print(result.desktop)
        print("--- mobile ---")
        print(result.mobile)
    else:
        print("--- common ---")
        print(result.desktop)
    return 0


async def _preview(source: str, config: SessionConfig, surface: Optional[str]) -> str:
    session = CodeSession(source, config)
    await session.wait_ready()
    return session.view(surface).code


def cmd_preview(args: argparse.Namespace) -> int:
    normalizer = NormalizerConfig()
    if args.config is not None:
        try:
            normalizer = NormalizerConfig.from_json(args.config)
        except ConfigError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2

    config = SessionConfig(
        language=args.language,
        live=args.live,
        desktop_only=args.desktop_only,
        mobile_only=args.mobile_only,
        normalizer=normalizer,
    )
    try:
        code = asyncio.run(_preview(_read_source(args.file), config, args.surface))
    except NormalizationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(code)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snippet-toolkit",
        description="Inspect and preview desktop/mobile code snippets",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    split_p = sub.add_parser("split", help="Show how a snippet splits into variants")
    split_p.add_argument("file", type=Path, help="Snippet source file")
    split_p.set_defaults(func=cmd_split)

    preview_p = sub.add_parser("preview", help="Print the active code for a surface")
    preview_p.add_argument("file", type=Path, help="Snippet source file")
    preview_p.add_argument("--surface", choices=["desktop", "mobile"], help="Active surface")
    preview_p.add_argument("--language", help="Declared snippet language (e.g. tsx)")
    preview_p.add_argument("--live", action="store_true", help="Snippet is live (enables normalization)")
    preview_p.add_argument("--desktop-only", action="store_true", help="Blank the mobile surface")
    preview_p.add_argument("--mobile-only", action="store_true", help="Blank the desktop surface")
    preview_p.add_argument("--config", type=Path, help="Normalizer config JSON")
    preview_p.set_defaults(func=cmd_preview)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_cli_logging(args.verbose)

    try:
        return args.func(args)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
