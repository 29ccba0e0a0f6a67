from __future__ import annotations

import argparse
import sys
from importlib import metadata
from pathlib import Path

import tomllib
from rich.console import Console

from .config import DEFAULT_MAX_LENGTH, DEFAULT_SEPARATOR, ConfigError, SlugConfig
from .converter import SlugConverter, set_debug_logging
from .segment import AnalyzerUnavailableError, SegmentationError

_EXAMPLES = """\
examples:
  kanaslug "認証機能の実装"
    ninshou-kinou-no-jissou
  kanaslug --separator _ "テスト機能"
    tesuto_kinou
  kanaslug --no-morph "テスト"
    tesuto
"""


def _read_local_version() -> str | None:
    try:
        pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
    except IndexError:  # pragma: no cover
        return None
    try:
        with pyproject_path.open("rb") as fh:
            data = tomllib.load(fh)
    except (FileNotFoundError, tomllib.TOMLDecodeError):
        return None
    return data.get("project", {}).get("version")


try:
    __version__ = metadata.version("kanaslug")
except metadata.PackageNotFoundError:
    __version__ = _read_local_version() or "0.0.0+unknown"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="kanaslug",
        description="Convert Japanese text to a romaji slug.",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"kanaslug {__version__}",
    )
    ap.add_argument("text", nargs="*", help="Text to convert (multiple words are joined with spaces).")
    ap.add_argument(
        "--max-length",
        type=int,
        default=DEFAULT_MAX_LENGTH,
        help=f"Maximum slug length; 0 disables truncation (default: {DEFAULT_MAX_LENGTH}).",
    )
    ap.add_argument(
        "--separator",
        default=DEFAULT_SEPARATOR,
        help=f"Word separator (default: {DEFAULT_SEPARATOR!r}).",
    )
    ap.add_argument(
        "--no-morph",
        action="store_true",
        help="Skip morphological analysis and convert the text as a single reading.",
    )
    ap.add_argument(
        "--fold-hiragana",
        action="store_true",
        help="Treat hiragana as katakana instead of dropping it.",
    )
    ap.add_argument(
        "--keep-truncated-separator",
        action="store_true",
        help="Do not strip a separator left at the end by truncation.",
    )
    ap.add_argument(
        "--debug",
        action="store_true",
        help="Print per-reading conversion details to stderr.",
    )
    return ap


def _config_from_args(args: argparse.Namespace) -> SlugConfig:
    try:
        return SlugConfig(
            max_length=args.max_length,
            separator=args.separator,
            use_morphology=not args.no_morph,
            fold_hiragana=args.fold_hiragana,
            trim_truncated_separator=not args.keep_truncated_separator,
        )
    except ConfigError as exc:
        raise SystemExit(f"Error: {exc}") from exc


def _run_convert(args: argparse.Namespace) -> int:
    text = " ".join(args.text).strip()
    if not text:
        console = Console(stderr=True)
        console.print("Error: No input text provided", markup=False)
        build_parser().print_usage(sys.stderr)
        return 1
    set_debug_logging(args.debug)
    config = _config_from_args(args)
    try:
        converter = SlugConverter(config)
    except AnalyzerUnavailableError as exc:
        raise SystemExit(f"Error initializing converter: {exc}") from exc
    try:
        slug = converter.convert(text)
    except SegmentationError as exc:
        raise SystemExit(f"Error converting text: {exc}") from exc
    print(slug)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    return _run_convert(args)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
