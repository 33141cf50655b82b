"""
Command-line entry point.

Usage:
    jekyll-translate _posts/hello.html --target-lang FR
    jekyll-translate index.html --output fr/index.html --translate-fields title
    jekyll-translate index.html --dry-run

Environment:
    DEEPL_API_KEY   DeepL authentication key (or set it in ./.env)
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import (
    DEFAULT_SOURCE_LANG,
    DEFAULT_TARGET_LANG,
    DEFAULT_TRANSLATE_FIELDS,
    TranslateConfig,
    get_api_key,
    parse_field_list,
)
from .errors import JekyllTranslateError, UsageError
from .git_check import check_git_status
from .logging_utils import configure_logging
from .services.deepl_client import API_HOSTS, DeepLClient
from .translate import translate_file

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jekyll-translate",
        description="Translate a Jekyll HTML file with the DeepL API, "
        "preserving front matter and markup.",
        epilog="Environment: DEEPL_API_KEY (or a .env file in the working directory)",
    )
    parser.add_argument("input_file", help="Jekyll file to translate")
    parser.add_argument(
        "--output",
        metavar="FILE",
        help="Output file path (default: <target lang>/<filename>)",
    )
    parser.add_argument(
        "--target-lang",
        default=DEFAULT_TARGET_LANG,
        metavar="LANG",
        help=f"Target language code (default: {DEFAULT_TARGET_LANG})",
    )
    parser.add_argument(
        "--source-lang",
        default=DEFAULT_SOURCE_LANG,
        metavar="LANG",
        help=f"Source language code (default: {DEFAULT_SOURCE_LANG})",
    )
    parser.add_argument(
        "--translate-fields",
        default=",".join(DEFAULT_TRANSLATE_FIELDS),
        metavar="FIELDS",
        help="Comma-separated front matter fields to translate "
        f"(default: {','.join(DEFAULT_TRANSLATE_FIELDS)})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show character count without translating",
    )
    parser.add_argument(
        "--skip-git-check",
        action="store_true",
        help="Skip git status check (not recommended)",
    )
    parser.add_argument(
        "--api-tier",
        choices=sorted(API_HOSTS),
        default="free",
        help="API tier to use (default: free)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> TranslateConfig:
    target_lang = args.target_lang.strip()
    source_lang = args.source_lang.strip()
    if not target_lang:
        raise UsageError("--target-lang must not be empty")
    if not source_lang:
        raise UsageError("--source-lang must not be empty")

    return TranslateConfig(
        input_path=Path(args.input_file),
        output_path=Path(args.output) if args.output else None,
        target_lang=target_lang,
        source_lang=source_lang,
        translate_fields=parse_field_list(args.translate_fields),
        dry_run=args.dry_run,
        skip_git_check=args.skip_git_check,
        api_tier=args.api_tier,
    )


def run(config: TranslateConfig) -> None:
    if not config.skip_git_check:
        check_git_status()

    api_key = get_api_key()

    client = DeepLClient(api_key, tier=config.api_tier)
    try:
        translate_file(config, client)
    finally:
        client.close()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the translator CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        0 on success, 1 on runtime errors, 2 on usage errors
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = config_from_args(args)
        run(config)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except JekyllTranslateError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
