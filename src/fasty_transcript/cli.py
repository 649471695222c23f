#!/usr/bin/env python3
"""
FastyTranscript command-line interface.

Usage:
    fasty-transcript <youtube-url-or-id> [--timestamps] [--json]

Exit codes: 0 = success, 1 = no captions available, 2 = invalid input.
"""

import argparse
import json
import sys
from typing import List, Optional

from rich.console import Console

from . import __version__
from .core.config import get_config
from .core.exceptions import AllStrategiesFailedError, InvalidVideoIdError
from .core.transcript_fetcher import TranscriptFetcher
from .utils.formatting import format_transcript_markdown
from .utils.logging import get_logger, set_log_level

EXIT_OK = 0
EXIT_NO_TRANSCRIPT = 1
EXIT_INVALID_INPUT = 2

logger = get_logger("cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="fasty-transcript",
        description="Fetch a YouTube transcript and print it as Markdown"
    )
    parser.add_argument("video", help="YouTube URL (watch, youtu.be, embed, shorts) or 11-character video ID")
    parser.add_argument("--timestamps", action="store_true", help="Prefix each caption with [MM:SS]")
    parser.add_argument("--json", action="store_true", help="Print the raw segments as JSON")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override LOG_LEVEL"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, fetcher: Optional[TranscriptFetcher] = None) -> int:
    """Main entry point."""
    try:
        args = parse_args(argv)
    except SystemExit as e:
        # argparse exits with 2 on usage errors, matching EXIT_INVALID_INPUT
        return e.code if isinstance(e.code, int) else EXIT_INVALID_INPUT

    out = Console(highlight=False, soft_wrap=True)
    err = Console(stderr=True, highlight=False)

    if args.log_level:
        set_log_level(args.log_level)

    try:
        get_config().validate()
    except ValueError as e:
        err.print(f"Invalid configuration: {e}", markup=False)
        return EXIT_INVALID_INPUT

    fetcher = fetcher or TranscriptFetcher()
    logger.debug(f"Fetching transcript for {args.video} (timestamps={args.timestamps})")
    try:
        result = fetcher.get_transcript(args.video, timestamps=args.timestamps)
    except InvalidVideoIdError as e:
        err.print(e.detail, markup=False)
        return EXIT_INVALID_INPUT
    except AllStrategiesFailedError as e:
        if args.json:
            out.out(json.dumps(e.to_dict(), indent=2, ensure_ascii=False))
        err.print(e.detail, markup=False)
        return EXIT_NO_TRANSCRIPT

    if args.json:
        out.out(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        out.out(format_transcript_markdown(
            result.transcript,
            result.video_id,
            result.title,
            method=result.method,
            footer=f"{get_config().app.footer} CLI"
        ))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
