"""Command-line interface for TokPulse.

Usage:
    # Fetch and extract one or more TikTok URLs
    tokpulse download https://www.tiktok.com/@user/video/1234567890

    # Same, as JSON
    tokpulse download --json https://vm.tiktok.com/ZMabc123/

    # Run only the extraction pipeline on a saved page ("-" reads stdin)
    tokpulse extract saved_page.html
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import structlog

from tokpulse.collectors.tiktok import TikTokCollector
from tokpulse.core.exceptions import (
    CollectorError,
    ExtractionFailedError,
    InvalidURLError,
    TokPulseError,
)
from tokpulse.core.logging import configure_logging
from tokpulse.extraction.pipeline import get_default_pipeline
from tokpulse.extraction.schema import NormalizedRecord

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_INVALID_URL = 2
EXIT_TRANSPORT = 3
EXIT_EXTRACTION = 4


def exit_code_for(error: TokPulseError) -> int:
    """Map an error to the process exit code."""
    if isinstance(error, InvalidURLError):
        return EXIT_INVALID_URL
    if isinstance(error, CollectorError):
        return EXIT_TRANSPORT
    if isinstance(error, ExtractionFailedError):
        return EXIT_EXTRACTION
    return 1


def format_record(record: NormalizedRecord) -> str:
    """Render a record as the plain-text block printed by the CLI."""
    return "\n".join(
        [
            f"Video URL: {record.video_url}",
            f"Thumbnail: {record.thumbnail}",
            f"Title: {record.title}",
            f"Author: {record.author}",
        ]
    )


def print_record(record: NormalizedRecord, as_json: bool) -> None:
    """Print a record as JSON or as the plain-text block."""
    if as_json:
        print(json.dumps(record.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(format_record(record))


async def run_download(urls: list[str], as_json: bool) -> int:
    """Download each URL, printing records and errors. Returns the exit code."""
    exit_code = EXIT_OK
    async with TikTokCollector() as collector:
        outcomes = await collector.download_many(urls)

    for outcome in outcomes:
        if outcome.ok:
            print_record(outcome.record, as_json)
        else:
            print(f"Error ({outcome.url}): {outcome.error.message}", file=sys.stderr)
            exit_code = max(exit_code, exit_code_for(outcome.error))
    return exit_code


def run_extract(source: str, as_json: bool) -> int:
    """Run the pipeline over a saved page. Returns the exit code."""
    if source == "-":
        raw_text = sys.stdin.read()
    else:
        try:
            raw_text = Path(source).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            print(f"Error: cannot read {source}: {e.strerror or e}", file=sys.stderr)
            return EXIT_USAGE

    try:
        record = get_default_pipeline().extract(raw_text)
    except ExtractionFailedError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        print(f"Strategies tried: {', '.join(e.strategies)}", file=sys.stderr)
        return EXIT_EXTRACTION

    print_record(record, as_json)
    print(f"Source: {record.source_tag}", file=sys.stderr)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tokpulse",
        description="Extract video metadata from public TikTok posts",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--log-format",
        choices=["console", "json"],
        help="Override the configured log renderer",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    download_parser = subparsers.add_parser("download", help="Fetch and extract TikTok URLs")
    download_parser.add_argument("urls", nargs="+", metavar="URL", help="TikTok URL")
    download_parser.add_argument("--json", action="store_true", help="Print records as JSON")

    extract_parser = subparsers.add_parser("extract", help="Extract from a saved HTML page")
    extract_parser.add_argument("file", help="Path to an HTML file, or - for stdin")
    extract_parser.add_argument("--json", action="store_true", help="Print the record as JSON")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, fmt=args.log_format)

    if args.command == "download":
        return asyncio.run(run_download(args.urls, args.json))
    return run_extract(args.file, args.json)


if __name__ == "__main__":
    sys.exit(main())
