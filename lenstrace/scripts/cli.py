"""CLI tool for Lenstrace."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from lenstrace.config import config
from lenstrace.logging_config import configure_logging
from lenstrace.media.dimensions import sniff_dimensions
from lenstrace.routes.analyze import get_analyzer


def sniff_files(paths: list[str], max_bytes: int) -> int:
    """Print the dimensions of local image files.

    Returns:
        Number of files that could not be read or recognized
    """
    failures = 0
    for raw_path in paths:
        path = Path(raw_path)
        try:
            with path.open("rb") as handle:
                prefix = handle.read(max_bytes)
        except OSError as exc:
            print(f"{path}: {exc.strerror or exc}", file=sys.stderr)
            failures += 1
            continue

        header = sniff_dimensions(prefix)
        if header is None:
            print(f"{path}: not recognized")
            failures += 1
        else:
            print(f"{path}: {header.width}x{header.height} ({header.format.value})")
    return failures


async def analyze_url(url: str) -> None:
    """Analyze a media URL and print the JSON report."""
    report = await get_analyzer().analyze(url)
    print(json.dumps(report.to_dict(), indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description="Lenstrace CLI tool.")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sniff_parser = subparsers.add_parser(
        "sniff", help="Print image dimensions read from file headers"
    )
    sniff_parser.add_argument("paths", nargs="+", help="Image files")
    sniff_parser.add_argument(
        "--max-bytes",
        type=int,
        default=config.PROBE_MAX_BYTES,
        help="Leading bytes to read from each file",
    )

    analyze_parser = subparsers.add_parser(
        "analyze", help="Run the footprint analysis for a media URL"
    )
    analyze_parser.add_argument("url", help="Media URL")

    args = parser.parse_args()
    level = None if args.debug else config.LOG_LEVEL
    configure_logging(level, debug=args.debug or config.DEBUG)

    if args.command == "sniff":
        failures = sniff_files(args.paths, args.max_bytes)
        sys.exit(1 if failures else 0)
    elif args.command == "analyze":
        asyncio.run(analyze_url(args.url))


if __name__ == "__main__":
    main()
