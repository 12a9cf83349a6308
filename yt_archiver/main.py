"""yt-archiver entry point.

Two modes: comment archive (default) and --inline (page with stylesheets
and scripts inlined). Usage: yt-archiver <url> [-o output.html].
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from yt_archiver.config import load_config
from yt_archiver.logging import ArchiverLogging
from yt_archiver.services.archive import archive_page
from yt_archiver.services.inliner import inline_page


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="yt-archiver",
        description="Archive a video page's comment threads into a static HTML file",
    )
    parser.add_argument("url", nargs="?", help="Video page URL")
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write HTML to this file instead of stdout",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--inline",
        action="store_true",
        help="Inline the page's stylesheets and scripts instead of archiving comments",
    )
    parser.add_argument(
        "--no-replies",
        action="store_true",
        help="Only fetch top-level comments",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    args = parser.parse_args(argv)
    if not args.check and not args.url:
        parser.error("the following arguments are required: url")
    return args


def main(argv: list[str] | None = None) -> int:
    """Entry point: archive (or inline) one URL and write the document."""
    args = parse_args(argv)
    try:
        config = load_config(args.config)
    except Exception as e:
        # Logging is configured from this file, so report directly
        print(f"Error: invalid config {args.config}: {e}", file=sys.stderr)
        return 1

    if args.check:
        print(
            "Config OK:",
            config.http.base_url,
            f"reply_batch_size={config.fetch.reply_batch_size}",
        )
        return 0

    if args.no_replies:
        config.fetch.fetch_replies = False

    ArchiverLogging(config.logging).setup()
    log = logging.getLogger("yt_archiver")

    try:
        if args.inline:
            html = asyncio.run(inline_page(args.url, config))
        else:
            html = asyncio.run(archive_page(args.url, config))
        if args.output:
            args.output.write_text(html, encoding="utf-8")
            log.info("Wrote %s", args.output)
        else:
            sys.stdout.write(html)
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        log.error("Error: %s", e)
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
