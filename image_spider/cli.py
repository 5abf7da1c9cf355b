"""
Command-line interface for the image spider.
"""

import argparse
import sys
from pathlib import Path

from image_spider.config import (
    CrawlSettings,
    DEFAULT_MAX_DEPTH,
    DEFAULT_OUTPUT,
    REQUEST_TIMEOUT,
)
from image_spider.core.crawler import Crawler
from image_spider.errors import InvalidSeedURLError
from image_spider.utils.log import log, setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="image-spider",
        description="Download every image reachable from a URL, optionally "
                    "following links on the same host.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  image-spider https://example.com\n"
            "  image-spider -r https://example.com\n"
            "  image-spider -r -l 2 -p ./images https://example.com\n"
            "  image-spider -r --concurrency 16 --log-file spider.log https://example.com\n"
        ),
    )
    parser.add_argument(
        "url",
        help="URL of the website to scrape (e.g. https://example.com)",
    )
    parser.add_argument(
        "-r", "--recursive", action="store_true", default=False,
        help="Follow same-host links recursively",
    )
    parser.add_argument(
        "-l", "--depth", type=int, default=None, metavar="N",
        help=f"Maximum recursion depth (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "-p", "--path", default=DEFAULT_OUTPUT, metavar="PATH",
        help=f"Directory where images are saved (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--timeout", type=float, default=REQUEST_TIMEOUT, metavar="S",
        help=f"Per-request timeout in seconds (default: {REQUEST_TIMEOUT:g})",
    )
    parser.add_argument(
        "--concurrency", type=int, default=None, metavar="N",
        help="Maximum simultaneous requests (default: unbounded)",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification",
    )
    parser.add_argument(
        "--no-progress", dest="progress", action="store_false", default=True,
        help="Disable the progress bar",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--log-file",
        help="Write detailed logs to this file (always at DEBUG level)",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> CrawlSettings:
    """Map parsed arguments onto :class:`CrawlSettings`."""
    depth = DEFAULT_MAX_DEPTH if args.depth is None else args.depth
    return CrawlSettings(
        recursive=args.recursive,
        max_depth=depth,
        output_dir=Path(args.path),
        timeout=args.timeout,
        max_concurrency=args.concurrency,
        verify_ssl=args.verify_ssl,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_file=args.log_file)

    if args.depth is not None and not args.recursive:
        log.warning("-l/--depth has no effect without -r/--recursive")
    if not args.verify_ssl:
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    target_url = args.url
    if "://" not in target_url:
        target_url = "https://" + target_url

    try:
        settings = build_settings(args)
        crawler = Crawler(target_url, settings)
    except (InvalidSeedURLError, ValueError) as exc:
        log.error("%s", exc)
        return 1

    try:
        crawler.run(progress=args.progress)
    except KeyboardInterrupt:
        log.warning("Interrupted by user.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
