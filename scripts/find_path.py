#!/usr/bin/env python3
"""
Find a link path between two Wikipedia articles.

Crawls live Wikipedia breadth-first from the start article into a
DirectedGraph, then runs BFS over the crawled graph.

Usage:
    python scripts/find_path.py --start "Cat" --target "Mammal"
    python scripts/find_path.py --start "Potato" --target "Europe" --max-depth 2 --max-pages 300
    python scripts/find_path.py --start "Pizza" --target "Italy" --delay 1.0 -v

Environment (.env is loaded from the project root):
    WIKIPEDIA_REQUEST_DELAY, CRAWL_MAX_DEPTH, CRAWL_MAX_PAGES, LOG_LEVEL
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
load_dotenv(project_root / ".env")

# Config reads the environment at import time, so import after load_dotenv
from linkgraph import config  # noqa: E402
from linkgraph.crawler import LinkCrawler  # noqa: E402
from linkgraph.wikipedia import WikiScraper  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a link path between two Wikipedia articles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("--start", type=str, required=True, help="Starting article title")
    parser.add_argument("--target", type=str, required=True, help="Target article title")
    parser.add_argument(
        "--max-depth",
        type=int,
        default=config.CRAWL_MAX_DEPTH,
        help=f"Maximum link depth to crawl (default: {config.CRAWL_MAX_DEPTH})",
    )
    parser.add_argument(
        "--max-pages",
        type=int,
        default=config.CRAWL_MAX_PAGES,
        help=f"Maximum pages to fetch (default: {config.CRAWL_MAX_PAGES})",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=config.WIKIPEDIA_REQUEST_DELAY,
        help=f"Seconds between requests (default: {config.WIKIPEDIA_REQUEST_DELAY})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    log_level = logging.DEBUG if args.verbose else getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        crawler = LinkCrawler(
            WikiScraper(rate_limit=args.delay),
            max_depth=args.max_depth,
            max_pages=args.max_pages,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Crawling from '{args.start}' towards '{args.target}'...")
    try:
        result = crawler.crawl(args.start, target=args.target)
    except KeyboardInterrupt:
        print("\n\nCrawl interrupted by user")
        return 130

    print(f"  Pages fetched: {result.pages_fetched}")
    print(f"  Graph: {len(result.graph)} nodes, {result.graph.edge_count()} edges")
    if result.failed:
        print(f"  Failed pages: {len(result.failed)}")

    path = result.path(args.start, args.target)
    if not path:
        print(f"\nNo path found from '{args.start}' to '{args.target}'")
        return 1

    print(f"\nPath ({len(path) - 1} clicks):")
    for i, title in enumerate(path):
        print(f"  {i}. {title}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
