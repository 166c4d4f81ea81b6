#!/usr/bin/env python3
"""
One-off Zoro lookups from the command line.

Usage:
    python3 scripts/zoro_lookup.py search "Jujutsu Kaisen"
    python3 scripts/zoro_lookup.py info jujutsu-kaisen-tv-534

Prints the JSON the API would return.

Exit codes:
    0: Scrape succeeded
    1: Scrape failed (network, upstream status or markup change)
"""

import os
import sys
import json
import argparse

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from api.exceptions import ScraperError
from api.service import ZoroScraper
from utils.logging_config import setup_logging, get_logger
from utils.request_handler import create_request_handler_from_config
from utils.settings import load_settings

logger = get_logger(__name__)


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Look up titles on zoro.to')
    parser.add_argument('--log-level', default=None,
                        help='Log level (default: from settings)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    search_parser = subparsers.add_parser('search', help='Search titles by keyword')
    search_parser.add_argument('name', help='Title keyword')

    info_parser = subparsers.add_parser('info', help='Show one title')
    info_parser.add_argument('anime_id', help='Site identifier, e.g. jujutsu-kaisen-tv-534')

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_arguments(argv)
    settings = load_settings()
    setup_logging(log_level=args.log_level or settings.log_level)

    handler = create_request_handler_from_config(
        base_url=settings.zoro_base_url,
        timeout=settings.request_timeout,
    )
    scraper = ZoroScraper(handler)

    try:
        if args.command == 'search':
            result = scraper.search(args.name)
        else:
            result = scraper.get_anime(args.anime_id)
    except ScraperError as e:
        logger.error(f"Lookup failed: {e}")
        return 1

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
