#!/usr/bin/env python3
"""
Run the Zoro scraper API with uvicorn.

Usage:
    python3 scripts/serve.py [--host HOST] [--port PORT] [--log-level LEVEL] [--reload]

Defaults come from config.py / environment variables (see config.example.py).
"""

import os
import sys
import argparse

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

import uvicorn

from utils.logging_config import setup_logging, get_logger
from utils.settings import load_settings

logger = get_logger(__name__)


def parse_arguments(argv=None):
    """Parse command line arguments."""
    settings = load_settings()
    parser = argparse.ArgumentParser(description='Run the Zoro scraper API')
    parser.add_argument('--host', default=settings.api_host,
                        help=f'Bind host (default: {settings.api_host})')
    parser.add_argument('--port', type=int, default=settings.api_port,
                        help=f'Bind port (default: {settings.api_port})')
    parser.add_argument('--log-level', default=settings.log_level,
                        help=f'Log level (default: {settings.log_level})')
    parser.add_argument('--log-file', default=settings.api_log_file or None,
                        help='Optional log file path')
    parser.add_argument('--reload', action='store_true',
                        help='Reload on code changes (development only)')
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    # Relative log paths and uvicorn reload resolve against the project root
    os.chdir(project_root)
    args = parse_arguments(argv)
    setup_logging(log_file=args.log_file, log_level=args.log_level)

    logger.info(f"Starting Zoro scraper API on {args.host}:{args.port}")
    uvicorn.run(
        'api.server:app',
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
        log_config=None,
    )
    return 0


if __name__ == '__main__':
    sys.exit(main())
