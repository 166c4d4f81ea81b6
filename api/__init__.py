"""
Zoro Scraper – API Layer.

This package provides structured parsing of zoro.to HTML pages and a thin
FastAPI REST interface re-serving the results as JSON.

Quick start (Python)::

    from api.parsers import parse_search_page, parse_detail_page
    from api.models import SearchResponse, AnimeDetail

Quick start (REST)::

    uvicorn api.server:app --reload
"""

from api.models import (
    SearchResultItem,
    SearchResponse,
    AnimeDetail,
    ErrorResponse,
)
from api.exceptions import (
    ScraperError,
    FetchError,
    FetchTimeoutError,
    UpstreamStatusError,
    ExtractionError,
)
from api.parsers import (
    parse_search_page,
    parse_detail_page,
)

__all__ = [
    # Models
    'SearchResultItem',
    'SearchResponse',
    'AnimeDetail',
    'ErrorResponse',
    # Errors
    'ScraperError',
    'FetchError',
    'FetchTimeoutError',
    'UpstreamStatusError',
    'ExtractionError',
    # Parsers
    'parse_search_page',
    'parse_detail_page',
]
