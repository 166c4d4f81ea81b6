"""
Scrape operations: fetch a Zoro page and run the matching parser.
"""

from __future__ import annotations

import logging

from api.exceptions import UpstreamStatusError
from api.models import AnimeDetail, SearchResponse
from api.parsers import parse_detail_page, parse_search_page
from utils.request_handler import FetchResult, RequestHandler

logger = logging.getLogger(__name__)


class ZoroScraper:
    """Composes the request handler with the search and detail parsers."""

    def __init__(self, handler: RequestHandler):
        self.handler = handler

    def _fetch_ok(self, url: str) -> FetchResult:
        result = self.handler.fetch(url)
        if not result.ok:
            raise UpstreamStatusError(result.status_code, url)
        return result

    def search(self, name: str) -> SearchResponse:
        """Search the site for *name* and return the result identifiers.

        Raises:
            FetchError: transport failure or timeout.
            UpstreamStatusError: the search page answered non-2xx.
            ExtractionError: a result card is malformed.
        """
        result = self._fetch_ok(self.handler.build_search_url(name))
        response = parse_search_page(result.text)
        logger.info('Search %r: %d results', name, len(response.results))
        return response

    def get_anime(self, anime_id: str) -> AnimeDetail:
        """Fetch the detail page of *anime_id*.

        Raises:
            FetchError: transport failure or timeout.
            UpstreamStatusError: the detail page answered non-2xx.
            ExtractionError: name, synopsis or poster is missing.
        """
        result = self._fetch_ok(self.handler.build_detail_url(anime_id))
        detail = parse_detail_page(result.text)
        logger.info('Detail %s: %s', anime_id, detail.name)
        return detail
