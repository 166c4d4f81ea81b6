"""
Search-page parser.

Extracts the identifier of every result card on a search page.  Cards are
returned in document order without any filtering or de-duplication.
"""

from __future__ import annotations

import logging

from api.models import SearchResponse, SearchResultItem
from api.parsers.common import (
    parse_document,
    parse_fragment,
    inner_html,
    attr_or_raise,
    normalize_anime_id,
)

logger = logging.getLogger(__name__)

# Wrapper holding the film list
LIST_SELECTOR = 'div.film_list-wrap'

# Title link of a card, relative to the re-parsed list fragment
ITEM_LINK_SELECTOR = 'div.flw-item > div:nth-child(2) > h3:nth-child(1) > a:nth-child(1)'


def parse_search_page(html_content: str) -> SearchResponse:
    """Parse a search-results page and return all result identifiers.

    Each list container is re-parsed as a standalone fragment before the
    card selector runs; the positional parts of the selector apply to the
    children of each ``div.flw-item`` found in that fragment.

    A page without a list, or a list without cards, yields an empty
    result.

    Raises:
        ExtractionError: a card link has no ``href``.
    """
    soup = parse_document(html_content)
    result = SearchResponse()

    containers = soup.select(LIST_SELECTOR)
    if not containers:
        logger.debug('No %s container found on search page', LIST_SELECTOR)

    for container in containers:
        fragment = parse_fragment(inner_html(container))
        for a in fragment.select(ITEM_LINK_SELECTOR):
            href = attr_or_raise(a, 'href', ITEM_LINK_SELECTOR)
            result.results.append(SearchResultItem(id=normalize_anime_id(href)))

    logger.debug(
        'Parsed search page: containers=%d, results=%d',
        len(containers),
        len(result.results),
    )

    return result
