"""
Detail-page parser.

Extracts the name, synopsis and poster image of a single title.  Unlike a
lenient parser, every field is required: a page missing any one of the
three elements raises instead of returning a partial result.
"""

from __future__ import annotations

import logging

from api.models import AnimeDetail
from api.parsers.common import (
    parse_document,
    inner_html,
    select_one_or_raise,
    attr_or_raise,
)

logger = logging.getLogger(__name__)

SYNOPSIS_SELECTOR = 'div.film-description > div'
NAME_SELECTOR = 'h2.film-name.dynamic-name'
POSTER_SELECTOR = 'img.film-poster-img'


def parse_detail_page(html_content: str) -> AnimeDetail:
    """Parse a title detail page and return an *AnimeDetail*.

    ``name`` and ``synopsis`` are the inner markup of their elements with
    surrounding whitespace trimmed; ``poster_image`` is the ``src``
    attribute exactly as written.

    Raises:
        ExtractionError: one of the three elements, or the poster's
            ``src``, is missing.
    """
    soup = parse_document(html_content)

    # --- Synopsis ---
    synopsis = inner_html(select_one_or_raise(soup, SYNOPSIS_SELECTOR)).strip()

    # --- Name ---
    name = inner_html(select_one_or_raise(soup, NAME_SELECTOR)).strip()

    # --- Poster (no trimming) ---
    poster_img = select_one_or_raise(soup, POSTER_SELECTOR)
    poster_image = attr_or_raise(poster_img, 'src', POSTER_SELECTOR)

    detail = AnimeDetail(name=name, synopsis=synopsis, poster_image=poster_image)

    logger.debug(
        'Parsed detail: name=%s, synopsis=%d chars',
        detail.name[:40],
        len(detail.synopsis),
    )

    return detail
