"""
Shared parsing utilities used by both search and detail parsers.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from bs4.element import Tag
from bs4.formatter import HTMLFormatter

from api.exceptions import ExtractionError

logger = logging.getLogger(__name__)

HTML_PARSER = 'html.parser'

# Suffix appended by the site to every search-result link
SEARCH_REF_SUFFIX = '?ref=search'


def _escape_text(value: str) -> str:
    return (
        value.replace('&', '&amp;')
        .replace('<', '&lt;')
        .replace('>', '&gt;')
        .replace('\xa0', '&nbsp;')
    )


# Void elements as `<br>` and non-breaking spaces as `&nbsp;`; other
# non-ASCII characters are written as-is.
INNER_HTML_FORMATTER = HTMLFormatter(
    entity_substitution=_escape_text,
    void_element_close_prefix=None,
)


# ---------------------------------------------------------------------------
# Document / fragment parsing
# ---------------------------------------------------------------------------

def parse_document(html_content: str) -> BeautifulSoup:
    """Parse a complete HTML page."""
    return BeautifulSoup(html_content, HTML_PARSER)


def parse_fragment(markup: str) -> BeautifulSoup:
    """Parse a snippet of markup as its own mini-document.

    Selectors run against the result are evaluated relative to the
    fragment root, not to the page the snippet was cut from.
    """
    return BeautifulSoup(markup, HTML_PARSER)


def inner_html(tag: Tag) -> str:
    """Return the markup between *tag*'s opening and closing tags."""
    return tag.decode_contents(formatter=INNER_HTML_FORMATTER)


# ---------------------------------------------------------------------------
# Strict selection helpers
# ---------------------------------------------------------------------------

def select_one_or_raise(soup, selector: str) -> Tag:
    """Return the first element matching *selector*.

    Raises:
        ExtractionError: nothing matches.
    """
    element = soup.select_one(selector)
    if element is None:
        logger.debug('Selector matched nothing: %s', selector)
        raise ExtractionError(selector)
    return element


def attr_or_raise(tag: Tag, attribute: str, selector: str) -> str:
    """Return *attribute* of *tag* verbatim.

    *selector* is only used to describe the element in the error.

    Raises:
        ExtractionError: the attribute is absent.
    """
    value = tag.get(attribute)
    if value is None:
        logger.debug('Attribute %s missing on %s', attribute, selector)
        raise ExtractionError(selector, attribute)
    return value


# ---------------------------------------------------------------------------
# Identifier normalisation
# ---------------------------------------------------------------------------

def normalize_anime_id(href: str) -> str:
    """Turn a result link into the site identifier.

    ``/jujutsu-kaisen-tv-534?ref=search`` → ``jujutsu-kaisen-tv-534``

    The ``?ref=search`` suffix is dropped and *every* ``/`` is removed,
    not only the leading one.
    """
    return href.replace(SEARCH_REF_SUFFIX, '').replace('/', '')
