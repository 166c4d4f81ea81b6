"""
Exception hierarchy for fetching and parsing Zoro pages.

Every failure of a scrape is raised as a ``ScraperError`` subclass and
handled once, at the REST boundary (see ``api.server``).
"""

from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    """Base class for all scrape failures."""


class FetchError(ScraperError):
    """The upstream site could not be reached (DNS, connect, invalid URL …)."""

    def __init__(self, url: str, message: str = ''):
        self.url = url
        super().__init__(message or f'Failed to fetch {url}')


class FetchTimeoutError(FetchError):
    """The upstream request did not complete within the configured timeout."""

    def __init__(self, url: str, timeout: Optional[float] = None):
        self.timeout = timeout
        message = f'Timed out fetching {url}'
        if timeout is not None:
            message += f' after {timeout}s'
        super().__init__(url, message)


class UpstreamStatusError(ScraperError):
    """The upstream site answered with a non-2xx status code."""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f'Upstream returned HTTP {status_code} for {url}')


class ExtractionError(ScraperError):
    """An expected element or attribute is missing from the page markup."""

    def __init__(self, selector: str, attribute: Optional[str] = None):
        self.selector = selector
        self.attribute = attribute
        if attribute:
            message = f'Element {selector!r} has no {attribute!r} attribute'
        else:
            message = f'No element matches selector {selector!r}'
        super().__init__(message)
