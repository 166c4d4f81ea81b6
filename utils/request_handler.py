"""
Request Handler for the Zoro scraper

This module provides the single outbound HTTP call the API makes:
- One GET per call, fresh session, no custom headers, no retries
- One total deadline covering connect, headers and body
- Transport failures raised as typed ``FetchError``s
- Non-2xx responses handed back to the caller, not raised

Usage:
    from utils.request_handler import RequestHandler

    handler = RequestHandler()
    result = handler.fetch(handler.build_search_url('jujutsu kaisen'))
    if result.ok:
        html = result.text
"""

import requests
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Optional, Tuple
from urllib.parse import quote, quote_plus
from dataclasses import dataclass

from requests.compat import chardet

from api.exceptions import FetchError, FetchTimeoutError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


@dataclass
class RequestConfig:
    """Configuration for request handler"""
    base_url: str = 'https://zoro.to'
    timeout: float = 5

    def __post_init__(self):
        self.base_url = self.base_url.rstrip('/')


@dataclass
class FetchResult:
    """Status and body of one upstream response."""
    url: str
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        """True for any 2xx status."""
        return 200 <= self.status_code < 300


class RequestHandler:
    """
    Fetches Zoro pages.

    Holds no state between calls: every ``fetch`` opens and closes its own
    ``requests.Session``.
    """

    def __init__(self, config: Optional[RequestConfig] = None):
        """
        Initialize request handler.

        Args:
            config: RequestConfig instance with configuration settings
        """
        self.config = config or RequestConfig()

    def build_search_url(self, name: str) -> str:
        """
        Build the search page URL for a keyword.

        The keyword is query-encoded, so spaces, ``&`` or ``#`` cannot
        change the shape of the request.
        """
        return f"{self.config.base_url}/search?keyword={quote_plus(name)}"

    def build_detail_url(self, anime_id: str) -> str:
        """Build the detail page URL for a site identifier."""
        return f"{self.config.base_url}/{quote(anime_id, safe='')}?ref=search"

    def fetch(self, url: str) -> FetchResult:
        """
        Issue a single GET request.

        ``config.timeout`` is a total deadline: connect, headers and the
        whole body must arrive within it.  The request runs on a worker
        thread so a server that trickles bytes cannot hold the caller past
        the deadline; once it expires the worker stops reading at the next
        chunk and closes the connection.

        Args:
            url: Absolute URL to request

        Returns:
            FetchResult with the status code and decoded body, whatever the status

        Raises:
            FetchTimeoutError: the response was not complete within ``config.timeout`` seconds
            FetchError: any other transport failure
        """
        timeout = self.config.timeout
        logger.debug(f"[Fetch] Requesting: {url} (timeout={timeout}s)")

        cancelled = threading.Event()
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix='zoro-fetch')
        future = executor.submit(self._do_request, url, cancelled)
        try:
            status_code, content, encoding = future.result(timeout=timeout)
        except FutureTimeoutError as e:
            cancelled.set()
            logger.warning(f"[Fetch] Timeout after {timeout}s: {url}")
            raise FetchTimeoutError(url, timeout) from e
        except requests.Timeout as e:
            logger.warning(f"[Fetch] Timeout after {timeout}s: {url}")
            raise FetchTimeoutError(url, timeout) from e
        except requests.RequestException as e:
            logger.error(f"[Fetch] Error: {e}")
            raise FetchError(url, f"Failed to fetch {url}: {type(e).__name__}") from e
        finally:
            executor.shutdown(wait=False)

        text = _decode_body(content, encoding)
        logger.debug(f"[Fetch] Response: HTTP {status_code}, Content-Length: {len(content)} bytes, Text-Length: {len(text)} chars")
        if not 200 <= status_code < 300:
            logger.warning(f"[Fetch] Non-success status {status_code} for {url}")

        return FetchResult(url=url, status_code=status_code, text=text)

    def _do_request(self, url: str, cancelled: threading.Event) -> Tuple[int, bytes, Optional[str]]:
        """Execute the GET on the worker thread and read the body in chunks."""
        with requests.Session() as session:
            response = session.get(url, timeout=self.config.timeout, stream=True)
            try:
                chunks = []
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if cancelled.is_set():
                        logger.debug(f"[Fetch] Abandoning body of {url} after deadline")
                        break
                    chunks.append(chunk)
                return response.status_code, b''.join(chunks), response.encoding
            finally:
                response.close()


def _decode_body(content: bytes, encoding: Optional[str]) -> str:
    """Decode *content* like ``requests.Response.text``: declared charset
    first, detected charset otherwise, undecodable bytes replaced."""
    if not content:
        return ''
    if encoding is None:
        encoding = chardet.detect(content)['encoding'] or 'utf-8'
    try:
        return str(content, encoding, errors='replace')
    except (LookupError, TypeError):
        return str(content, errors='replace')


def create_request_handler_from_config(**config_kwargs) -> RequestHandler:
    """
    Create a RequestHandler instance from configuration.

    Args:
        **config_kwargs: Configuration parameters for RequestConfig

    Returns:
        Configured RequestHandler instance
    """
    config = RequestConfig(**config_kwargs)
    return RequestHandler(config=config)
