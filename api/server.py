"""
Thin FastAPI REST layer wrapping the Zoro scraper.

Run with::

    uvicorn api.server:app --reload --port 8000

or ``python3 scripts/serve.py``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Callable

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from api.exceptions import (
    ExtractionError,
    FetchError,
    FetchTimeoutError,
    ScraperError,
    UpstreamStatusError,
)
from api.models import ErrorResponse
from api.service import ZoroScraper
from utils.request_handler import create_request_handler_from_config
from utils.settings import Settings, load_settings

logger = logging.getLogger(__name__)

INFO_TEXT = 'This is definitely a string with important info'
LEGACY_FALLBACK_BODY = 'Something went wrong!'

app = FastAPI(
    title='Zoro Scraper API',
    version='0.1.0',
    description='Scrapes zoro.to search and detail pages and serves them as JSON.',
)


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def get_scraper(settings: Settings = Depends(get_settings)) -> ZoroScraper:
    """A fresh scraper per request; nothing is shared between requests."""
    handler = create_request_handler_from_config(
        base_url=settings.zoro_base_url,
        timeout=settings.request_timeout,
    )
    return ZoroScraper(handler)


def _run_scrape(operation: Callable[[], object], settings: Settings):
    """Run *operation* and serialise its result.

    In legacy mode a non-2xx upstream answer becomes HTTP 200 with the
    literal fallback body; every other error goes to the exception
    handlers below.
    """
    try:
        return operation().to_dict()
    except UpstreamStatusError as exc:
        if not settings.legacy_fallback:
            raise
        logger.warning('Legacy fallback for %s (HTTP %d)', exc.url, exc.status_code)
        return Response(content=LEGACY_FALLBACK_BODY, media_type='application/json')


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------

def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.to_dict())


@app.exception_handler(FetchTimeoutError)
async def fetch_timeout_handler(request: Request, exc: FetchTimeoutError):
    logger.error('Upstream timeout on %s: %s', request.url.path, exc)
    return _error_response(504, ErrorResponse(error='upstream_timeout', detail=str(exc)))


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError):
    logger.error('Upstream unreachable on %s: %s', request.url.path, exc)
    return _error_response(502, ErrorResponse(error='upstream_unreachable', detail=str(exc)))


@app.exception_handler(UpstreamStatusError)
async def upstream_status_handler(request: Request, exc: UpstreamStatusError):
    logger.warning('Upstream status on %s: %s', request.url.path, exc)
    status_code = 404 if exc.status_code == 404 else 502
    return _error_response(status_code, ErrorResponse(
        error='upstream_status',
        detail=str(exc),
        upstream_status=exc.status_code,
    ))


@app.exception_handler(ExtractionError)
async def extraction_error_handler(request: Request, exc: ExtractionError):
    logger.error('Upstream markup changed on %s: %s', request.url.path, exc)
    return _error_response(502, ErrorResponse(error='upstream_format_changed', detail=str(exc)))


@app.exception_handler(ScraperError)
async def scraper_error_handler(request: Request, exc: ScraperError):
    logger.error('Scrape failed on %s: %s', request.url.path, exc, exc_info=exc)
    return _error_response(502, ErrorResponse(error='scrape_failed', detail=str(exc)))


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get('/info', response_class=PlainTextResponse)
def info():
    """Fixed informational string."""
    return INFO_TEXT


@app.get('/status')
def get_status():
    """Simple liveness probe."""
    return {'status': 'UP'}


@app.get('/zoro/info/{anime_id}')
def get_anime(
    anime_id: str,
    scraper: ZoroScraper = Depends(get_scraper),
    settings: Settings = Depends(get_settings),
):
    """Name, synopsis and poster image of one title,
    e.g. ``/zoro/info/jujutsu-kaisen-tv-534``."""
    return _run_scrape(lambda: scraper.get_anime(anime_id), settings)


@app.get('/zoro/{name}')
def search_zoro(
    name: str,
    scraper: ZoroScraper = Depends(get_scraper),
    settings: Settings = Depends(get_settings),
):
    """Search for a title, e.g. ``/zoro/Jujutsu-Kaisen``."""
    return _run_scrape(lambda: scraper.search(name), settings)
