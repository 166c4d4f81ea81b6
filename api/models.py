"""
Data models for the Zoro scraping API layer.

All models use dataclasses for lightweight internal usage and easy
serialisation to dicts / JSON (for the FastAPI REST layer).
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import List, Optional


# ---------------------------------------------------------------------------
# Search page
# ---------------------------------------------------------------------------

@dataclass
class SearchResultItem:
    """One result card from the search page, reduced to its site identifier."""
    id: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class SearchResponse:
    """All result identifiers of a search page, in document order."""
    results: List[SearchResultItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'SearchResponse':
        """Rebuild a response from the dict produced by :meth:`to_dict`."""
        return cls(results=[SearchResultItem(id=item['id']) for item in data.get('results', [])])

    def get_ids(self) -> List[str]:
        """Return the bare identifiers."""
        return [item.id for item in self.results]


# ---------------------------------------------------------------------------
# Detail page
# ---------------------------------------------------------------------------

@dataclass
class AnimeDetail:
    """Name, synopsis and poster of a single title's detail page.

    All three fields are required; the detail parser never builds a
    partially filled instance.
    """
    name: str
    synopsis: str
    poster_image: str

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Error body
# ---------------------------------------------------------------------------

@dataclass
class ErrorResponse:
    """Structured error body returned by the REST layer.

    Attributes:
        error: Short machine-readable error kind
               (e.g. ``"upstream_timeout"``).
        detail: Human-readable description.
        upstream_status: HTTP status returned by the scraped site, when the
                         failure was a non-2xx upstream response.
    """
    error: str
    detail: str = ''
    upstream_status: Optional[int] = None

    def to_dict(self) -> dict:
        return asdict(self)
