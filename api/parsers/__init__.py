"""
Zoro HTML parsers – public API.

Usage::

    from api.parsers import parse_search_page, parse_detail_page
"""

from api.parsers.search_parser import parse_search_page
from api.parsers.detail_parser import parse_detail_page

__all__ = [
    'parse_search_page',
    'parse_detail_page',
]
