"""
BoardGameGeek XML API 2 access.

This package handles:
- Defensive reading of optional values from XML responses
- Mapping responses to typed records
- Concurrent and paginated fetching
- Time-expiring caching of game details
"""

from .cache import DetailCache, game_cache
from .client import BGGClient, gather, paginate
from .transport import HttpTransport, build_url, parse_document

__all__ = [
    "BGGClient",
    "DetailCache",
    "HttpTransport",
    "build_url",
    "gather",
    "game_cache",
    "paginate",
    "parse_document",
]
