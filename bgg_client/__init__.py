"""
BGG Client Package - read-only access to BoardGameGeek data.

This package provides:
1. Typed records for collections, plays, hot games, game details, users and comments
2. A client for the BoardGameGeek XML API 2 that degrades to empty results on failure
"""

__version__ = "0.1.0"
__author__ = "bgg-client contributors"

# Main package imports for convenience
from .xmlapi import BGGClient, DetailCache
from .models import (
    BoardGameLink,
    ClientResult,
    CollectionItem,
    Comment,
    GameDetails,
    HotGame,
    PlayerPollResult,
    PlayItem,
    SearchResult,
    User,
)
from .logging_config import setup_logging

__all__ = [
    "BGGClient",
    "DetailCache",
    "BoardGameLink",
    "ClientResult",
    "CollectionItem",
    "Comment",
    "GameDetails",
    "HotGame",
    "PlayerPollResult",
    "PlayItem",
    "SearchResult",
    "User",
    "setup_logging",
]
