"""
Command-line interface for the BGG client package.

This module provides CLI commands for:
- Hot list, search and game detail lookups
- User collections, plays and profiles
- Game comments
"""

from .main import main

__all__ = [
    "main",
]
