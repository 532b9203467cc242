"""
Shared data models for the BGG client package.

Records are built fresh from each parsed response. Numeric fields that the
upstream document did not supply hold -1, text fields hold "".
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class BoardGameLink:
    """A reference to another game (used for expansion relationships)."""
    game_id: int
    name: str


@dataclass(frozen=True)
class PlayerPollResult:
    """Votes for one bucket of the suggested player count poll."""
    num_players: int = 0
    num_players_is_and_higher: bool = False
    best: int = 0
    recommended: int = 0
    not_recommended: int = 0


@dataclass(frozen=True)
class CollectionItem:
    """One entry of a user's collection."""
    game_id: int = -1
    name: str = ""
    owned: bool = False
    want: bool = False
    wishlist: bool = False
    for_trade: bool = False
    pre_ordered: bool = False
    previously_owned: bool = False
    want_to_buy: bool = False
    want_to_play: bool = False
    min_players: int = -1
    max_players: int = -1
    playing_time: int = -1
    num_plays: int = -1
    rating: float = -1.0
    average_rating: float = -1.0
    rank: int = -1
    is_expansion: bool = False
    user_comment: str = ""
    image: str = ""
    thumbnail: str = ""
    year_published: int = -1


@dataclass(frozen=True)
class HotGame:
    rank: int
    game_id: int
    name: str
    year_published: int
    thumbnail: str


@dataclass(frozen=True)
class PlayItem:
    game_id: int
    name: str
    num_plays: int
    play_date: date


@dataclass(frozen=True)
class GameDetails:
    """Full description of a single game from the thing endpoint."""
    game_id: int
    name: str
    year_published: int
    average_rating: float
    bgg_rating: float
    min_players: int
    max_players: int
    playing_time: int
    description: str = ""
    image: str = ""
    thumbnail: str = ""
    designers: Tuple[str, ...] = ()
    artists: Tuple[str, ...] = ()
    publishers: Tuple[str, ...] = ()
    mechanics: Tuple[str, ...] = ()
    rank: int = -1
    is_expansion: bool = False
    # Either non-empty or None, never empty
    expands: Optional[Tuple[BoardGameLink, ...]] = None
    expansions: Optional[Tuple[BoardGameLink, ...]] = None
    player_poll_results: Tuple[PlayerPollResult, ...] = ()


@dataclass(frozen=True)
class SearchResult:
    game_id: int
    name: str


@dataclass(frozen=True)
class User:
    username: str = ""
    avatar: str = ""


@dataclass(frozen=True)
class Comment:
    username: str
    text: str
    rating: float = 0.0


@dataclass
class ClientResult:
    """Result of a client operation that keeps failures distinguishable from empty data."""
    operation: str
    success: bool
    value: Any = None
    error_message: Optional[str] = None
