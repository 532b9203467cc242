"""
High-level, read-only client for the BoardGameGeek XML API 2.

Every public ``load_*``/``search`` operation returns a neutral value (an empty
list, None, or a blank User) when anything in the fetch/parse/map pipeline
fails. Use ``BGGClient.outcome`` to run an operation and find out whether it
failed.
"""

import logging
import xml.etree.ElementTree as ET
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Optional, Sequence

from ..config import BASE_URL, COLLECTION_WORKERS, COMMENTS_PAGE_SIZE, GAME_CACHE_DURATION
from ..error_handling import DocumentParseError, handle_errors, safe_execute
from ..models import (
    ClientResult,
    CollectionItem,
    Comment,
    GameDetails,
    HotGame,
    PlayItem,
    SearchResult,
    User,
)
from .cache import DetailCache, game_cache
from .mappers import (
    first_thing_item,
    map_collection,
    map_comments,
    map_game_details,
    map_hot_games,
    map_plays,
    map_search_results,
    map_user,
)
from .transport import HttpTransport, build_url, fetch_document

logger = logging.getLogger(__name__)


def gather(*calls: Callable[[], Sequence[Any]], max_workers: Optional[int] = None) -> List[Any]:
    """
    Run independent fetches concurrently and concatenate their results.

    All calls finish before anything is combined. Results keep the order of
    ``calls`` no matter which call completes first.

    Args:
        *calls: Zero-argument callables each returning a sequence
        max_workers: Thread pool size (defaults to one thread per call)

    Returns:
        Concatenated results
    """
    if not calls:
        return []

    with ThreadPoolExecutor(max_workers=max_workers or len(calls)) as executor:
        futures = [executor.submit(call) for call in calls]
        results = [future.result() for future in futures]

    combined = []
    for result in results:
        combined.extend(result)
    return combined


def paginate(fetch_page: Callable[[int], Sequence[Any]], total: int,
             page_size: int = COMMENTS_PAGE_SIZE) -> List[Any]:
    """
    Fetch pages 1, 2, ... in order until ``total`` items are covered.

    Args:
        fetch_page: Returns the items of one page, given its 1-based number
        total: Number of items the server reports
        page_size: Items per page

    Returns:
        Items from all fetched pages, in page order
    """
    items = []
    page = 1
    while (page - 1) * page_size < total:
        items.extend(fetch_page(page))
        page += 1
    return items


class BGGClient:
    """
    Client facade over the BGG XML API 2.
    """

    # Operation name -> method that raises instead of degrading
    _RAW_OPERATIONS = {
        "collection": "_fetch_collection",
        "hotness": "_fetch_hotness",
        "plays": "_fetch_last_plays",
        "game": "_fetch_game",
        "search": "_fetch_search",
        "user": "_fetch_user_details",
        "comments": "_fetch_all_comments",
    }

    def __init__(self, transport: Optional[Any] = None, cache: Optional[DetailCache] = None,
                 base_url: str = BASE_URL, game_cache_duration: float = GAME_CACHE_DURATION):
        """
        Initialize the client.

        Args:
            transport: Object with ``fetch(url) -> bytes``; defaults to HttpTransport
            cache: Game detail cache; defaults to the process-wide cache
            base_url: API root
            game_cache_duration: Seconds a fetched game stays cached
        """
        self.transport = transport if transport is not None else HttpTransport()
        self.cache = cache if cache is not None else game_cache
        self.base_url = base_url
        self.game_cache_duration = game_cache_duration

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            safe_execute(close, error_msg="Error closing transport")

    def _get(self, operation: str, **params: Any) -> ET.Element:
        url = build_url(operation, base_url=self.base_url, **params)
        return fetch_document(self.transport, url)

    # Collection

    def _fetch_collection_part(self, username: str, expansions: bool) -> List[CollectionItem]:
        if expansions:
            root = self._get("collection", username=username, stats=True, subtype="boardgameexpansion")
        else:
            root = self._get("collection", username=username, stats=True, excludesubtype="boardgameexpansion")
        return map_collection(root, expansions)

    @handle_errors(default_factory=list)
    def _load_collection_part(self, username: str, expansions: bool) -> List[CollectionItem]:
        return self._fetch_collection_part(username, expansions)

    def _fetch_collection(self, username: str) -> List[CollectionItem]:
        return gather(
            lambda: self._fetch_collection_part(username, False),
            lambda: self._fetch_collection_part(username, True),
            max_workers=COLLECTION_WORKERS,
        )

    @handle_errors(default_factory=list)
    def load_collection(self, username: str) -> List[CollectionItem]:
        """
        Load a user's collection: base games followed by expansions.

        The two halves are requested concurrently. If one half fails, the
        other half is still returned.
        """
        items = gather(
            lambda: self._load_collection_part(username, False),
            lambda: self._load_collection_part(username, True),
            max_workers=COLLECTION_WORKERS,
        )
        logger.info(f"Loaded {len(items)} collection items for {username}")
        return items

    # Hotness

    def _fetch_hotness(self) -> List[HotGame]:
        return map_hot_games(self._get("hot", type="boardgame"))

    @handle_errors(default_factory=list)
    def load_hotness(self) -> List[HotGame]:
        return self._fetch_hotness()

    # Plays

    def _fetch_last_plays(self, username: str) -> List[PlayItem]:
        root = self._get("plays", username=username, subtype="boardgame", excludesubtype="videogame")
        return map_plays(root)

    @handle_errors(default_factory=list)
    def load_last_plays(self, username: str) -> List[PlayItem]:
        return self._fetch_last_plays(username)

    # Game details

    def _fetch_game(self, game_id: int, use_cache: bool = True) -> Optional[GameDetails]:
        if use_cache:
            cached = self.cache.get(game_id)
            if cached is not None:
                logger.debug(f"Game {game_id} served from cache")
                return cached

        details = map_game_details(self._get("thing", id=game_id, stats=True))
        if details is not None:
            self.cache.put(details.game_id, details, self.game_cache_duration)
        return details

    @handle_errors(default_return=None)
    def load_game(self, game_id: int, use_cache: bool = True) -> Optional[GameDetails]:
        """
        Load details for one game.

        Args:
            game_id: BGG thing id
            use_cache: Return a fresh cached copy when one exists. A fetched
                result is cached either way.

        Returns:
            GameDetails, or None if the game could not be loaded
        """
        return self._fetch_game(game_id, use_cache)

    # Search

    def _fetch_search(self, query: str) -> List[SearchResult]:
        return map_search_results(self._get("search", query=query, type="boardgame"))

    @handle_errors(default_factory=list)
    def search(self, query: str) -> List[SearchResult]:
        return self._fetch_search(query)

    # Users

    def _fetch_user_details(self, username: str) -> Optional[User]:
        return map_user(self._get("user", name=username), username)

    @handle_errors(default_factory=User)
    def load_user_details(self, username: str) -> Optional[User]:
        """Returns a blank User on failure, None if the response holds no user."""
        return self._fetch_user_details(username)

    # Comments

    def _fetch_comment_page(self, game_id: int, page: int) -> List[Comment]:
        root = self._get("thing", id=game_id, stats=True, comments=True, page=page)
        item = first_thing_item(root)
        if item is None:
            raise DocumentParseError(f"No item in comments page {page} for game {game_id}")
        return map_comments(item.find("comments"))

    def _fetch_all_comments(self, game_id: int, total_comments: int) -> List[Comment]:
        comments = paginate(lambda page: self._fetch_comment_page(game_id, page), total_comments)
        logger.info(f"Loaded {len(comments)} comments for game {game_id}")
        return comments

    @handle_errors(default_factory=list)
    def load_all_comments(self, game_id: int, total_comments: int) -> List[Comment]:
        return self._fetch_all_comments(game_id, total_comments)

    # Distinguishable results

    def outcome(self, operation: str, *args: Any, **kwargs: Any) -> ClientResult:
        """
        Run an operation without the silent fallback.

        Args:
            operation: One of collection, hotness, plays, game, search, user, comments
            *args, **kwargs: Arguments of the matching ``load_*``/``search`` method

        Returns:
            ClientResult with success False and the error message on failure
        """
        if operation not in self._RAW_OPERATIONS:
            raise ValueError(f"Unknown operation: {operation}")

        method = getattr(self, self._RAW_OPERATIONS[operation])
        try:
            value = method(*args, **kwargs)
        except Exception as e:
            logger.error(f"Error in {operation}: {e}")
            return ClientResult(operation=operation, success=False, error_message=str(e))
        return ClientResult(operation=operation, success=True, value=value)
