"""
Mapping of parsed BGG XML documents to typed records.

Each ``map_*`` function takes the root element of one response and returns
the records it describes. Optional values are read through the helpers in
``fields``. A few values on hot list entries and thing items are read
directly; when those are missing the mapper raises and the calling client
operation falls back to its empty result.
"""

import logging
import xml.etree.ElementTree as ET
from typing import List, Optional, Tuple

from ..config import (
    EXPANSION_CATEGORY_ID,
    LINK_ARTIST,
    LINK_CATEGORY,
    LINK_DESIGNER,
    LINK_EXPANSION,
    LINK_MECHANIC,
    LINK_PUBLISHER,
    PLAYER_POLL_NAME,
)
from ..models import (
    BoardGameLink,
    CollectionItem,
    Comment,
    GameDetails,
    HotGame,
    PlayerPollResult,
    PlayItem,
    SearchResult,
    User,
)
from .fields import (
    find,
    get_bool,
    get_decimal,
    get_int,
    get_ranking,
    get_string,
    parse_int,
    parse_play_date,
)

logger = logging.getLogger(__name__)


def map_collection(root: ET.Element, is_expansion: bool) -> List[CollectionItem]:
    """
    Map a collection response.

    Args:
        root: Parsed ``items`` document
        is_expansion: Whether the request asked for the expansion subtype

    Returns:
        List of collection items in document order
    """
    items = []
    for entry in root.iter("item"):
        stats = entry.find("stats")
        rating = find(stats, "rating")
        status = entry.find("status")
        items.append(CollectionItem(
            game_id=get_int(entry, "objectid"),
            name=get_string(entry.find("name")),
            owned=get_bool(status, "own"),
            want=get_bool(status, "want"),
            wishlist=get_bool(status, "wishlist"),
            for_trade=get_bool(status, "fortrade"),
            pre_ordered=get_bool(status, "preordered"),
            previously_owned=get_bool(status, "prevowned"),
            want_to_buy=get_bool(status, "wanttobuy"),
            want_to_play=get_bool(status, "wanttoplay"),
            min_players=get_int(stats, "minplayers"),
            max_players=get_int(stats, "maxplayers"),
            playing_time=get_int(stats, "playingtime"),
            num_plays=get_int(entry.find("numplays")),
            rating=get_decimal(rating, "value", -1.0),
            average_rating=get_decimal(find(rating, "average"), "value", -1.0),
            rank=get_ranking(find(rating, "ranks")),
            is_expansion=is_expansion,
            user_comment=get_string(entry.find("comment")),
            image=get_string(entry.find("image")),
            thumbnail=get_string(entry.find("thumbnail")),
            year_published=get_int(entry.find("yearpublished")),
        ))
    return items


def map_hot_games(root: ET.Element) -> List[HotGame]:
    games = []
    for entry in root.iter("item"):
        year = entry.find("yearpublished")
        games.append(HotGame(
            rank=int(entry.attrib["rank"]),
            game_id=int(entry.attrib["id"]),
            name=entry.find("name").attrib["value"],
            year_published=int(year.attrib["value"]) if year is not None else 0,
            thumbnail=entry.find("thumbnail").attrib["value"],
        ))
    return games


def map_plays(root: ET.Element) -> List[PlayItem]:
    plays = []
    for play in root.iter("play"):
        item = play.find("item")
        plays.append(PlayItem(
            game_id=get_int(item, "objectid"),
            name=get_string(item, "name"),
            num_plays=get_int(play, "quantity"),
            play_date=parse_play_date(get_string(play, "date", None)),
        ))
    return plays


def map_search_results(root: ET.Element) -> List[SearchResult]:
    return [
        SearchResult(game_id=get_int(entry, "id"), name=get_string(entry.find("name"), "value"))
        for entry in root.iter("item")
    ]


def map_user(root: ET.Element, username: str) -> Optional[User]:
    """The username is the one the caller asked for, not the one echoed back."""
    user = next(root.iter("user"), None)
    if user is None:
        return None
    return User(username=username, avatar=get_string(user.find("avatarlink"), "value"))


def map_comments(comments: Optional[ET.Element]) -> List[Comment]:
    if comments is None:
        return []
    return [
        Comment(
            username=get_string(comment, "username"),
            text=get_string(comment, "value"),
            rating=get_decimal(comment, "rating", 0.0),
        )
        for comment in comments.findall("comment")
    ]


def first_thing_item(root: ET.Element) -> Optional[ET.Element]:
    """Return the first ``item`` of a thing response."""
    if root.tag == "items":
        return root.find("item")
    return root.find(".//items/item")


def _links(item: ET.Element, link_type: str) -> List[ET.Element]:
    return [link for link in item.findall("link") if get_string(link, "type") == link_type]


def link_values(item: ET.Element, link_type: str) -> Tuple[str, ...]:
    """Names of all links of the given type, in document order."""
    return tuple(get_string(link, "value") for link in _links(item, link_type))


def _to_board_game_links(links: List[ET.Element]) -> Optional[Tuple[BoardGameLink, ...]]:
    result = tuple(BoardGameLink(game_id=get_int(link, "id"), name=get_string(link, "value")) for link in links)
    return result or None


def expands_links(item: ET.Element) -> Optional[Tuple[BoardGameLink, ...]]:
    """Base games this item expands (expansion links marked inbound)."""
    return _to_board_game_links([
        link for link in _links(item, LINK_EXPANSION) if get_string(link, "inbound") == "true"
    ])


def expansions_links(item: ET.Element) -> Optional[Tuple[BoardGameLink, ...]]:
    """Games that expand this item (expansion links not marked inbound)."""
    return _to_board_game_links([
        link for link in _links(item, LINK_EXPANSION) if get_string(link, "inbound") != "true"
    ])


def has_expansion_category(item: ET.Element) -> bool:
    return any(get_string(link, "id") == EXPANSION_CATEGORY_ID for link in _links(item, LINK_CATEGORY))


def map_player_poll(poll: Optional[ET.Element]) -> Tuple[PlayerPollResult, ...]:
    """
    Map the suggested player count poll.

    Buckets such as ``"4+"`` set ``num_players_is_and_higher``. Missing vote
    options count as zero.
    """
    if poll is None:
        return ()

    results = []
    for bucket in poll.findall("results"):
        votes = {}
        for option in bucket.findall("result"):
            votes.setdefault(get_string(option, "value"), get_int(option, "numvotes", 0))

        num_players = get_string(bucket, "numplayers")
        results.append(PlayerPollResult(
            num_players=parse_int(num_players.replace("+", ""), 0),
            num_players_is_and_higher="+" in num_players,
            best=votes.get("Best", 0),
            recommended=votes.get("Recommended", 0),
            not_recommended=votes.get("Not Recommended", 0),
        ))
    return tuple(results)


def map_game_details(root: ET.Element) -> Optional[GameDetails]:
    """
    Map a thing response (requested with ``stats=1``) to game details.

    Returns:
        GameDetails for the first item, or None if the document has no item
    """
    item = first_thing_item(root)
    if item is None:
        logger.warning("Thing response contained no item")
        return None

    ratings = item.find("statistics/ratings")
    primary = next((n for n in item.findall("name") if get_string(n, "type") == "primary"), None)

    return GameDetails(
        game_id=int(item.attrib["id"]),
        name=get_string(primary, "value"),
        year_published=int(item.find("yearpublished").attrib["value"]),
        average_rating=float(ratings.find("average").attrib["value"]),
        bgg_rating=float(ratings.find("bayesaverage").attrib["value"]),
        min_players=int(item.find("minplayers").attrib["value"]),
        max_players=int(item.find("maxplayers").attrib["value"]),
        playing_time=int(item.find("playingtime").attrib["value"]),
        description=get_string(item.find("description")),
        image=get_string(item.find("image")),
        thumbnail=get_string(item.find("thumbnail")),
        designers=link_values(item, LINK_DESIGNER),
        artists=link_values(item, LINK_ARTIST),
        publishers=link_values(item, LINK_PUBLISHER),
        mechanics=link_values(item, LINK_MECHANIC),
        rank=get_ranking(find(ratings, "ranks")),
        is_expansion=has_expansion_category(item),
        expands=expands_links(item),
        expansions=expansions_links(item),
        player_poll_results=map_player_poll(item.find(f"poll[@name='{PLAYER_POLL_NAME}']")),
    )
