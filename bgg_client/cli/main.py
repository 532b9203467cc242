"""
Main CLI entry point for the BGG client package.
"""

import argparse
import logging
from typing import List, Optional

from ..logging_config import setup_logging
from ..models import GameDetails
from ..xmlapi import BGGClient

logger = logging.getLogger(__name__)


def _banner(title: str) -> None:
    print("\n" + "="*60)
    print(title)
    print("="*60)


def _print_game(details: GameDetails) -> None:
    rank = details.rank if details.rank != -1 else "not ranked"
    print(f"{details.name} ({details.year_published}) | ID: {details.game_id} | Rank: {rank}")
    print(f"Rating: {details.average_rating:.2f}  |  BGG rating: {details.bgg_rating:.2f}")
    print(f"Players: {details.min_players}-{details.max_players}  |  Playing time: {details.playing_time} min")
    if details.designers:
        print(f"Designers: {', '.join(details.designers)}")
    if details.mechanics:
        print(f"Mechanics: {', '.join(details.mechanics)}")
    if details.expands:
        print(f"Expands: {', '.join(link.name for link in details.expands)}")
    if details.expansions:
        print(f"Expansions: {len(details.expansions)}")
    for poll in details.player_poll_results:
        players = f"{poll.num_players}+" if poll.num_players_is_and_higher else str(poll.num_players)
        print(f"  └─ {players} players: best {poll.best} | recommended {poll.recommended} "
              f"| not recommended {poll.not_recommended}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Read data from the BoardGameGeek XML API")
    parser.add_argument("--log-file", type=str, default=None, help="Log file name or absolute path")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("hot", help="Show the hot board games list")

    collection = commands.add_parser("collection", help="Show a user's collection")
    collection.add_argument("username")

    plays = commands.add_parser("plays", help="Show a user's recent plays")
    plays.add_argument("username")

    game = commands.add_parser("game", help="Show details for a game")
    game.add_argument("game_id", type=int)
    game.add_argument("--no-cache", action="store_true", help="Always fetch fresh details")

    search = commands.add_parser("search", help="Search board games by name")
    search.add_argument("query")

    user = commands.add_parser("user", help="Show a user's profile")
    user.add_argument("username")

    comments = commands.add_parser("comments", help="Show all comments for a game")
    comments.add_argument("game_id", type=int)
    comments.add_argument("--total", type=int, required=True, help="Total number of comments to page through")

    return parser


def run(args: argparse.Namespace, client: BGGClient) -> int:
    """Execute one parsed command and print its results."""
    if args.command == "hot":
        _banner("HOT BOARD GAMES")
        for game in client.load_hotness():
            print(f"#{game.rank}: {game.name} ({game.year_published}) | ID: {game.game_id}")

    elif args.command == "collection":
        items = client.load_collection(args.username)
        _banner(f"COLLECTION OF {args.username.upper()}")
        for item in items:
            kind = "expansion" if item.is_expansion else "base game"
            owned = "owned" if item.owned else "not owned"
            print(f"{item.name} | ID: {item.game_id} | {kind} | {owned} | plays: {item.num_plays}")
        print(f"\nTotal items: {len(items)}")

    elif args.command == "plays":
        _banner(f"RECENT PLAYS OF {args.username.upper()}")
        for play in client.load_last_plays(args.username):
            print(f"{play.play_date.isoformat()} | {play.name} x{play.num_plays}")

    elif args.command == "game":
        details = client.load_game(args.game_id, use_cache=not args.no_cache)
        _banner("GAME DETAILS")
        if details is None:
            print(f"Could not load game {args.game_id}")
            return 1
        _print_game(details)

    elif args.command == "search":
        _banner(f"SEARCH: {args.query}")
        for result in client.search(args.query):
            print(f"{result.name} | ID: {result.game_id}")

    elif args.command == "user":
        user = client.load_user_details(args.username)
        _banner("USER")
        if user is None or not user.username:
            print(f"Could not load user {args.username}")
            return 1
        print(f"{user.username} | avatar: {user.avatar or 'none'}")

    elif args.command == "comments":
        comments = client.load_all_comments(args.game_id, args.total)
        _banner(f"COMMENTS FOR GAME {args.game_id}")
        for comment in comments:
            print(f"{comment.username} ({comment.rating:g}): {comment.text}")
        print(f"\nTotal comments: {len(comments)}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        with BGGClient() as client:
            return run(args, client)
    except KeyboardInterrupt:
        print("\nProcess interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Unexpected error in main: {e}")
        raise


if __name__ == "__main__":
    raise SystemExit(main())
