"""
Configuration settings for the BGG XML API client.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent  # Go up one level to workspace root
# Logs directory for per-run logs
LOGS_DIR = PROJECT_ROOT / "bgg_client_cache" / "logs"

# BoardGameGeek XML API 2 endpoint
BASE_URL = os.environ.get("BGG_BASE_URL", "https://boardgamegeek.com/xmlapi2").rstrip("/")

# HTTP settings
REQUEST_TIMEOUT = float(os.environ.get("BGG_REQUEST_TIMEOUT", "30"))  # seconds
USER_AGENT = os.environ.get("BGG_USER_AGENT", "bgg-client/0.1 (+https://boardgamegeek.com/xmlapi2)")

# Game detail cache lifetime
GAME_CACHE_DURATION = int(os.environ.get("BGG_GAME_CACHE_SECONDS", "43200"))  # 12 hours

# Comments are served 100 per page by the thing endpoint
COMMENTS_PAGE_SIZE = 100

# Collection is fetched as two sub-requests (base games, expansions)
COLLECTION_WORKERS = 2

# Rank entry id for the overall "boardgame" leaderboard
OVERALL_RANK_ID = "1"

# boardgamecategory link id for "Expansion for Base-game"
EXPANSION_CATEGORY_ID = "1042"

# Link type discriminators on thing items
LINK_DESIGNER = "boardgamedesigner"
LINK_ARTIST = "boardgameartist"
LINK_PUBLISHER = "boardgamepublisher"
LINK_MECHANIC = "boardgamemechanic"
LINK_CATEGORY = "boardgamecategory"
LINK_EXPANSION = "boardgameexpansion"

# Player count poll name on thing items
PLAYER_POLL_NAME = "suggested_numplayers"
