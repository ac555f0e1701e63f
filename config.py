"""Configuration derived from profile.json. Module-level constants refreshed by reload()."""

import os

from user_profile import get_profile

_dir = os.path.dirname(__file__)


def _resolve(path: str) -> str:
    """Relative paths in the profile are relative to the project directory."""
    return path if os.path.isabs(path) else os.path.join(_dir, path)


def _load():
    """Load all config values from the current profile."""
    global CATALOG_PATH, FRIENDS_PATH, STORE_PATH, REPORTS_DIR
    global FEEDS, FRIEND_MATCH_THRESHOLD, INTEREST_TAG_OVERRIDES

    _p = get_profile()
    CATALOG_PATH = _resolve(_p.get("catalog_path", "data/opportunities.json"))
    FRIENDS_PATH = _resolve(_p.get("friends_path", "data/friends.json"))
    STORE_PATH = _resolve(_p.get("store_path", "data/nextstep.db"))
    REPORTS_DIR = _resolve(_p.get("reports_dir", "reports"))
    FEEDS = _p.get("feeds", [])
    FRIEND_MATCH_THRESHOLD = _p.get("friend_match_threshold", 85)
    INTEREST_TAG_OVERRIDES = _p.get("interest_tags", {})


USER_AGENT = "NextStep/1.0"
REQUEST_TIMEOUT = 30

# Initial load
_load()


def reload():
    """Re-read profile.json and refresh all module-level constants."""
    _load()
