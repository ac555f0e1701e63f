"""One-time onboarding flag. Storage failures are logged and never surface."""

import logging
import sqlite3

from store import get_item, remove_item, set_item

logger = logging.getLogger(__name__)

ONBOARDING_KEY = "@NextStep:onboarding_complete"


def has_completed_onboarding(db_path: str = "nextstep.db") -> bool:
    """True only if the flag is stored as "true". Read errors count as not completed."""
    try:
        return get_item(ONBOARDING_KEY, db_path) == "true"
    except sqlite3.Error as e:
        logger.error(f"Error checking onboarding status: {e}")
        return False


def mark_onboarding_complete(db_path: str = "nextstep.db") -> None:
    try:
        set_item(ONBOARDING_KEY, "true", db_path)
    except sqlite3.Error as e:
        logger.error(f"Error saving onboarding status: {e}")


def reset_onboarding(db_path: str = "nextstep.db") -> None:
    """Clear the flag so the intro shows again on the next session."""
    try:
        remove_item(ONBOARDING_KEY, db_path)
    except sqlite3.Error as e:
        logger.error(f"Error resetting onboarding status: {e}")
