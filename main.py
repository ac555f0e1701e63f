#!/usr/bin/env python3
"""NextStep — rank opportunities against your preferences and swipe through them."""

import logging
import sys

import config as config
from archive import save_saved_report
from catalog import build_sources, collect_catalog
from deck import SwipeDeck
from friends import action_label, friends_interested_in, load_friends, recent_activity
from interests import build_tag_map
from onboarding import has_completed_onboarding, mark_onboarding_complete, reset_onboarding
from models import CATEGORIES, INTERESTS
from preferences import can_continue, preferences_from_profile, toggle, validate_preferences
from ranker import rank_with_scores
from store import init_db
from user_profile import PROFILE_PATH, get_profile, save_profile

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)

ONBOARDING_INTRO = [
    "Welcome to NextStep!",
    "Opportunities are sorted by how well they match your interests.",
    "Swipe right (r) to save, up (u) to mark a top pick, left (l) to pass.",
    "Your saved opportunities are written to a report when you quit (q).",
]


def load_session():
    """Load preferences, the interest table and the catalog from the profile."""
    prefs = preferences_from_profile(get_profile())
    tag_map = build_tag_map(config.INTEREST_TAG_OVERRIDES)
    catalog = collect_catalog(build_sources())
    return catalog, prefs, tag_map


def run_rank():
    """Print the ranked catalog for the current preferences."""
    catalog, prefs, tag_map = load_session()
    ranked = rank_with_scores(catalog, prefs, tag_map)

    logger.info(f"Ranked {len(ranked)} of {len(catalog)} opportunities")
    if not ranked:
        print("No opportunities found in the selected categories.")
        return ranked

    for position, (opp, score) in enumerate(ranked, start=1):
        print(f"{position:>3}. [{score:>4.0%}] {opp.title} ({opp.category})")
    return ranked


def run_swipe(read=input):
    """Interactive swipe session. Returns the saved opportunities."""
    init_db(config.STORE_PATH)
    catalog, prefs, tag_map = load_session()
    deck = SwipeDeck.for_preferences(catalog, prefs, tag_map)

    if not has_completed_onboarding(config.STORE_PATH):
        print("\n".join(ONBOARDING_INTRO))
        mark_onboarding_complete(config.STORE_PATH)

    if not len(deck):
        print("No opportunities found in the selected categories.")
        return []

    friends = _load_friends_quietly()
    actions = {"l": deck.swipe_left, "r": deck.swipe_right, "u": deck.swipe_up}

    # Saved opportunities are written out even if input ends or is interrupted
    try:
        while not deck.is_exhausted:
            opp = deck.current
            print(f"\n{opp.title} ({opp.category})")
            details = _detail_line(opp)
            if details:
                print(f"  {details}")
            interested = friends_interested_in(opp, friends, config.FRIEND_MATCH_THRESHOLD)
            if interested:
                print(f"  Friends interested: {', '.join(f.name for f in interested)}")

            try:
                choice = read("[l]eft / [r]ight / [u]p / [q]uit > ").strip().lower()
            except EOFError:
                choice = "q"
            if choice == "q":
                break
            if choice in actions:
                actions[choice]()

        if deck.is_exhausted:
            print(f"\nYou've seen all {len(deck)} opportunities in your selected categories.")
    finally:
        saved = deck.saved
        report = save_saved_report(saved, output_dir=config.REPORTS_DIR)
        logger.info(f"Saved {len(saved)} opportunities to {report}")
    return saved


def _detail_line(opp) -> str:
    """Date, time and location joined for display, skipping blank parts."""
    when = " ".join(part for part in (opp.date, opp.time) if part)
    return " · ".join(part for part in (when, opp.location) if part)


def run_preferences(read=input, path=PROFILE_PATH):
    """Toggle opportunity types and interests, then save them to the profile.

    Returns the saved UserPreferences, or None if the user quit without saving.
    """
    profile = get_profile()
    types = [t for t in profile.get("opportunity_types", []) if t in CATEGORIES]
    interests = [i for i in profile.get("interests", []) if i in INTERESTS]

    while True:
        _print_selection(types, interests)
        try:
            choice = read("Toggle (e.g. c1, i3), [d]one or [q]uit > ").strip().lower()
        except EOFError:
            choice = "q"

        if choice == "q":
            print("Preferences not saved.")
            return None
        if choice == "d":
            if can_continue(types):
                break
            print("Select at least one opportunity type to continue.")
            continue

        options = {"c": CATEGORIES, "i": INTERESTS}.get(choice[:1])
        index = choice[1:]
        if options is None or not index.isdigit() or not 1 <= int(index) <= len(options):
            print(f"Unknown choice {choice!r}.")
            continue
        value = options[int(index) - 1]
        if options is CATEGORIES:
            types = toggle(types, value)
        else:
            interests = toggle(interests, value)

    data = {**profile, "opportunity_types": types, "interests": interests}
    if not validate_preferences(data):
        raise ValueError("Selected preferences are invalid")
    save_profile(data, path)
    config.reload()
    logger.info(f"Preferences saved to {path}")
    return preferences_from_profile(data)


def _print_selection(types, interests):
    print("\nOpportunity types:")
    for n, category in enumerate(CATEGORIES, start=1):
        print(f"  c{n} [{'x' if category in types else ' '}] {category}")
    print("Interests (optional, used for ranking):")
    for n, interest in enumerate(INTERESTS, start=1):
        print(f"  i{n} [{'x' if interest in interests else ' '}] {interest}")


def show_friends():
    """Print the friends activity feed."""
    friends = load_friends(config.FRIENDS_PATH)
    for friend, activity in recent_activity(friends):
        print(
            f"{friend.name}: {action_label(activity.action_type)} "
            f"{activity.opportunity_title} ({activity.timestamp})"
        )
    return friends


def _load_friends_quietly():
    try:
        return load_friends(config.FRIENDS_PATH)
    except (OSError, ValueError, KeyError) as e:
        logger.warning(f"Friends activity unavailable: {e}")
        return []


COMMANDS = {
    "rank": run_rank,
    "preferences": run_preferences,
    "swipe": run_swipe,
    "friends": show_friends,
    "reset-onboarding": lambda: reset_onboarding(config.STORE_PATH),
}


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    command = argv[0] if argv else "rank"
    if command not in COMMANDS:
        print(f"Unknown command {command!r}. Choose one of: {', '.join(COMMANDS)}")
        return 2
    try:
        COMMANDS[command]()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"{command} failed: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
