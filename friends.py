import json
import logging

from thefuzz import fuzz

from models import Friend, FriendActivity, Opportunity

logger = logging.getLogger(__name__)

ACTION_LABELS = {
    "save": "Saved",
    "save+pursue": "Saved & Pursuing",
}


def load_friends(path: str) -> list[Friend]:
    """Parse the friends JSON file into Friend records."""
    with open(path) as f:
        data = json.load(f)

    friends = []
    for item in data:
        activity = [
            FriendActivity(
                opportunity_title=a.get("opportunity_title", ""),
                action_type=a.get("action_type", "save"),
                timestamp=a.get("timestamp", ""),
                opportunity_image=a.get("opportunity_image", ""),
                external_link=a.get("external_link", ""),
            )
            for a in item.get("recent_activity", [])
        ]
        friends.append(Friend(
            id=str(item["id"]),
            name=item.get("name", ""),
            avatar=item.get("avatar", ""),
            recent_activity=activity,
        ))
    logger.info(f"Loaded {len(friends)} friends from {path}")
    return friends


def recent_activity(friends: list[Friend]) -> list[tuple[Friend, FriendActivity]]:
    """Flatten every friend's activity into one feed, friend order first."""
    return [(friend, activity) for friend in friends for activity in friend.recent_activity]


def action_label(action_type: str) -> str:
    return ACTION_LABELS.get(action_type, "Saved")


def friends_interested_in(
    opp: Opportunity, friends: list[Friend], threshold: int = 85
) -> list[Friend]:
    """Friends with an activity whose title fuzzy-matches the opportunity title."""
    matches = []
    for friend in friends:
        for activity in friend.recent_activity:
            if fuzz.token_sort_ratio(opp.title, activity.opportunity_title) > threshold:
                matches.append(friend)
                break
    return matches
