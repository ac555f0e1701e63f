"""Swipe session over a ranked list of opportunities."""

import logging

from interests import INTEREST_TAGS
from models import Opportunity, SavedOpportunity, SwipeAction, UserPreferences
from ranker import rank

logger = logging.getLogger(__name__)


class SwipeDeck:
    """Walks a ranked list one card at a time, collecting saved opportunities.

    Left passes, right saves as a like, up saves as a super-like. Every swipe
    advances the deck; once the last card has been swiped the deck is
    exhausted and further swipes do nothing.
    """

    def __init__(self, opportunities: list[Opportunity]):
        self._opportunities = list(opportunities)
        self._index = 0
        self._saved: list[SavedOpportunity] = []
        self.history: list[SwipeAction] = []

    @classmethod
    def for_preferences(cls, catalog, prefs: UserPreferences, tag_map=INTEREST_TAGS) -> "SwipeDeck":
        return cls(rank(catalog, prefs, tag_map))

    @property
    def current(self) -> Opportunity | None:
        if self._index < len(self._opportunities):
            return self._opportunities[self._index]
        return None

    @property
    def remaining(self) -> int:
        return len(self._opportunities) - self._index

    @property
    def is_exhausted(self) -> bool:
        return self.current is None

    @property
    def saved(self) -> list[SavedOpportunity]:
        return list(self._saved)

    def __len__(self) -> int:
        return len(self._opportunities)

    def swipe_left(self) -> Opportunity | None:
        return self._swipe("pass")

    def swipe_right(self) -> Opportunity | None:
        return self._swipe("like")

    def swipe_up(self) -> Opportunity | None:
        return self._swipe("superLike")

    def reset(self, opportunities: list[Opportunity]) -> None:
        """Start over on a new ranking. Saved opportunities are kept."""
        self._opportunities = list(opportunities)
        self._index = 0

    def _swipe(self, action: str) -> Opportunity | None:
        """Apply action to the current card and advance. Returns the swiped card."""
        opp = self.current
        if opp is None:
            return None

        swipe = SwipeAction(type=action, resource_id=opp.id)
        self.history.append(swipe)
        if action != "pass":
            self._saved.append(
                SavedOpportunity(opportunity=opp, action_type=action, saved_at=swipe.timestamp)
            )
            logger.debug(f"Saved {opp.id} ({action})")

        self._index += 1
        if self.is_exhausted:
            logger.info(f"Seen all {len(self._opportunities)} opportunities")
        return opp
