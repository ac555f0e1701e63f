"""Filter the catalog by category and order it by interest alignment."""

from interests import INTEREST_TAGS, related_tags
from models import Opportunity, UserPreferences


def filter_by_category(catalog, opportunity_types) -> list[Opportunity]:
    """Keep opportunities whose category is selected. No selection keeps all."""
    if not opportunity_types:
        return list(catalog)
    selected = set(opportunity_types)
    return [opp for opp in catalog if opp.category in selected]


def interest_matches(opp: Opportunity, interest: str, tag_map=INTEREST_TAGS) -> bool:
    """True if any related tag and any opportunity tag contain one another.

    Containment is checked both ways, so "tech" matches an opportunity tagged
    "technology" and "computer" matches "computer science".
    """
    opp_tags = [tag.lower() for tag in opp.tags]
    for related in related_tags(interest, tag_map):
        related = related.lower()
        if any(related in tag or tag in related for tag in opp_tags):
            return True
    return False


def alignment_score(opp: Opportunity, interests, tag_map=INTEREST_TAGS) -> float:
    """Fraction of interests with at least one matching tag, in [0, 1]."""
    if not interests:
        return 0.0  # neutral
    matched = sum(1 for interest in interests if interest_matches(opp, interest, tag_map))
    return matched / len(interests)


def rank_with_scores(
    catalog, prefs: UserPreferences, tag_map=INTEREST_TAGS
) -> list[tuple[Opportunity, float]]:
    """Filtered opportunities paired with their score, best first.

    sorted() is stable, so equal scores keep catalog order.
    """
    candidates = filter_by_category(catalog, prefs.opportunity_types)
    scored = [(opp, alignment_score(opp, prefs.interests, tag_map)) for opp in candidates]
    return sorted(scored, key=lambda pair: pair[1], reverse=True)


def rank(catalog, prefs: UserPreferences, tag_map=INTEREST_TAGS) -> list[Opportunity]:
    """Opportunities in the selected categories, most aligned first."""
    return [opp for opp, _ in rank_with_scores(catalog, prefs, tag_map)]
