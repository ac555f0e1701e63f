"""Preference capture: selection toggling, validation, and loading from the profile."""

from models import CATEGORIES, INTERESTS, UserPreferences


def toggle(selection, value) -> list:
    """Add value if absent, remove it if present. Order of the rest is kept."""
    if value in selection:
        return [v for v in selection if v != value]
    return [*selection, value]


def can_continue(opportunity_types) -> bool:
    """At least one category is required; interests only help prioritize."""
    return len(opportunity_types) > 0


def validate_preferences(data) -> bool:
    """Check a preferences dict has the right structure and known values."""
    if not isinstance(data, dict):
        return False
    types = data.get("opportunity_types")
    interests = data.get("interests", [])
    if not isinstance(types, list) or not isinstance(interests, list):
        return False
    if not all(isinstance(t, str) and t in CATEGORIES for t in types):
        return False
    if not all(isinstance(i, str) and i in INTERESTS for i in interests):
        return False
    return can_continue(types)


def preferences_from_profile(profile: dict) -> UserPreferences:
    """Build UserPreferences from the profile. Raises ValueError if invalid."""
    data = {
        "opportunity_types": profile.get("opportunity_types", []),
        "interests": profile.get("interests", []),
    }
    if not validate_preferences(data):
        raise ValueError(
            "Profile preferences are invalid: select at least one of "
            f"{', '.join(CATEGORIES)} and only known interests"
        )
    return UserPreferences(
        opportunity_types=tuple(data["opportunity_types"]),
        interests=tuple(data["interests"]),
    )
