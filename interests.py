"""Interest → related-tag lookup used for alignment scoring."""

from types import MappingProxyType

# Keys are lowercased interest names. Keep in sync with the tags used in the
# catalog when new kinds of opportunities are added.
_DEFAULT_TAGS = {
    "stem": (
        "stem", "science", "technology", "engineering", "math", "programming",
        "robotics", "research", "biotechnology", "cybersecurity", "ai",
        "software", "computer", "digital", "tech", "coding",
    ),
    "activism": (
        "activism", "social justice", "advocacy", "protest", "climate",
        "environment", "sustainability", "civic engagement", "policy",
        "government", "leadership", "community organizing",
    ),
    "art": ("art", "creative", "visual arts", "photography", "gallery", "curatorial", "design"),
    "sports": ("sports", "fitness", "athletics", "coaching", "teamwork", "recreation"),
    "music": ("music", "orchestra", "performance", "recording", "audio"),
    "business": (
        "business", "career", "finance", "consulting", "professional",
        "entrepreneurship", "workforce development",
    ),
    "healthcare": ("healthcare", "hospital", "medical", "health", "medicine", "clinical"),
    "education": ("education", "teaching", "tutoring", "learning", "academic", "school", "curriculum"),
    "environment": ("environment", "conservation", "sustainability", "climate", "ecology", "green"),
    "leadership": ("leadership", "mentoring", "management", "organizing", "advocacy"),
    "technology": (
        "technology", "tech", "programming", "coding", "software", "digital",
        "computer", "cybersecurity",
    ),
    "writing": ("writing", "journalism", "literature", "creative writing", "poetry", "slam poetry"),
    "theater": ("theater", "theatre", "performance", "drama", "acting"),
    "community service": (
        "community", "volunteer", "service", "community service", "mentoring", "tutoring",
    ),
}

INTEREST_TAGS = MappingProxyType(_DEFAULT_TAGS)


def build_tag_map(overrides: dict | None = None) -> MappingProxyType:
    """Return the default table with per-deployment overrides merged on top.

    Override keys and tags are lowercased. An override replaces the default
    tag list for that interest rather than extending it.
    """
    if not overrides:
        return INTEREST_TAGS
    merged = dict(_DEFAULT_TAGS)
    for interest, tags in overrides.items():
        merged[interest.lower()] = tuple(t.lower() for t in tags)
    return MappingProxyType(merged)


def related_tags(interest: str, tag_map=INTEREST_TAGS) -> tuple[str, ...]:
    """Related tags for an interest; unknown interests match only themselves."""
    interest_lower = interest.lower()
    return tag_map.get(interest_lower, (interest_lower,))
