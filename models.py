from dataclasses import dataclass, field
from datetime import datetime, timezone

CATEGORIES = ("internship", "extracurricular", "community", "job")

INTERESTS = (
    "STEM", "Activism", "Art", "Sports", "Music", "Business", "Healthcare",
    "Education", "Environment", "Leadership", "Technology", "Writing",
    "Theater", "Community Service",
)


@dataclass(frozen=True)
class Opportunity:
    id: str
    title: str
    category: str  # one of CATEGORIES
    description: str = ""
    image: str = ""
    external_link: str = ""
    date: str = ""
    time: str = ""
    location: str = ""
    tags: tuple[str, ...] = ()
    source: str = "static"  # "static", "feed", "rss"

    @classmethod
    def from_dict(cls, data: dict, source: str = "static") -> "Opportunity":
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            category=data.get("category", ""),
            description=data.get("description", ""),
            image=data.get("image", ""),
            external_link=data.get("external_link", data.get("externalLink", "")),
            date=data.get("date", ""),
            time=data.get("time", ""),
            location=data.get("location", ""),
            tags=tuple(data.get("tags", [])),
            source=source,
        )


@dataclass(frozen=True)
class UserPreferences:
    opportunity_types: tuple[str, ...] = ()
    interests: tuple[str, ...] = ()


@dataclass
class SwipeAction:
    type: str  # "like", "pass", "superLike"
    resource_id: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class SavedOpportunity:
    opportunity: Opportunity
    action_type: str  # "like" or "superLike"
    saved_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class FriendActivity:
    opportunity_title: str
    action_type: str  # "save" or "save+pursue"
    timestamp: str = ""  # display string, e.g. "2 hours ago"
    opportunity_image: str = ""
    external_link: str = ""


@dataclass
class Friend:
    id: str
    name: str
    avatar: str = ""
    recent_activity: list[FriendActivity] = field(default_factory=list)
