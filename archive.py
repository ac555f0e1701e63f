import os
from datetime import date, datetime, timezone

from models import SavedOpportunity


def save_saved_report(saved: list[SavedOpportunity], output_dir: str = "reports/") -> str:
    """Write the saved opportunities as a markdown report. Returns the filename."""
    os.makedirs(output_dir, exist_ok=True)
    today = date.today().strftime("%Y-%m-%d")
    filename = os.path.join(output_dir, f"saved-{today}.md")

    lines = [f"# Saved Opportunities — {today}\n"]

    if not saved:
        lines.append("No saved opportunities yet.\n")
    else:
        top = [s for s in saved if s.action_type == "superLike"]
        liked = [s for s in saved if s.action_type == "like"]

        lines.append(f"**{len(saved)} saved** — {len(top)} top picks, {len(liked)} liked\n")

        if top:
            lines.append("## Top Picks\n")
            for item in top:
                lines.extend(_render_saved(item))

        if liked:
            lines.append("## Saved\n")
            for item in liked:
                lines.extend(_render_saved(item))

    with open(filename, "w") as f:
        f.write("\n".join(lines))

    return filename


def _render_saved(item: SavedOpportunity) -> list[str]:
    """Render a single saved opportunity as markdown lines."""
    opp = item.opportunity
    lines = []

    if opp.external_link:
        lines.append(f"### [{opp.title}]({opp.external_link})")
    else:
        lines.append(f"### {opp.title}")
    lines.append(f"**Category:** {opp.category} | **Saved:** {_format_saved(item.saved_at)}")

    when = " ".join(part for part in (opp.date, opp.time) if part)
    if when:
        lines.append(f"**When:** {when}")

    if opp.location:
        lines.append(f"**Location:** {opp.location}")

    if opp.tags:
        shown = ", ".join(opp.tags[:3])
        if len(opp.tags) > 3:
            shown += f" +{len(opp.tags) - 3} more"
        lines.append(f"**Tags:** {shown}")

    if opp.description:
        lines.append(f"\n{opp.description}")

    lines.append("")  # blank line between entries
    return lines


def _format_saved(saved_at: datetime) -> str:
    """Format saved_at as human-readable age."""
    now = datetime.now(timezone.utc)
    if saved_at.tzinfo is None:
        saved_at = saved_at.replace(tzinfo=timezone.utc)
    days = (now - saved_at).days
    if days == 0:
        return "Today"
    elif days == 1:
        return "Yesterday"
    elif days < 7:
        return f"{days} days ago"
    else:
        return saved_at.strftime("%Y-%m-%d")
