import logging
import defusedxml.ElementTree as ET
from email.utils import parsedate_to_datetime

import requests
from bs4 import BeautifulSoup

import config as config
from models import Opportunity
from sources.base import BaseSource

logger = logging.getLogger(__name__)


class RssFeedSource(BaseSource):
    """Event or listing RSS feed. Every item gets the feed's configured category."""

    name = "rss"

    def __init__(self, url: str, category: str, tags=()):
        self.url = url
        self.category = category
        self.tags = tuple(tags)

    def collect(self) -> list[Opportunity]:
        resp = requests.get(
            self.url,
            headers={"User-Agent": config.USER_AGENT},
            timeout=config.REQUEST_TIMEOUT,
        )
        resp.raise_for_status()

        root = ET.fromstring(resp.content)
        channel = root.find("channel")
        if channel is None:
            return []

        opportunities = []
        seen_ids = set()
        for item in channel.findall("item"):
            opp = self._parse_item(item)
            if opp and opp.id not in seen_ids:
                seen_ids.add(opp.id)
                opportunities.append(opp)
        return opportunities

    def _parse_item(self, item) -> Opportunity | None:
        link = item.findtext("link", "").strip()
        guid = item.findtext("guid", "").strip() or link
        if not guid:
            return None

        # Parse description HTML to plain text
        description = ""
        description_html = item.findtext("description", "")
        if description_html:
            soup = BeautifulSoup(description_html, "html.parser")
            description = soup.get_text(separator=" ", strip=True)

        known = {t.lower() for t in self.tags}
        item_tags = [c.text.strip().lower() for c in item.findall("category") if c.text]
        date, time = self._parse_date(item.findtext("pubDate", ""))

        return Opportunity(
            id=guid,
            title=item.findtext("title", "").strip(),
            category=self.category,
            description=description,
            external_link=link,
            date=date,
            time=time,
            location=item.findtext("location", "").strip(),
            tags=self.tags + tuple(t for t in item_tags if t not in known),
            source=self.name,
        )

    def _parse_date(self, date_str: str) -> tuple[str, str]:
        """RFC 822 pubDate → ("March 15, 2026", "6:00 PM"). Unparseable → ("", "")."""
        if not date_str:
            return "", ""
        try:
            dt = parsedate_to_datetime(date_str)
        except (ValueError, TypeError):
            return "", ""
        return f"{dt.strftime('%B')} {dt.day}, {dt.year}", dt.strftime("%I:%M %p").lstrip("0")
