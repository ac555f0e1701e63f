import json
import logging

from models import CATEGORIES, Opportunity
from sources.base import BaseSource

logger = logging.getLogger(__name__)


class StaticCatalogSource(BaseSource):
    """The bundled catalog: a JSON array of opportunity objects on disk."""

    name = "static"

    def __init__(self, path: str):
        self.path = path

    def collect(self) -> list[Opportunity]:
        with open(self.path) as f:
            data = json.load(f)

        opportunities = []
        for item in data:
            opp = parse_record(item, self.name)
            if opp:
                opportunities.append(opp)
        return opportunities


def parse_record(item: dict, source: str) -> Opportunity | None:
    """Build an Opportunity, skipping records without an id or with an unknown category."""
    if not item.get("id"):
        logger.warning(f"[{source}] Skipping record without id: {item.get('title', '')!r}")
        return None
    if item.get("category") not in CATEGORIES:
        logger.warning(
            f"[{source}] Skipping {item['id']}: unknown category {item.get('category')!r}"
        )
        return None
    return Opportunity.from_dict(item, source=source)
