import logging

import requests

import config as config
from models import Opportunity
from sources.base import BaseSource
from sources.static import parse_record

logger = logging.getLogger(__name__)


class JsonFeedSource(BaseSource):
    """Remote catalog served as JSON, same record shape as the bundled file."""

    name = "feed"

    def __init__(self, url: str):
        self.url = url

    def collect(self) -> list[Opportunity]:
        resp = requests.get(
            self.url,
            headers={"User-Agent": config.USER_AGENT},
            timeout=config.REQUEST_TIMEOUT,
        )
        resp.raise_for_status()
        data = resp.json()

        # Either a bare array or {"opportunities": [...]}
        records = data.get("opportunities", []) if isinstance(data, dict) else data

        opportunities = []
        for item in records:
            opp = parse_record(item, self.name)
            if opp:
                opportunities.append(opp)
        return opportunities
