import logging

import config as config
from models import CATEGORIES, Opportunity
from sources.base import BaseSource
from sources.json_feed import JsonFeedSource
from sources.rss import RssFeedSource
from sources.static import StaticCatalogSource

logger = logging.getLogger(__name__)


def build_sources() -> list[BaseSource]:
    """Bundled catalog first, then any feeds configured in the profile."""
    sources: list[BaseSource] = [StaticCatalogSource(config.CATALOG_PATH)]
    for feed in config.FEEDS:
        if not isinstance(feed, dict) or not feed.get("url"):
            logger.warning(f"Ignoring feed without url: {feed!r}")
            continue
        kind = feed.get("kind", "json")
        if kind == "json":
            sources.append(JsonFeedSource(feed["url"]))
        elif kind == "rss":
            category = feed.get("category")
            if category not in CATEGORIES:
                logger.warning(f"Ignoring rss feed with unknown category {category!r}: {feed['url']}")
                continue
            sources.append(RssFeedSource(feed["url"], category, feed.get("tags", [])))
        else:
            logger.warning(f"Ignoring feed with unknown kind {kind!r}: {feed.get('url')}")
    return sources


def collect_catalog(sources: list[BaseSource]) -> list[Opportunity]:
    """Concatenate sources in order. The first record seen for an id wins."""
    catalog = []
    seen_ids = set()
    for source in sources:
        for opp in source.safe_collect():
            if opp.id in seen_ids:
                logger.debug(f"Duplicate id {opp.id} from [{source.name}], skipping")
                continue
            seen_ids.add(opp.id)
            catalog.append(opp)

    logger.info(f"Catalog has {len(catalog)} opportunities from {len(sources)} sources")
    return catalog
