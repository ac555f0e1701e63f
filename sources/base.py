import logging
from abc import ABC, abstractmethod

from models import Opportunity

logger = logging.getLogger(__name__)


class BaseSource(ABC):
    """Abstract base class for all opportunity catalog sources."""

    name: str = "base"

    @abstractmethod
    def collect(self) -> list[Opportunity]:
        """Load opportunities from this source. Returns list of Opportunity."""
        ...

    def safe_collect(self) -> list[Opportunity]:
        """Collect with error handling so one bad source doesn't empty the deck."""
        try:
            opportunities = self.collect()
            logger.info(f"[{self.name}] Loaded {len(opportunities)} opportunities")
            return opportunities
        except Exception as e:
            logger.error(f"[{self.name}] Failed to load: {e}")
            return []
