"""
Base classes for monthly table parsing
Each parser strategy scans report text on its own and returns monthly readings
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional
import logging

from config.extraction_config import EXTRACTION_CONFIG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthlyReading:
    """Grid-delivered value found for a single month"""
    month: str    # month name as matched in the text
    value: float  # kWh
    source: str   # name of the strategy that produced it

    @property
    def key(self) -> str:
        """Canonical lowercase month key"""
        return self.month.lower()


class BaseMonthlyParser(ABC):
    """
    Abstract base class for monthly table parsers
    Strategies must never raise on malformed text; no match means an empty list
    """

    def __init__(self, config: Dict = None):
        self.config = config or EXTRACTION_CONFIG
        self.table_config = self.config['monthly_table']

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this strategy"""
        pass

    @abstractmethod
    def parse(self, text: str) -> List[MonthlyReading]:
        """
        Scan text for month rows

        Args:
            text: Full report text

        Returns:
            Readings, at most one per month
        """
        pass

    def _parse_number(self, raw: str) -> Optional[float]:
        """Parse a numeric literal with thousands separators, None if malformed"""
        try:
            return float(raw.replace(',', ''))
        except ValueError:
            logger.debug(f"{self.name}: ignoring malformed number {raw!r}")
            return None

    @staticmethod
    def _dedupe(readings: List[MonthlyReading]) -> List[MonthlyReading]:
        """Keep one reading per month; a later row for the same month replaces an earlier one"""
        by_month: Dict[str, MonthlyReading] = {}
        for reading in readings:
            by_month[reading.key] = reading
        return list(by_month.values())
