"""
Monthly Table Parser
Runs the parser strategies in order of preference and merges their readings
"""
from typing import Dict, List
import logging

from config.extraction_config import EXTRACTION_CONFIG
from services.parsers import (
    BaseMonthlyParser,
    MonthlyReading,
    LineAnchoredParser,
    TrailingNumberParser
)

logger = logging.getLogger(__name__)

STRATEGY_CLASSES = {
    "line_anchored": LineAnchoredParser,
    "trailing_number": TrailingNumberParser,
}


class MonthlyTableParser:
    """
    Recovers one grid-delivered value per month from report text.

    The first strategy always runs. Each later strategy runs only while fewer
    than the expected number of months has been found, and can only add months
    that no earlier strategy produced.
    """

    def __init__(self, config: Dict = None, strategies: List[BaseMonthlyParser] = None):
        """
        Initialize parser

        Args:
            config: Configuration dict (uses EXTRACTION_CONFIG if not provided)
            strategies: Explicit strategy list, overrides the configured order
        """
        self.config = config or EXTRACTION_CONFIG
        self.expected_months = self.config['monthly_table']['expected_months']

        if strategies is None:
            strategies = [
                STRATEGY_CLASSES[name](self.config)
                for name in self.config['monthly_table']['strategies']
            ]
        self.strategies = strategies

    def parse(self, text: str) -> List[MonthlyReading]:
        """
        Extract monthly readings from text

        Args:
            text: Full report text

        Returns:
            Up to 12 readings, one per month, value > 0
        """
        merged: Dict[str, MonthlyReading] = {}

        for index, strategy in enumerate(self.strategies):
            if index > 0 and len(merged) >= self.expected_months:
                break

            added = 0
            for reading in strategy.parse(text):
                if reading.key in merged:
                    continue
                merged[reading.key] = reading
                added += 1

            logger.info(f"{strategy.name}: +{added} months ({len(merged)} total)")

        return list(merged.values())

    def parse_monthly_values(self, text: str) -> Dict[str, float]:
        """Extract monthly readings as a lowercase month -> kWh mapping"""
        return {reading.key: reading.value for reading in self.parse(text)}
