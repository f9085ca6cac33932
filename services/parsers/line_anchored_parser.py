"""
Line-anchored monthly parser
Reads rows that start with a month name and carry the full set of numeric columns
"""
import re
from typing import Dict, List
import logging

from config.extraction_config import MONTH_NAMES
from .base_parser import BaseMonthlyParser, MonthlyReading

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r'[0-9,]+\.?[0-9]*')


class LineAnchoredParser(BaseMonthlyParser):
    """
    Primary strategy for production tables laid out one month per line:
    January  <GHI> <POA> <Shaded> <Nameplate> <Grid>
    Only the last column (Grid) is kept.
    """

    def __init__(self, config: Dict = None):
        super().__init__(config)
        self.min_columns = self.table_config['min_numeric_columns']
        self.noise_threshold = self.table_config['noise_threshold_kwh']

    @property
    def name(self) -> str:
        return "line_anchored"

    def parse(self, text: str) -> List[MonthlyReading]:
        readings = []

        for line in text.split('\n'):
            trimmed = line.strip()

            for month in MONTH_NAMES:
                if not trimmed.startswith(month):
                    continue

                # Numbers are taken from the whole line, month label included
                numbers = NUMBER_PATTERN.findall(line)
                if len(numbers) < self.min_columns:
                    continue

                grid_value = self._parse_number(numbers[-1])
                if grid_value is not None and grid_value > self.noise_threshold:
                    readings.append(MonthlyReading(month=month, value=grid_value, source=self.name))
                    break

        readings = self._dedupe(readings)
        logger.debug(f"Line-anchored pass found {len(readings)} months")
        return readings
