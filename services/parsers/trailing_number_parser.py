"""
Trailing-number monthly parser
Looser whole-text pattern used to recover months the line-anchored pass missed
"""
import re
from typing import Dict, List
import logging

from config.extraction_config import MONTH_NAMES
from .base_parser import BaseMonthlyParser, MonthlyReading

logger = logging.getLogger(__name__)

# The column run uses \s, so a match may continue onto the next line when
# table rows are wrapped.
TRAILING_ROW_PATTERN = re.compile(
    r'(' + '|'.join(MONTH_NAMES) + r')\s+[0-9.,\s]+\s+([0-9,]+\.?[0-9]*)\s*$',
    re.IGNORECASE | re.MULTILINE
)


class TrailingNumberParser(BaseMonthlyParser):
    """
    Fallback strategy: month name, any run of numeric columns, and a final
    number at the end of the line. No noise threshold beyond "positive".
    """

    def __init__(self, config: Dict = None):
        super().__init__(config)
        self.min_value = self.table_config['fallback_min_value_kwh']

    @property
    def name(self) -> str:
        return "trailing_number"

    def parse(self, text: str) -> List[MonthlyReading]:
        readings = []

        for match in TRAILING_ROW_PATTERN.finditer(text):
            month = match.group(1)
            grid_value = self._parse_number(match.group(2))

            if grid_value is not None and grid_value > self.min_value:
                readings.append(MonthlyReading(month=month, value=grid_value, source=self.name))

        readings = self._dedupe(readings)
        logger.debug(f"Trailing-number pass found {len(readings)} months")
        return readings
