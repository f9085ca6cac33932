"""
Forecast period mapping
Converts an accepted extraction into one record per month for storage
"""
from datetime import datetime
from typing import Dict, List, Optional, Tuple
import logging

from config.extraction_config import MONTH_NAMES
from models import ExtractionResult, ForecastPeriod

logger = logging.getLogger(__name__)

_MONTH_KEYS = [name.lower() for name in MONTH_NAMES]


def month_number(name: str) -> str:
    """'march' / 'March' -> '03'"""
    key = name.lower()
    if key not in _MONTH_KEYS:
        raise ValueError(f"Unknown month name: {name}")
    return f"{_MONTH_KEYS.index(key) + 1:02d}"


def month_name(number: str) -> str:
    """'03' -> 'march'"""
    try:
        index = int(number)
    except ValueError:
        raise ValueError(f"Invalid month number: {number}")

    if not 1 <= index <= 12:
        raise ValueError(f"Invalid month number: {number}")
    return _MONTH_KEYS[index - 1]


def ordered_monthly_values(monthly_values: Dict[str, float]) -> List[Tuple[str, float]]:
    """Monthly values in calendar order, unknown keys dropped"""
    return [(key, monthly_values[key]) for key in _MONTH_KEYS if key in monthly_values]


def build_forecast_periods(result: ExtractionResult, year: Optional[str] = None) -> List[ForecastPeriod]:
    """
    Map extracted monthly values to period records

    Args:
        result: Accepted extraction result
        year: Display year (defaults to the current year, the report does not carry one)

    Returns:
        One ForecastPeriod per month with a positive value, in calendar order
    """
    year = year or str(datetime.now().year)

    periods = [
        ForecastPeriod(year=year, month=month_number(key), kwh_value=value)
        for key, value in ordered_monthly_values(result.monthly_values)
        if value > 0
    ]

    logger.info(f"Built {len(periods)} forecast periods for {year}")
    return periods
