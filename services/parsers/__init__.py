"""
Monthly Table Parser Strategies
"""
from .base_parser import BaseMonthlyParser, MonthlyReading
from .line_anchored_parser import LineAnchoredParser
from .trailing_number_parser import TrailingNumberParser

__all__ = [
    'BaseMonthlyParser',
    'MonthlyReading',
    'LineAnchoredParser',
    'TrailingNumberParser'
]
