"""
Rejection errors raised by the validation gate
"""
from typing import List, Optional


class ExtractionRejectedError(Exception):
    """Extraction finished but the result is not usable"""

    def __init__(self, message: str, errors: Optional[List[str]] = None, confidence: int = 0):
        super().__init__(message)
        self.errors = list(errors or [])
        self.confidence = confidence


class NoMonthlyDataError(ExtractionRejectedError):
    """No monthly value could be extracted from the report"""


class LowConfidenceError(ExtractionRejectedError):
    """Extraction confidence is below the accepted minimum"""
