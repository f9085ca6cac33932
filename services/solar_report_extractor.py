"""
Solar Report Extractor Service
Turns converted report text into monthly Energy to Grid values with a confidence tier
"""
from typing import Any, Dict, Optional
import logging

from config.extraction_config import EXTRACTION_CONFIG
from models import ExtractionResult
from services.confidence_scorer import ConfidenceScorer
from services.monthly_table_parser import MonthlyTableParser

logger = logging.getLogger(__name__)


class SolarReportExtractor:
    """
    Stateless extractor for solar production reports
    - Monthly grid-delivered values from the production table
    - Annual "Energy to Grid" total
    - Confidence tier from reconciling the two
    """

    def __init__(self, config: Dict = None):
        self.config = config or EXTRACTION_CONFIG
        self.parser = MonthlyTableParser(self.config)
        self.scorer = ConfidenceScorer(self.config)

    def extract(self, text: Optional[str], tables: Any = None) -> ExtractionResult:
        """
        Extract monthly values and total from report text

        Args:
            text: Full text from the PDF converter
            tables: Tabular JSON from the converter, accepted but not used

        Returns:
            ExtractionResult (never raises for bad input)
        """
        messages = self.config['messages']

        if not text:
            logger.warning("No text body to extract from")
            return ExtractionResult(errors=[messages['no_text']])

        logger.info(f"Starting extraction ({len(text)} chars)")

        errors = []
        total = None
        monthly_values = {}
        confidence = 0

        try:
            total, total_errors = self.scorer.extract_total(text)
            monthly_values = self.parser.parse_monthly_values(text)

            score = self.scorer.score(monthly_values, total)
            confidence = score.confidence
            errors.extend(total_errors)
            errors.extend(score.errors)
        except Exception as e:
            logger.error(f"Error extracting monthly data: {e}")
            errors.append(messages['parsing_error'].format(error=e))

        return ExtractionResult(
            total_energy_to_grid=total,
            monthly_values=monthly_values,
            extraction_confidence=confidence,
            has_valid_monthly_data=len(monthly_values) > 0,
            errors=errors
        )

    def extract_and_validate(self, text: Optional[str], tables: Any = None) -> ExtractionResult:
        """
        Extract, then apply the validation gate

        Raises:
            NoMonthlyDataError / LowConfidenceError when the result must be rejected
        """
        result = self.extract(text, tables)
        return self.scorer.check_accepted(result)


_default_extractor = SolarReportExtractor()


def extract(raw_text: Optional[str]) -> ExtractionResult:
    """Extract with the default configuration"""
    return _default_extractor.extract(raw_text)
