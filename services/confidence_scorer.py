"""
Confidence Scoring System
Reconciles monthly values against the reported annual total and assigns a confidence tier
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import re
import logging

from config.extraction_config import EXTRACTION_CONFIG, RECONCILIATION_TIERS
from models import ExtractionResult
from services.exceptions import LowConfidenceError, NoMonthlyDataError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReconciliationContext:
    """Inputs the reconciliation tiers are evaluated against"""
    months_found: int
    monthly_sum: float
    total: Optional[float]
    difference: Optional[float]           # |sum - total|
    relative_difference: Optional[float]  # |sum - total| / total

    @classmethod
    def build(cls, monthly_values: Dict[str, float], total: Optional[float]) -> "ReconciliationContext":
        monthly_sum = sum(monthly_values.values())
        difference = None
        relative_difference = None

        if total is not None:
            difference = abs(monthly_sum - total)
            if total:
                relative_difference = difference / total

        return cls(
            months_found=len(monthly_values),
            monthly_sum=monthly_sum,
            total=total,
            difference=difference,
            relative_difference=relative_difference,
        )


@dataclass
class ScoreResult:
    """Confidence tier with the diagnostics it produced"""
    confidence: int
    errors: List[str] = field(default_factory=list)
    context: Optional[ReconciliationContext] = None


class ConfidenceScorer:
    """Calculates the confidence tier for an extraction"""

    def __init__(self, config: Dict = None, tiers: Tuple = None):
        """
        Initialize confidence scorer

        Args:
            config: Configuration dict (uses EXTRACTION_CONFIG if not provided)
            tiers: Ordered (predicate, confidence, template) tuples (uses RECONCILIATION_TIERS if not provided)
        """
        self.config = config or EXTRACTION_CONFIG
        self.tiers = tiers or RECONCILIATION_TIERS
        self.threshold = self.config['confidence_thresholds']['minimum_accepted']
        self.messages = self.config['messages']
        self.total_pattern = re.compile(
            re.escape(self.config['total']['label']) + r'\s+([0-9,]+\.?[0-9]*)',
            re.IGNORECASE
        )

    def extract_total(self, text: str) -> Tuple[Optional[float], List[str]]:
        """
        Find the annual Energy to Grid total (first occurrence only)

        Returns:
            Tuple of (total or None, diagnostics)
        """
        match = self.total_pattern.search(text)
        if not match:
            logger.info("No Energy to Grid total found")
            return None, []

        raw = match.group(1)
        try:
            total = float(raw.replace(',', ''))
        except ValueError:
            logger.warning(f"Unparseable Energy to Grid value: {raw!r}")
            return None, [self.messages['total_unparseable'].format(raw=raw)]

        logger.info(f"Found Energy to Grid total: {total}")
        return total, []

    def score(self, monthly_values: Dict[str, float], total: Optional[float]) -> ScoreResult:
        """
        Walk the reconciliation tiers and return the first one that holds

        Args:
            monthly_values: Lowercase month -> kWh
            total: Annual total, None if not found

        Returns:
            ScoreResult with confidence and diagnostics
        """
        ctx = ReconciliationContext.build(monthly_values, total)

        for predicate, confidence, template in self.tiers:
            if not predicate(ctx):
                continue

            errors = []
            if template:
                errors.append(template.format(
                    monthly_sum=ctx.monthly_sum,
                    total=_format_number(ctx.total),
                    difference=ctx.difference,
                ))

            logger.info(
                f"Confidence {confidence}: {ctx.months_found} months, "
                f"sum={ctx.monthly_sum:.1f}, total={ctx.total}"
            )
            return ScoreResult(confidence=confidence, errors=errors, context=ctx)

        # The last tier always matches with the default table
        raise ValueError(f"No confidence tier matched {ctx}")

    def should_reject(self, result: ExtractionResult) -> bool:
        """Determine if an extraction should be rejected"""
        return not result.has_valid_monthly_data or result.extraction_confidence < self.threshold

    def get_rejection_reason(self, result: ExtractionResult) -> str:
        """Get human-readable rejection reason"""
        if not result.has_valid_monthly_data:
            return (
                "No monthly production data found in PDF. Please ensure the PDF contains "
                "a monthly production table with values for each month."
            )

        if result.extraction_confidence < self.threshold:
            return (
                f"Low confidence in data extraction ({result.extraction_confidence}%). "
                f"Errors: {', '.join(result.errors)}"
            )

        return "Unknown rejection reason"

    def check_accepted(self, result: ExtractionResult) -> ExtractionResult:
        """
        Validation gate: raise if the result must not be stored

        Raises:
            NoMonthlyDataError: no month was extracted
            LowConfidenceError: confidence below the accepted minimum
        """
        if not result.has_valid_monthly_data:
            raise NoMonthlyDataError(
                self.get_rejection_reason(result),
                errors=result.errors,
                confidence=result.extraction_confidence
            )

        if result.extraction_confidence < self.threshold:
            raise LowConfidenceError(
                self.get_rejection_reason(result),
                errors=result.errors,
                confidence=result.extraction_confidence
            )

        return result


def _format_number(value: Optional[float]) -> str:
    """Render a number the way report totals are written: 22000.0 -> '22000'"""
    if value is None:
        return "None"
    if float(value).is_integer():
        return str(int(value))
    return str(value)
