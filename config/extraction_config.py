"""
Extraction Configuration
Centralized configuration for monthly table parsing, total extraction, and confidence scoring
"""

# Canonical calendar order. Line scanning and period mapping both rely on it.
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

EXTRACTION_CONFIG = {
    # Monthly table parsing
    "monthly_table": {
        # Line-anchored pass: GHI, POA, Shaded, Nameplate, Grid
        "min_numeric_columns": 5,
        "noise_threshold_kwh": 100.0,  # strict ">" - rejects percentages, page numbers
        # Trailing-number pass accepts anything positive
        "fallback_min_value_kwh": 0.0,
        # Fallback only runs while fewer distinct months than this were found
        "expected_months": 12,
        # Parser strategies (in order of preference)
        "strategies": [
            "line_anchored",
            "trailing_number",
        ],
    },

    # Annual total
    "total": {
        "label": "Energy to Grid",
    },

    # Confidence thresholds
    "confidence_thresholds": {
        "minimum_accepted": 50,  # Below this the document is rejected
    },

    # Diagnostics
    "messages": {
        "no_text": "No text data available from PDF",
        "total_unparseable": "Could not parse Energy to Grid value '{raw}'",
        "parsing_error": "Parsing error: {error}",
    },
}


def _full_year_with_total(ctx):
    return ctx.months_found == 12 and ctx.total is not None


def _within_relative(limit):
    def predicate(ctx):
        return (
            _full_year_with_total(ctx)
            and ctx.relative_difference is not None
            and ctx.relative_difference <= limit
        )
    return predicate


# Reconciliation tiers, evaluated top to bottom; first predicate that holds wins.
# (predicate, confidence, diagnostic template or None)
RECONCILIATION_TIERS = (
    (lambda ctx: _full_year_with_total(ctx) and ctx.difference <= 0.1, 100, None),
    (_within_relative(0.01), 98, None),
    (_within_relative(0.02), 95, None),
    (_within_relative(0.05), 90, None),
    (
        _full_year_with_total,
        80,
        "Monthly sum ({monthly_sum:.1f}) doesn't match total ({total}) - difference: {difference:.1f} kWh",
    ),
    (lambda ctx: ctx.months_found == 12, 85, None),
    (lambda ctx: ctx.months_found > 6, 60, None),
    (lambda ctx: True, 30, "Insufficient monthly data found"),
)
