# tests/test_monthly_table_parser.py
from services.monthly_table_parser import MonthlyTableParser
from services.parsers import LineAnchoredParser, TrailingNumberParser


def values_of(readings):
    return {r.key: r.value for r in readings}


def test_line_anchored_reads_last_column(report):
    readings = LineAnchoredParser().parse(report())

    values = values_of(readings)
    assert len(values) == 12
    assert values["january"] == 1850.3
    assert values["december"] == 1449.7
    assert all(r.source == "line_anchored" for r in readings)


def test_line_anchored_requires_five_numbers():
    text = "January 120.5 130.2 5.0 1850.3"
    assert LineAnchoredParser().parse(text) == []


def test_line_anchored_noise_threshold_is_strict():
    parser = LineAnchoredParser()

    assert parser.parse("March 1 2 3 4 100") == []
    assert values_of(parser.parse("March 1 2 3 4 100.01")) == {"march": 100.01}


def test_line_anchored_strips_thousands_separators_and_trims():
    text = "   July 1,234.5 1,300.2 5.0 2,000.0 2,345.6   "
    assert values_of(LineAnchoredParser().parse(text)) == {"july": 2345.6}


def test_line_anchored_is_case_sensitive():
    assert LineAnchoredParser().parse("JANUARY 120.5 130.2 5.0 2000.0 1850.3") == []


def test_line_anchored_ignores_month_in_middle_of_line():
    text = "Report for January 120.5 130.2 5.0 2000.0 1850.3"
    assert LineAnchoredParser().parse(text) == []


def test_line_anchored_drops_malformed_last_number():
    # A lone comma still counts as a column but cannot be parsed
    text = "April 120.5 130.2 5.0 2000.0 ,"
    assert LineAnchoredParser().parse(text) == []


def test_line_anchored_keeps_one_reading_per_month():
    text = "\n".join([
        "January 120.5 130.2 5.0 2000.0 1850.3",
        "January 120.5 130.2 5.0 2000.0 1900.0",
    ])
    readings = LineAnchoredParser().parse(text)

    assert len(readings) == 1
    assert readings[0].value == 1900.0


def test_trailing_number_is_case_insensitive():
    text = "JANUARY 120.5 130.2 5.0 1850.3\nfebruary 7 8 9"
    values = values_of(TrailingNumberParser().parse(text))

    assert values == {"january": 1850.3, "february": 9.0}


def test_trailing_number_rejects_zero():
    assert TrailingNumberParser().parse("March 0 0 0 0") == []


def test_trailing_number_needs_number_at_line_end():
    assert TrailingNumberParser().parse("March 10 20 30 kWh") == []


def test_fallback_recovers_short_rows(report):
    text = report(months=["January", "February"]) + "\nMarch 120.5 130.2 5.0 1900.0"
    values = MonthlyTableParser().parse_monthly_values(text)

    assert values == {"january": 1850.3, "february": 1700.0, "march": 1900.0}


def test_primary_result_wins_over_fallback():
    text = "\n".join([
        "January 120.5 130.2 5.0 2000.0 1850.3",
        "january 1 2 3 999",
    ])
    readings = MonthlyTableParser().parse(text)

    assert len(readings) == 1
    assert readings[0].value == 1850.3
    assert readings[0].source == "line_anchored"


def test_fallback_skipped_when_all_months_found(report):
    text = report() + "\nmarch 1 2 3 4 5"
    readings = MonthlyTableParser().parse(text)

    assert len(readings) == 12
    assert all(r.source == "line_anchored" for r in readings)


def test_fallback_runs_when_months_missing():
    text = "\n".join([
        "January 120.5 130.2 5.0 2000.0 1850.3",
        "February 1 2 3 50",
    ])
    readings = {r.key: r for r in MonthlyTableParser().parse(text)}

    assert readings["february"].value == 50.0
    assert readings["february"].source == "trailing_number"


def test_parse_without_months_is_empty():
    assert MonthlyTableParser().parse("nothing to see here\n12 34 56") == []
    assert MonthlyTableParser().parse("") == []


def test_custom_strategy_order():
    parser = MonthlyTableParser(strategies=[TrailingNumberParser()])
    values = parser.parse_monthly_values("January 120.5 130.2 5.0 1850.3")

    assert values == {"january": 1850.3}


def test_long_document():
    row = "January 120.5 130.2 5.0 2000.0 1850.3\n"
    filler = "Lorem ipsum dolor sit amet 42\n" * 50000
    values = MonthlyTableParser().parse_monthly_values(filler + row + filler)

    assert values == {"january": 1850.3}


def test_trailing_number_spans_wrapped_rows():
    # The column run may continue onto the next line
    text = "March 1 2\n3 4\nApril"
    assert values_of(TrailingNumberParser().parse(text)) == {"march": 4.0}


def test_non_ascii_digits_are_not_numbers():
    text = "January ١٢٠ ١ ٢ ٣ ٥٠٠"

    assert LineAnchoredParser().parse(text) == []
    assert TrailingNumberParser().parse(text) == []
    assert MonthlyTableParser().parse_monthly_values(text) == {}


def test_fullwidth_digits_are_not_numbers():
    text = "January １２０ １ ２ ３ ５００"
    assert MonthlyTableParser().parse_monthly_values(text) == {}
