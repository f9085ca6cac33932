# tests/conftest.py
import pytest

# Grid column values; they add up to 22000.0
GRID_VALUES = {
    "January": 1850.3,
    "February": 1700.0,
    "March": 1900.0,
    "April": 1950.0,
    "May": 2000.0,
    "June": 2050.0,
    "July": 2100.0,
    "August": 2000.0,
    "September": 1800.0,
    "October": 1700.0,
    "November": 1500.0,
    "December": 1449.7,
}


def month_row(month, grid):
    return f"{month} 120.5 130.2 5.0 2000.0 {grid}"


def build_report(months=None, total=None):
    """Report text with a production table for the given months"""
    months = list(GRID_VALUES) if months is None else months
    lines = [
        "Solar Production Estimate",
        "Site: Rooftop Array",
        "",
        "Month GHI POA Shaded Nameplate Grid",
    ]
    lines += [month_row(m, GRID_VALUES[m]) for m in months]
    lines.append("")
    if total is not None:
        lines.append(f"Total Energy to Grid {total}")
    lines.append("Page 1 of 2")
    return "\n".join(lines)


@pytest.fixture
def report():
    return build_report


@pytest.fixture
def full_year_values():
    return {m.lower(): v for m, v in GRID_VALUES.items()}
