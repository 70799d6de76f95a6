"""Numeric normalization for monetary input and display"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity"""
    return math.floor(value + 0.5)


def round2(value: float) -> float:
    """
    Round to cents on the scaled value.

    Removes binary floating-point artifacts: round2(0.1 + 0.2) == 0.3
    """
    return round_half_up(value * 100) / 100


def parse_numeric_input(raw: str | None) -> float:
    """
    Parse free-text monetary input into a two-decimal number.

    Everything except digits, "." and "-" is stripped, then the longest
    leading decimal literal is read ("$1,234.56" -> 1234.56, "1.2.3" -> 1.2).
    Returns 0 for empty, unparseable or non-finite input; never raises.
    """
    if not raw:
        return 0.0
    cleaned = _NON_NUMERIC.sub("", raw)
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return 0.0

    parsed = float(match.group())
    if not math.isfinite(parsed):
        return 0.0
    return round2(parsed)


def sanitize_numeric_string(value: float) -> str:
    """Render a number rounded to cents without padding or scientific notation"""
    rounded = round2(value)
    if rounded.is_integer():
        return str(int(rounded))
    return format(Decimal(repr(rounded)), "f")


def format_currency(amount: float) -> str:
    """Whole-dollar display string: 1000 -> "$1,000", -500 -> "-$500" """
    rounded = round2(amount)
    dollars = Decimal(repr(abs(rounded))).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 and dollars else ""
    return f"{sign}${dollars:,}"


def format_percent(value: float) -> str:
    """One decimal place, trailing ".0" dropped: 33.33 -> "33.3%", 50 -> "50%" """
    rounded = round_half_up(value * 10) / 10
    if rounded.is_integer():
        return f"{int(rounded)}%"
    return f"{rounded:.1f}%"
