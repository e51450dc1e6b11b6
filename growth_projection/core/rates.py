"""Annual to monthly rate conversions.

All conversions are geometric: twelve compounded monthly steps reproduce the
annual rate exactly. A negative real rate (inflation above the nominal return)
is a valid result and is returned as-is.
"""

from __future__ import annotations

import math

MONTHS_PER_YEAR = 12


def monthly_nominal_rate(annual_rate: float) -> float:
    return (1 + annual_rate) ** (1 / MONTHS_PER_YEAR) - 1


def monthly_inflation_rate(inflation_rate: float) -> float:
    return (1 + inflation_rate) ** (1 / MONTHS_PER_YEAR) - 1


def monthly_real_rate(annual_rate: float, inflation_rate: float) -> float:
    # growth above inflation, compounded monthly
    return ((1 + annual_rate) / (1 + inflation_rate)) ** (1 / MONTHS_PER_YEAR) - 1


def compound(factor: float, periods: int) -> float:
    """factor ** periods, saturating to infinity instead of raising."""
    try:
        return factor ** periods
    except OverflowError:
        return math.inf
