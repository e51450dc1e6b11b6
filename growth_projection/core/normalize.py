"""Coerce arbitrary, partial input into a valid Configuration.

Conventions:
  - Missing, non-numeric, NaN or infinite values fall back to DEFAULT_INPUTS.
  - ``contributionYears`` and ``startWithdrawalYear`` stay None ("unset") when
    absent; 0 is a real value for contributionYears and must not stand in
    for "unset".
  - Rounding is half-up, so 2.5 years becomes 3.
  - normalize() never raises, and normalize(normalize(x)) == normalize(x).
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from growth_projection.schemas.config import (
    MAX_YEARS,
    MIN_ANNUAL_RATE,
    MIN_YEARS,
    SCENARIO_COUNT,
    Configuration,
)

logger = logging.getLogger(__name__)

DEFAULT_INPUTS: Dict[str, Any] = {
    "initialInvestment": 5000.0,
    "monthlyInvestment": 300.0,
    "years": 30,
    "contributionYears": None,
    "startWithdrawalYear": None,
    "monthlyWithdrawal": 0.0,
    "inflationRate": 0.02,
    "enabledRates": (True, True, True, True),
    "rates": (0.05, 0.10, 0.15, 0.20),
}


def _clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _to_finite(value: Any) -> Optional[float]:
    """Return value as a finite float, or None when it cannot be one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    elif not isinstance(value, (numbers.Real, Decimal)):
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return parsed if math.isfinite(parsed) else None


def _amount(raw: Mapping, key: str) -> float:
    parsed = _to_finite(raw.get(key))
    if parsed is None:
        parsed = DEFAULT_INPUTS[key]
    return max(0.0, float(parsed))


def _rate(value: Any, fallback: float) -> float:
    parsed = _to_finite(value)
    if parsed is None:
        parsed = fallback
    return max(MIN_ANNUAL_RATE, parsed)


def _optional_year(value: Any, low: int, high: int) -> Optional[int]:
    parsed = _to_finite(value)
    if parsed is None:
        return None
    return _clamp(_round_half_up(parsed), low, high)


def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


def _rates(value: Any) -> tuple:
    entries = _as_list(value)
    defaults = DEFAULT_INPUTS["rates"]
    return tuple(
        _rate(entries[index] if index < len(entries) else None, defaults[index])
        for index in range(SCENARIO_COUNT)
    )


def _enabled_rates(value: Any) -> tuple:
    entries = _as_list(value)
    flags = [
        entries[index] if index < len(entries) and isinstance(entries[index], bool) else True
        for index in range(SCENARIO_COUNT)
    ]
    if not any(flags):
        # aggregate "best scenario" math needs at least one enabled rate
        logger.debug("all rates disabled; re-enabling rate 1")
        flags[0] = True
    return tuple(flags)


def normalize(raw: Any = None) -> Configuration:
    """Build a Configuration from any input shape; never raises."""
    if isinstance(raw, BaseModel):
        raw = raw.model_dump()
    if not isinstance(raw, Mapping):
        raw = {}

    parsed_years = _to_finite(raw.get("years"))
    if parsed_years is None:
        parsed_years = DEFAULT_INPUTS["years"]
    years = _clamp(_round_half_up(parsed_years), MIN_YEARS, MAX_YEARS)
    if years != parsed_years:
        logger.debug("years adjusted from %s to %s", parsed_years, years)

    inflation = _rate(raw.get("inflationRate"), DEFAULT_INPUTS["inflationRate"])

    return Configuration(
        initialInvestment=_amount(raw, "initialInvestment"),
        monthlyInvestment=_amount(raw, "monthlyInvestment"),
        years=years,
        contributionYears=_optional_year(raw.get("contributionYears"), 0, years),
        startWithdrawalYear=_optional_year(raw.get("startWithdrawalYear"), 1, years),
        monthlyWithdrawal=_amount(raw, "monthlyWithdrawal"),
        inflationRate=inflation,
        enabledRates=_enabled_rates(raw.get("enabledRates")),
        rates=_rates(raw.get("rates")),
    )


def default_configuration() -> Configuration:
    return normalize(DEFAULT_INPUTS)
