"""Query-string encoding of projection inputs for shareable links.

Percentage fields (inflation, rate1..rate4) are stored x100, so 0.05 is
written as "5". Unset optional years are written as empty strings, which the
normalizer reads back as "unset".
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from growth_projection.schemas.config import SCENARIO_COUNT, Configuration

AMOUNT_KEYS = {
    "initial": "initialInvestment",
    "monthly": "monthlyInvestment",
    "years": "years",
    "contributionYears": "contributionYears",
    "startWithdrawalYear": "startWithdrawalYear",
    "withdrawal": "monthlyWithdrawal",
}
PERCENT_KEYS = {
    "inflation": "inflationRate",
}
RATE_KEYS = [f"rate{i + 1}" for i in range(SCENARIO_COUNT)]
ENABLED_KEYS = [f"enabled{i + 1}" for i in range(SCENARIO_COUNT)]

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


def _percent_to_fraction(text: Any) -> Any:
    try:
        return float(str(text).strip()) / 100
    except ValueError:
        # leave it for the normalizer to default
        return text


def _flag(text: Any) -> Any:
    word = str(text).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return None


def _number_text(value: float) -> str:
    if float(value).is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(float(value))


def _percent_text(fraction: float) -> str:
    # 0.07 * 100 is 7.000000000000001
    return _number_text(round(fraction * 100, 10))


def parse_query(params: Mapping) -> Optional[Dict[str, Any]]:
    """
    Turn query parameters into a raw input dict for ``normalize``.

    Returns None when none of the known keys are present, so callers can fall
    back to the defaults. Unknown keys are ignored.
    """
    known = set(AMOUNT_KEYS) | set(PERCENT_KEYS) | set(RATE_KEYS) | set(ENABLED_KEYS)
    if not any(key in params for key in known):
        return None

    raw: Dict[str, Any] = {}
    for key, field_name in AMOUNT_KEYS.items():
        if key in params:
            raw[field_name] = params.get(key)
    for key, field_name in PERCENT_KEYS.items():
        if key in params:
            raw[field_name] = _percent_to_fraction(params.get(key))

    rates: List[Any] = [
        _percent_to_fraction(params.get(key)) if key in params else None for key in RATE_KEYS
    ]
    raw["rates"] = rates
    raw["enabledRates"] = [_flag(params.get(key)) if key in params else None for key in ENABLED_KEYS]
    return raw


def encode_query(config: Configuration) -> Dict[str, str]:
    """Inverse of ``parse_query`` for a normalized configuration."""
    params: Dict[str, str] = {}
    for key, field_name in AMOUNT_KEYS.items():
        value = getattr(config, field_name)
        params[key] = "" if value is None else _number_text(value)
    for key, field_name in PERCENT_KEYS.items():
        params[key] = _percent_text(getattr(config, field_name))
    for key, rate in zip(RATE_KEYS, config.rates):
        params[key] = _percent_text(rate)
    for key, enabled in zip(ENABLED_KEYS, config.enabledRates):
        params[key] = "1" if enabled else "0"
    return params
