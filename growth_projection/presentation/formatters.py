"""Display helpers for report values (US dollar, en-US grouping)."""

from __future__ import annotations

import math
from typing import Optional

PLACEHOLDER = "--"

_COMPACT_STEPS = [
    (1, ""),
    (1e3, "K"),
    (1e6, "M"),
    (1e9, "B"),
    (1e12, "T"),
]


def _is_displayable(value: Optional[float]) -> bool:
    return value is not None and not isinstance(value, bool) and math.isfinite(value)


def _signed(prefix: str, value: float, body: str) -> str:
    return f"-{prefix}{body}" if value < 0 and body.strip("0.,") else f"{prefix}{body}"


def _trim(text: str) -> str:
    return text.rstrip("0").rstrip(".") if "." in text else text


def format_currency(value: Optional[float]) -> str:
    """$1,234 style, whole dollars."""
    if not _is_displayable(value):
        return PLACEHOLDER
    return _signed("$", value, f"{abs(value):,.0f}")


def format_compact_currency(value: Optional[float]) -> str:
    """$1.2K / $3.4M style, at most one decimal."""
    if not _is_displayable(value):
        return PLACEHOLDER
    magnitude = abs(value)
    body = _trim(f"{magnitude:.1f}")
    for position, (threshold, suffix) in enumerate(_COMPACT_STEPS):
        if magnitude < threshold:
            break
        scaled = round(magnitude / threshold, 1)
        # 999,960 shows as $1M rather than $1000K
        if scaled >= 1000 and position + 1 < len(_COMPACT_STEPS):
            threshold, suffix = _COMPACT_STEPS[position + 1]
            scaled = round(magnitude / threshold, 1)
        body = _trim(f"{scaled:.1f}") + suffix
    return _signed("$", value, body)


def format_percent(value: Optional[float]) -> str:
    """0.0525 -> 5.25%, 0.05 -> 5%."""
    if not _is_displayable(value):
        return PLACEHOLDER
    return _signed("", value, _trim(f"{abs(value) * 100:,.2f}")) + "%"


def format_ratio(value: Optional[float]) -> str:
    if not _is_displayable(value):
        return PLACEHOLDER
    return f"{value:,.2f}x"


def format_integer(value: Optional[float]) -> str:
    if not _is_displayable(value):
        return PLACEHOLDER
    return f"{value:,.0f}"
