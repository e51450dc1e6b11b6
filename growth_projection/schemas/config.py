"""Data contract for a normalized projection configuration."""

from __future__ import annotations

import math
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

MIN_YEARS = 1
MAX_YEARS = 60
MIN_ANNUAL_RATE = -0.9999
SCENARIO_COUNT = 4


class Configuration(BaseModel):
    """Validated, immutable inputs for a projection.

    Field names are the camelCase keys used on the wire. ``contributionYears``
    and ``startWithdrawalYear`` use ``None`` for "unset": contributions run for
    the whole horizon, and there is no withdrawal phase.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, ser_json_inf_nan="null")

    initialInvestment: float = Field(ge=0, allow_inf_nan=False)
    monthlyInvestment: float = Field(ge=0, allow_inf_nan=False)
    years: int = Field(ge=MIN_YEARS, le=MAX_YEARS)
    contributionYears: Optional[int] = Field(default=None, ge=0, le=MAX_YEARS)
    startWithdrawalYear: Optional[int] = Field(default=None, ge=1, le=MAX_YEARS)
    monthlyWithdrawal: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    inflationRate: float = Field(ge=MIN_ANNUAL_RATE, allow_inf_nan=False)
    enabledRates: Tuple[bool, bool, bool, bool] = (True, True, True, True)
    rates: Tuple[float, float, float, float]

    @model_validator(mode="after")
    def ensure_bounds(self) -> "Configuration":
        if self.contributionYears is not None and self.contributionYears > self.years:
            raise ValueError("contributionYears must not exceed years")
        if self.startWithdrawalYear is not None and self.startWithdrawalYear > self.years:
            raise ValueError("startWithdrawalYear must not exceed years")
        if not any(self.enabledRates):
            raise ValueError("at least one rate must be enabled")
        for rate in self.rates:
            if not math.isfinite(rate) or rate < MIN_ANNUAL_RATE:
                raise ValueError(f"rates must be finite and >= {MIN_ANNUAL_RATE}")
        return self

    @property
    def effective_contribution_years(self) -> int:
        return self.years if self.contributionYears is None else self.contributionYears

    @property
    def has_withdrawal_phase(self) -> bool:
        return self.startWithdrawalYear is not None and self.monthlyWithdrawal > 0
