"""Month-by-month simulation of a single rate scenario."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

from growth_projection.core.rates import (
    MONTHS_PER_YEAR,
    compound,
    monthly_inflation_rate,
    monthly_nominal_rate,
    monthly_real_rate,
)
from growth_projection.schemas.config import Configuration

logger = logging.getLogger(__name__)

EPSILON = 1e-12


@dataclass
class YearSnapshot:
    year: int
    real: float
    nominal: float
    withdrawn_real: float
    withdrawn_nominal: float


@dataclass
class ScenarioRun:
    index: int
    annual_rate: float
    monthly_real_rate: float
    monthly_nominal_rate: float
    rows: List[YearSnapshot] = field(default_factory=list)
    depletion_year: Optional[int] = None
    total_withdrawn_real: float = 0.0
    total_withdrawn_nominal: float = 0.0

    @property
    def final_real(self) -> float:
        return self.rows[-1].real if self.rows else 0.0

    @property
    def final_nominal(self) -> float:
        return self.rows[-1].nominal if self.rows else 0.0


def to_cents(amount: float) -> float:
    return round(amount, 2)


def _inflate(amount: float, factor: float) -> float:
    # 0 * inf is nan; an empty amount stays empty however large the factor
    return amount * factor if amount else 0.0


def _floor_dust(balance: float) -> float:
    return 0.0 if balance < EPSILON else balance


def simulate_scenario(config: Configuration, index: int) -> ScenarioRun:
    """
    Simulate one rate (config.rates[index]) over config.years * 12 months.

    Order of operations (per month):
      1) Snap float dust to zero.
      2) Withdraw, once the withdrawal phase has started. The amount is capped
         at the balance; the first month it cannot be met in full marks the
         depletion year.
      3) Apply real (inflation-adjusted) growth, withdrawal phase included.
      4) Add the monthly contribution while inside the contribution window.
      5) Snap float dust to zero again.
    Every 12th month records a YearSnapshot. Money is rounded to cents after
    each step. Contributions and withdrawals are in today's dollars.
    """
    annual_rate = config.rates[index]
    real_rate = monthly_real_rate(annual_rate, config.inflationRate)
    inflation_step = 1 + monthly_inflation_rate(config.inflationRate)

    total_months = config.years * MONTHS_PER_YEAR
    contribution_months = config.effective_contribution_years * MONTHS_PER_YEAR
    withdrawal_start: Optional[int] = None
    if config.has_withdrawal_phase:
        withdrawal_start = (config.startWithdrawalYear - 1) * MONTHS_PER_YEAR + 1

    deposit = to_cents(config.monthlyInvestment)
    requested = to_cents(config.monthlyWithdrawal)

    run = ScenarioRun(
        index=index,
        annual_rate=annual_rate,
        monthly_real_rate=real_rate,
        monthly_nominal_rate=monthly_nominal_rate(annual_rate),
    )

    balance = to_cents(config.initialInvestment)
    withdrawn_real = 0.0
    withdrawn_nominal = 0.0

    for month in range(1, total_months + 1):
        balance = _floor_dust(balance)

        # ---------- Withdrawal ----------
        if withdrawal_start is not None and month >= withdrawal_start:
            actual = to_cents(min(requested, max(balance, 0.0)))
            balance = to_cents(balance - actual)
            withdrawn_real = to_cents(withdrawn_real + actual)
            withdrawn_nominal = to_cents(
                withdrawn_nominal + _inflate(actual, compound(inflation_step, month))
            )
            if requested - actual > EPSILON and run.depletion_year is None:
                run.depletion_year = math.ceil(month / MONTHS_PER_YEAR)
                logger.debug(
                    "rate %s depleted in year %s (month %s)", annual_rate, run.depletion_year, month
                )

        # ---------- Growth ----------
        balance = to_cents(balance * (1 + real_rate))

        # ---------- Contribution ----------
        if month <= contribution_months:
            balance = to_cents(balance + deposit)

        balance = _floor_dust(balance)

        if month % MONTHS_PER_YEAR == 0:
            year = month // MONTHS_PER_YEAR
            run.rows.append(
                YearSnapshot(
                    year=year,
                    real=balance,
                    nominal=to_cents(_inflate(balance, compound(1 + config.inflationRate, year))),
                    withdrawn_real=withdrawn_real,
                    withdrawn_nominal=withdrawn_nominal,
                )
            )

    run.total_withdrawn_real = withdrawn_real
    run.total_withdrawn_nominal = withdrawn_nominal
    return run


def simulate_all(config: Configuration) -> List[ScenarioRun]:
    """Run every rate, enabled or not. Runs share no state."""
    return [simulate_scenario(config, index) for index in range(len(config.rates))]
