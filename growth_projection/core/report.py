"""Combine per-scenario runs into the projection report."""

from __future__ import annotations

import logging
from typing import List, Optional

from growth_projection.core.normalize import normalize
from growth_projection.core.rates import MONTHS_PER_YEAR, compound, monthly_inflation_rate
from growth_projection.core.simulator import EPSILON, ScenarioRun, simulate_all
from growth_projection.schemas.config import Configuration
from growth_projection.schemas.report import (
    ProjectionRow,
    Report,
    ScenarioSummary,
    Totals,
    WithdrawalSummary,
)

logger = logging.getLogger(__name__)

NEGATIVE_REAL_RATE_WARNING = (
    "One or more real monthly rates are negative (inflation exceeds annual return)."
)


def total_invested_today(config: Configuration) -> float:
    """Initial plus every monthly contribution, in today's dollars."""
    months = config.effective_contribution_years * MONTHS_PER_YEAR
    return config.initialInvestment + config.monthlyInvestment * months


def total_invested_actual(config: Configuration) -> float:
    """Initial plus monthly contributions grown with inflation (future dollars)."""
    months = config.effective_contribution_years * MONTHS_PER_YEAR
    inflation_monthly = monthly_inflation_rate(config.inflationRate)
    if abs(inflation_monthly) < EPSILON or not config.monthlyInvestment:
        contributed = config.monthlyInvestment * months
    else:
        growth = compound(1 + inflation_monthly, months)
        contributed = config.monthlyInvestment * ((growth - 1) / inflation_monthly)
    return config.initialInvestment + contributed


def _ratio(value: float, invested: float) -> Optional[float]:
    return value / invested if invested > 0 else None


def _projection_rows(runs: List[ScenarioRun]) -> List[ProjectionRow]:
    rows: List[ProjectionRow] = []
    for snapshots in zip(*(run.rows for run in runs)):
        assert len({snapshot.year for snapshot in snapshots}) == 1
        rows.append(
            ProjectionRow(
                year=snapshots[0].year,
                realValues=[snapshot.real for snapshot in snapshots],
                nominalValues=[snapshot.nominal for snapshot in snapshots],
                # one withdrawal figure per year: the largest across scenarios
                withdrawnReal=max(snapshot.withdrawn_real for snapshot in snapshots),
                withdrawnNominal=max(snapshot.withdrawn_nominal for snapshot in snapshots),
            )
        )
    return rows


def _scenario_summary(
    config: Configuration,
    run: ScenarioRun,
    invested_today: float,
    invested_actual: float,
) -> ScenarioSummary:
    return ScenarioSummary(
        index=run.index,
        annualRate=run.annual_rate,
        enabled=config.enabledRates[run.index],
        realMonthlyRate=run.monthly_real_rate,
        nominalMonthlyRate=run.monthly_nominal_rate,
        finalValueReal=run.final_real,
        finalValueNominal=run.final_nominal,
        timesIncreaseReal=_ratio(run.final_real, invested_today),
        timesIncreaseNominal=_ratio(run.final_nominal, invested_actual),
        depletionYear=run.depletion_year,
        totalWithdrawnReal=run.total_withdrawn_real,
        totalWithdrawnNominal=run.total_withdrawn_nominal,
    )


def _warnings(runs: List[ScenarioRun]) -> List[str]:
    warnings: List[str] = []
    if any(run.monthly_real_rate < 0 for run in runs):
        warnings.append(NEGATIVE_REAL_RATE_WARNING)
    return warnings


def compute_report(config: Configuration) -> Report:
    """
    Run all four scenarios for ``config`` and fold them into a Report.

    Conventions:
      - "best" for the average yearly increase only considers enabled rates.
      - Times-increase ratios are None when the invested total is 0.
      - The overall depletion year is the earliest across all scenarios.
    """
    runs = simulate_all(config)

    invested_today = total_invested_today(config)
    invested_actual = total_invested_actual(config)

    projections = _projection_rows(runs)
    last_row = projections[-1]

    enabled_runs = [run for run in runs if config.enabledRates[run.index]]
    best_real = max(run.final_real for run in enabled_runs)
    best_nominal = max(run.final_nominal for run in enabled_runs)

    depletion_years = [run.depletion_year for run in runs if run.depletion_year is not None]
    depletion_year = min(depletion_years) if depletion_years else None

    report = Report(
        inputs=config,
        warnings=_warnings(runs),
        totals=Totals(
            totalInvestedToday=invested_today,
            totalInvestedActual=invested_actual,
            totalWithdrawnReal=last_row.withdrawnReal,
            totalWithdrawnNominal=last_row.withdrawnNominal,
            averageYearlyIncreaseReal=(best_real - invested_today) / config.years,
            averageYearlyIncreaseNominal=(best_nominal - invested_actual) / config.years,
        ),
        withdrawal=WithdrawalSummary(
            startYear=config.startWithdrawalYear,
            monthlyAmount=config.monthlyWithdrawal,
            depletionYear=depletion_year,
        ),
        scenarios=[
            _scenario_summary(config, run, invested_today, invested_actual) for run in runs
        ],
        projections=projections,
    )
    logger.debug(
        "report for %s years: best real %.2f, depletion year %s",
        config.years,
        best_real,
        depletion_year,
    )
    return report


def project(raw: object = None) -> Report:
    """Normalize raw input and compute its report in one step."""
    return compute_report(normalize(raw))
