"""Data contracts for the projection report."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from growth_projection.schemas.config import Configuration


class ProjectionRow(BaseModel):
    """
    One year of the projection table, all scenarios side by side.

    realValues/nominalValues are index-aligned with Report.scenarios.
    withdrawnReal/withdrawnNominal are the largest cumulative withdrawal seen
    across the scenarios at this year, reported once rather than per scenario.
    """

    model_config = ConfigDict(extra="forbid", ser_json_inf_nan="null")

    year: int
    realValues: List[float]
    nominalValues: List[float]
    withdrawnReal: float
    withdrawnNominal: float


class Totals(BaseModel):
    model_config = ConfigDict(extra="forbid", ser_json_inf_nan="null")

    totalInvestedToday: float
    totalInvestedActual: float
    totalWithdrawnReal: float
    totalWithdrawnNominal: float
    averageYearlyIncreaseReal: float
    averageYearlyIncreaseNominal: float


class WithdrawalSummary(BaseModel):
    model_config = ConfigDict(extra="forbid", ser_json_inf_nan="null")

    startYear: Optional[int]
    monthlyAmount: float
    depletionYear: Optional[int]


class ScenarioSummary(BaseModel):
    """Final outcome of a single rate. Ratios are None when nothing was invested."""

    model_config = ConfigDict(extra="forbid", ser_json_inf_nan="null")

    index: int
    annualRate: float
    enabled: bool
    realMonthlyRate: float
    nominalMonthlyRate: float
    finalValueReal: float
    finalValueNominal: float
    timesIncreaseReal: Optional[float]
    timesIncreaseNominal: Optional[float]
    depletionYear: Optional[int]
    totalWithdrawnReal: float
    totalWithdrawnNominal: float


class Report(BaseModel):
    model_config = ConfigDict(extra="forbid", ser_json_inf_nan="null")

    inputs: Configuration
    warnings: List[str] = []
    totals: Totals
    withdrawal: WithdrawalSummary
    scenarios: List[ScenarioSummary]
    projections: List[ProjectionRow]
