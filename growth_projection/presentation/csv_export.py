"""Flatten the projection table to CSV for a chosen view."""

from __future__ import annotations

import csv
import io
from typing import List

from growth_projection.presentation.formatters import format_percent
from growth_projection.schemas.export import ViewMode
from growth_projection.schemas.report import Report


def header_row(report: Report) -> List[str]:
    return (
        ["Year"]
        + [
            f"Rate {scenario.index + 1} ({format_percent(scenario.annualRate)})"
            for scenario in report.scenarios
        ]
        + ["Withdrawn"]
    )


def build_csv(report: Report, view: ViewMode = "real") -> str:
    """
    One line per projection year. ``view`` picks real (today's dollars) or
    nominal (future dollars) values for both the balances and the withdrawn
    column.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(header_row(report))
    for row in report.projections:
        if view == "nominal":
            values, withdrawn = row.nominalValues, row.withdrawnNominal
        else:
            values, withdrawn = row.realValues, row.withdrawnReal
        writer.writerow([row.year] + [f"{value:.2f}" for value in values] + [f"{withdrawn:.2f}"])
    return buffer.getvalue()
