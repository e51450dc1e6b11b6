from __future__ import annotations

import csv
import io

from growth_projection import compute_report, normalize
from growth_projection.presentation.csv_export import build_csv


def withdrawal_report():
    return compute_report(
        normalize(
            {
                "initialInvestment": 10000,
                "monthlyInvestment": 100,
                "years": 3,
                "startWithdrawalYear": 2,
                "monthlyWithdrawal": 150,
            }
        )
    )


def parse(text: str) -> list:
    return list(csv.reader(io.StringIO(text)))


def test_header_names_each_rate():
    rows = parse(build_csv(withdrawal_report()))

    assert rows[0] == ["Year", "Rate 1 (5%)", "Rate 2 (10%)", "Rate 3 (15%)", "Rate 4 (20%)", "Withdrawn"]
    assert len(rows) == 4
    assert [row[0] for row in rows[1:]] == ["1", "2", "3"]


def test_view_selects_real_or_nominal_values():
    report = withdrawal_report()

    real_rows = parse(build_csv(report, "real"))
    nominal_rows = parse(build_csv(report, "nominal"))

    last = report.projections[-1]
    assert real_rows[-1][1:] == [f"{value:.2f}" for value in last.realValues] + [f"{last.withdrawnReal:.2f}"]
    assert nominal_rows[-1][1:] == [f"{value:.2f}" for value in last.nominalValues] + [
        f"{last.withdrawnNominal:.2f}"
    ]
    assert real_rows[-1] != nominal_rows[-1]


def test_default_view_is_real():
    report = withdrawal_report()

    assert build_csv(report) == build_csv(report, "real")
