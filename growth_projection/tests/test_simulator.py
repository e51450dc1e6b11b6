from __future__ import annotations

from math import isclose

from growth_projection.core.normalize import normalize
from growth_projection.core.rates import monthly_inflation_rate
from growth_projection.core.simulator import simulate_all, simulate_scenario


def flat_config(**overrides):
    """Zero growth, zero inflation, one year, no contributions unless overridden."""
    raw = {
        "initialInvestment": 0,
        "monthlyInvestment": 0,
        "years": 1,
        "inflationRate": 0.0,
        "rates": [0.0, 0.05, 0.10, 0.15],
    }
    raw.update(overrides)
    return normalize(raw)


def test_zero_rate_zero_inflation_closed_form():
    config = flat_config(initialInvestment=1000, monthlyInvestment=100)

    run = simulate_scenario(config, 0)

    assert len(run.rows) == 1
    assert run.rows[0].year == 1
    assert isclose(run.final_real, 2200.0, abs_tol=0.005)
    assert isclose(run.final_nominal, 2200.0, abs_tol=0.005)
    assert run.depletion_year is None


def test_depletion_detected_in_month_seven():
    config = flat_config(initialInvestment=1200, startWithdrawalYear=1, monthlyWithdrawal=200)

    run = simulate_scenario(config, 0)

    assert run.depletion_year == 1
    assert run.rows[0].real == 0.0
    assert isclose(run.total_withdrawn_real, 1200.0, abs_tol=0.005)


def test_depletion_year_is_the_year_of_the_first_short_month():
    config = flat_config(
        initialInvestment=1200, years=3, startWithdrawalYear=2, monthlyWithdrawal=100
    )

    run = simulate_scenario(config, 0)

    # withdrawals start at month 13 and empty the balance at month 24
    assert [row.real for row in run.rows] == [1200.0, 0.0, 0.0]
    assert run.depletion_year == 3


def test_withdrawal_happens_before_growth_and_contribution():
    config = flat_config(monthlyInvestment=100, startWithdrawalYear=1, monthlyWithdrawal=100)

    run = simulate_scenario(config, 0)

    # month 1 has nothing to withdraw yet; afterwards each deposit is drawn next month
    assert run.depletion_year == 1
    assert isclose(run.final_real, 100.0, abs_tol=0.005)
    assert isclose(run.total_withdrawn_real, 1100.0, abs_tol=0.005)


def test_contribution_window_stops_deposits():
    config = flat_config(initialInvestment=500, monthlyInvestment=100, years=3, contributionYears=1)

    run = simulate_scenario(config, 0)

    assert [row.real for row in run.rows] == [1700.0, 1700.0, 1700.0]


def test_zero_contribution_years_means_no_deposits():
    config = flat_config(initialInvestment=500, monthlyInvestment=100, years=2, contributionYears=0)

    run = simulate_scenario(config, 0)

    assert run.final_real == 500.0


def test_nominal_snapshot_scales_by_compounded_inflation():
    config = normalize({"years": 5, "inflationRate": 0.03, "rates": [0.07, 0.0, 0.1, 0.2]})

    run = simulate_scenario(config, 0)

    for row in run.rows:
        assert isclose(row.nominal, row.real * 1.03 ** row.year, abs_tol=0.01)


def test_nominal_withdrawals_carry_monthly_inflation():
    config = normalize(
        {
            "initialInvestment": 100000,
            "monthlyInvestment": 0,
            "years": 1,
            "inflationRate": 0.12,
            "rates": [0.12, 0.12, 0.12, 0.12],
            "startWithdrawalYear": 1,
            "monthlyWithdrawal": 100,
        }
    )

    run = simulate_scenario(config, 0)

    step = 1 + monthly_inflation_rate(0.12)
    expected = sum(100 * step ** month for month in range(1, 13))
    assert isclose(run.total_withdrawn_real, 1200.0, abs_tol=0.005)
    assert isclose(run.total_withdrawn_nominal, expected, abs_tol=0.1)
    assert run.total_withdrawn_nominal > run.total_withdrawn_real


def test_negative_real_rate_propagates_without_clamping():
    config = normalize(
        {
            "initialInvestment": 1000,
            "monthlyInvestment": 0,
            "years": 2,
            "inflationRate": 0.10,
            "rates": [0.0, 0.05, 0.10, 0.20],
        }
    )

    runs = simulate_all(config)

    assert runs[0].monthly_real_rate < 0
    assert runs[0].final_real < 1000
    assert isclose(runs[2].final_real, 1000.0, abs_tol=0.05)


def test_balance_never_negative_under_heavy_withdrawals():
    config = normalize(
        {
            "initialInvestment": 20000,
            "monthlyInvestment": 250,
            "years": 40,
            "contributionYears": 10,
            "inflationRate": 0.08,
            "rates": [-0.5, -0.1, 0.0, 0.3],
            "startWithdrawalYear": 5,
            "monthlyWithdrawal": 3000,
        }
    )

    for run in simulate_all(config):
        assert len(run.rows) == 40
        for row in run.rows:
            assert row.real >= 0
            assert row.nominal >= 0
        withdrawn = [row.withdrawn_real for row in run.rows]
        assert withdrawn == sorted(withdrawn)
        assert run.depletion_year is not None
        assert 5 <= run.depletion_year <= 40


def test_every_rate_is_simulated_even_when_disabled():
    config = normalize({"enabledRates": [True, False, False, False]})

    runs = simulate_all(config)

    assert [run.index for run in runs] == [0, 1, 2, 3]
    assert all(len(run.rows) == config.years for run in runs)


def test_huge_rates_do_not_raise():
    config = normalize({"years": 60, "inflationRate": 1e300, "rates": [1e300, 0, 0, 0]})

    runs = simulate_all(config)

    assert len(runs) == 4
