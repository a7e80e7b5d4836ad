from __future__ import annotations

from math import isclose

import pytest

from growthlab.core.contribution import simulate_contribution_growth


def test_zero_rate_accumulates_deposits_only():
    """
    With no interest the balance is just twelve monthly deposits
    """
    points = simulate_contribution_growth(initial=0, monthly=100, annual_bonus=0, rate=0, years=1)

    assert len(points) == 2
    assert points[1].total == 1200
    assert points[1].contributions == 1200
    assert points[1].interest == 0


def test_lump_sum_compounds_monthly():
    points = simulate_contribution_growth(initial=1000, monthly=0, annual_bonus=0, rate=0.12, years=1)

    assert isclose(points[1].total, 1000 * 1.01**12, rel_tol=1e-12)
    assert round(points[1].total, 2) == 1126.83
    assert points[1].contributions == 1000


def test_year_zero_is_initial_deposit():
    points = simulate_contribution_growth(initial=5000, monthly=250, annual_bonus=1000, rate=0.07, years=3)

    assert points[0].year == 0
    assert points[0].total == 5000
    assert points[0].contributions == 5000
    assert points[0].interest == 0


def test_bonus_lands_after_the_twelfth_month():
    # bonus earns nothing in its first year, then compounds with the rest
    points = simulate_contribution_growth(initial=0, monthly=0, annual_bonus=600, rate=0.12, years=2)

    assert points[1].total == 600
    assert points[1].interest == 0
    assert isclose(points[2].total, 600 * 1.01**12 + 600, rel_tol=1e-12)
    assert points[2].contributions == 1200


def test_monthly_deposit_skips_interest_in_its_own_month():
    points = simulate_contribution_growth(initial=0, monthly=100, annual_bonus=0, rate=0.12, years=1)

    expected = sum(100 * 1.01**k for k in range(12))
    assert isclose(points[1].total, expected, rel_tol=1e-12)


@pytest.mark.parametrize(
    "initial, monthly, annual_bonus, rate, years",
    [
        (0, 100, 0, 0.05, 10),
        (10000, 500, 2000, 0.07, 40),
        (2500, 0, 0, 0.0, 5),
        (0, 0, 0, 0.1, 3),
    ],
)
def test_decomposition_and_monotonic_contributions(initial, monthly, annual_bonus, rate, years):
    points = simulate_contribution_growth(initial, monthly, annual_bonus, rate, years)

    assert len(points) == years + 1
    assert [point.year for point in points] == list(range(years + 1))
    for point in points:
        assert point.interest == point.total - point.contributions
        assert point.contributions + point.interest == pytest.approx(point.total, rel=1e-12)
        assert point.interest >= 0
    for previous, current in zip(points, points[1:]):
        assert current.contributions >= previous.contributions


def test_zero_years_returns_initial_state_only():
    points = simulate_contribution_growth(initial=300, monthly=50, annual_bonus=10, rate=0.05, years=0)

    assert len(points) == 1
    assert points[0].total == 300


def test_negative_and_fractional_inputs_are_clamped():
    points = simulate_contribution_growth(initial=-50, monthly=-10, annual_bonus=-5, rate=-0.2, years=1.8)

    assert len(points) == 2
    for point in points:
        assert point.total == 0
        assert point.contributions == 0
        assert point.interest == 0


def test_identical_inputs_give_identical_output():
    args = dict(initial=1500, monthly=75, annual_bonus=300, rate=0.065, years=12)

    assert simulate_contribution_growth(**args) == simulate_contribution_growth(**args)
