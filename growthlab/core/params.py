"""Clamp raw simulator inputs into prepared parameter records.

Every simulator is a total function: out-of-range input is pulled to the
nearest boundary value instead of being rejected.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class GrowthParams:
    principal: float
    rate: float
    years: int
    frequency: int


@dataclass(frozen=True)
class ContributionParams:
    initial: float
    monthly: float
    annual_bonus: float
    rate: float
    years: int


@dataclass(frozen=True)
class TimingParams:
    monthly: float
    rate: float
    total_months: int
    investing_months: int
    lag_months: int


def _non_negative(value: float) -> float:
    return max(value, 0)


def _whole(value: float, minimum: int = 0) -> int:
    return max(math.floor(value), minimum)


def prepare_growth_params(
    principal: float, rate: float, years: float, frequency: float
) -> GrowthParams:
    return GrowthParams(
        principal=_non_negative(principal),
        rate=_non_negative(rate),
        years=_whole(years),
        frequency=_whole(frequency, minimum=1),
    )


def prepare_contribution_params(
    initial: float, monthly: float, annual_bonus: float, rate: float, years: float
) -> ContributionParams:
    return ContributionParams(
        initial=_non_negative(initial),
        monthly=_non_negative(monthly),
        annual_bonus=_non_negative(annual_bonus),
        rate=_non_negative(rate),
        years=_whole(years),
    )


def prepare_timing_params(
    monthly: float,
    years_investing: float,
    delay_years: float,
    rate: float,
    horizon_years: float,
) -> TimingParams:
    """Convert the year-based timing inputs to whole months."""
    return TimingParams(
        monthly=_non_negative(monthly),
        rate=_non_negative(rate),
        total_months=_whole(horizon_years * MONTHS_PER_YEAR),
        investing_months=_whole(years_investing * MONTHS_PER_YEAR),
        lag_months=_whole(delay_years * MONTHS_PER_YEAR),
    )
