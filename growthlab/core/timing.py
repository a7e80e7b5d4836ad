"""Cost of delay: the same deposit plan started now vs. later."""

from __future__ import annotations

import logging

from growthlab.core.params import MONTHS_PER_YEAR, prepare_timing_params
from growthlab.schemas.series import TimingPoint

logger = logging.getLogger(__name__)


def simulate_start_timing(
    monthly: float,
    years_investing: float,
    delay_years: float,
    rate: float,
    horizon_years: float,
) -> tuple[TimingPoint, ...]:
    """Step two savers month by month and sample them on whole years.

    The early saver deposits in months 1..investing; the late saver deposits
    for the same number of months after the lag. Both balances keep compounding
    for the whole horizon. Months past the last full year are simulated but
    never sampled.
    """
    params = prepare_timing_params(
        monthly, years_investing, delay_years, rate, horizon_years
    )
    monthly_rate = params.rate / MONTHS_PER_YEAR
    late_stop = params.lag_months + params.investing_months

    early_balance = 0.0
    late_balance = 0.0
    points: list[TimingPoint] = [
        TimingPoint(year=0, early=early_balance, late=late_balance)
    ]

    for month in range(1, params.total_months + 1):
        early_balance *= 1 + monthly_rate
        late_balance *= 1 + monthly_rate

        if month <= params.investing_months:
            early_balance += params.monthly
        if params.lag_months < month <= late_stop:
            late_balance += params.monthly

        if month % MONTHS_PER_YEAR == 0:
            points.append(
                TimingPoint(
                    year=month // MONTHS_PER_YEAR,
                    early=early_balance,
                    late=late_balance,
                )
            )

    logger.debug("timing series %s -> %d points", params, len(points))
    return tuple(points)
